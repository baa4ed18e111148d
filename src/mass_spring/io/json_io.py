# MIT License (see LICENSE)
"""
JSON serialization and deserialization for mass-spring systems.

This module saves and loads a system configuration so that a run can be
described in a file, shared, or resumed. The format is human-readable and
every section is optional.

JSON Schema Overview:
---------------------
{
  "parameters": {                  # Default: constructor defaults
    "mass": float,                 # > 0, default 1.0
    "damping": float,              # >= 0, default 0.1
    "spring_constant": float       # >= 0, default 1.0
  },
  "initial": {
    "y0": float,                   # Default: 1.0
    "v0": float                    # Default: 0.0
  },
  "forcing": {                     # Default: {"name": "none"}
    "name": string,                # Preset key, see core.forcing
    "params": {...}                # Partial overrides of preset defaults
  },
  "state": {                       # Optional: resume a saved run
    "position": float,
    "velocity": float,
    "time": float
  }
}
"""
from __future__ import annotations
import json
import logging
from typing import Any

from ..constants import (
    DEFAULT_MASS,
    DEFAULT_DAMPING,
    DEFAULT_SPRING_CONSTANT,
    DEFAULT_Y0,
    DEFAULT_V0,
)
from ..system import MassSpringSystem
from ..types import State

logger = logging.getLogger(__name__)

_SECTIONS = ("parameters", "initial", "forcing", "state")


def load_system_raw(path: str) -> dict[str, Any]:
    """
    Load raw JSON data from a system file without object construction.

    Args:
        path: Absolute or relative path to the JSON file.

    Returns:
        Dictionary containing the raw JSON data.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_system(path: str) -> MassSpringSystem:
    """
    Load and construct a MassSpringSystem from a JSON file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        InvalidParameterError: If a physical or forcing parameter is invalid.
        UnknownForcingPresetError: If the forcing name is not a known preset.
    """
    system = system_from_json(load_system_raw(path))
    logger.debug("loaded system from %s", path)
    return system


def system_from_json(data: dict[str, Any]) -> MassSpringSystem:
    """
    Build a system from a parsed configuration dictionary.

    Missing sections and fields fall back to the constructor defaults.
    Unknown top-level keys are ignored with a warning.
    """
    unknown = sorted(set(data) - set(_SECTIONS))
    if unknown:
        logger.warning("ignoring unknown system config keys: %s", ", ".join(unknown))

    p = data.get("parameters", {})
    init = data.get("initial", {})
    system = MassSpringSystem(
        mass=p.get("mass", DEFAULT_MASS),
        damping=p.get("damping", DEFAULT_DAMPING),
        spring_constant=p.get("spring_constant", DEFAULT_SPRING_CONSTANT),
        y0=float(init.get("y0", DEFAULT_Y0)),
        v0=float(init.get("v0", DEFAULT_V0)),
    )

    forcing = data.get("forcing")
    if forcing is not None:
        system.set_forcing(forcing.get("name", "none"), forcing.get("params", {}))

    state = data.get("state")
    if state is not None:
        system.restore_state(State(
            position=float(state["position"]),
            velocity=float(state["velocity"]),
            time=float(state.get("time", 0.0)),
        ))

    return system


def system_to_json(system: MassSpringSystem, include_state: bool = True) -> dict[str, Any]:
    """
    Serialize a system to a dictionary.

    Args:
        system: System to serialize.
        include_state: Also store the current state so load_system resumes
            the run instead of starting from the initial conditions.
    """
    y0, v0 = system.initial_conditions
    forcing = system.get_forcing()
    result: dict[str, Any] = {
        "parameters": system.get_parameters().as_dict(),
        "initial": {"y0": y0, "v0": v0},
        "forcing": {"name": forcing.name, "params": forcing.params},
    }
    if include_state:
        result["state"] = system.get_state().as_dict()
    return result


def save_system(
    system: MassSpringSystem,
    path: str,
    indent: int = 2,
    include_state: bool = True,
) -> None:
    """Save a system to a JSON file on disk."""
    data = system_to_json(system, include_state=include_state)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent)
    logger.debug("saved system to %s", path)
