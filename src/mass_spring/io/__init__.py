# MIT License (see LICENSE)
"""
JSON configuration files for mass-spring systems.

Typical usage:
    from mass_spring.io import load_system, save_system

    system = load_system("resonance.json")
    system.run(0.01, 1000)
    save_system(system, "resonance_t10.json")
"""
from .json_io import (
    load_system_raw,
    load_system,
    system_from_json,
    system_to_json,
    save_system,
)

__all__ = [
    "load_system_raw",
    "load_system",
    "system_from_json",
    "system_to_json",
    "save_system",
]
