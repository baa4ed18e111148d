# MIT License (see LICENSE)
"""
Energy bookkeeping for the oscillator.

With no damping and no external force the mechanical energy
    E = ½·k·y² + ½·m·v²
is conserved, so its drift over a run measures integration error. With
damping or forcing E is still well defined (it is the instantaneous
mechanical energy) but no longer constant.
"""
from __future__ import annotations
from typing import Iterable

import numpy as np

from ..types import Parameters, State


def kinetic_energy(mass: float, velocity: float) -> float:
    """T = ½·m·v² in Joules."""
    return 0.5 * mass * velocity * velocity


def potential_energy(spring_constant: float, position: float) -> float:
    """Elastic energy U = ½·k·y² in Joules."""
    return 0.5 * spring_constant * position * position


def mechanical_energy(params: Parameters, state: State) -> float:
    """Total mechanical energy T + U at the given state."""
    return (
        potential_energy(params.spring_constant, state.position)
        + kinetic_energy(params.mass, state.velocity)
    )


def energy_drift(energies: Iterable[float]) -> float:
    """
    Maximum relative deviation of an energy series from its first sample.

    Returns:
        max |E_i − E_0| / |E_0|, or the absolute deviation if E_0 == 0.
    """
    e = np.asarray(list(energies), dtype=np.float64)
    if e.size == 0:
        return 0.0
    dev = float(np.max(np.abs(e - e[0])))
    return dev if e[0] == 0 else dev / abs(float(e[0]))
