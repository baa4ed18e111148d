# MIT License (see LICENSE)
"""
Numerical core of the mass-spring engine.

This subpackage provides:
    - Integrators: fixed-step RK4 and reference Euler.
    - Forcing: the catalog of external force waveforms.
    - Properties: natural frequency, damping ratio, regime, Q.
    - Invariants: mechanical energy and drift measurement.

Typical usage:
    from mass_spring.core import rk4_step, make_forcing

    drive = make_forcing("sine", {"frequency": 0.5})
    new_state = rk4_step(state, deriv, dt=0.01)
"""
from .integrators import rk4_step, euler_step, integrate, INTEGRATORS
from .forcing import (
    FORCING_PRESETS,
    DEFAULT_PARAMS,
    get_forcing_function,
    make_forcing,
    forcing_params,
)
from .properties import classify_regime, system_properties
from .invariants import (
    kinetic_energy,
    potential_energy,
    mechanical_energy,
    energy_drift,
)

__all__ = [
    # Integrators
    "rk4_step",
    "euler_step",
    "integrate",
    "INTEGRATORS",
    # Forcing
    "FORCING_PRESETS",
    "DEFAULT_PARAMS",
    "get_forcing_function",
    "make_forcing",
    "forcing_params",
    # Properties
    "classify_regime",
    "system_properties",
    # Invariants
    "kinetic_energy",
    "potential_energy",
    "mechanical_energy",
    "energy_drift",
]
