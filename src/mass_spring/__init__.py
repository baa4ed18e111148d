# MIT License (see LICENSE)
"""
mass_spring - Driven mass-spring-damper simulation engine.

Solves m·y'' = −b·y' − k·y + f(t) with a fixed-step 4th-order Runge-Kutta
integrator and exposes the trajectory as immutable State snapshots for
plotting and animation.

Main entry points:
    - MassSpringSystem: Parameters, state and forcing with step/reset.
    - State, Parameters: Value objects for the trajectory and m, b, k.
    - InvalidParameterError, UnknownForcingPresetError: Input errors.

Submodules:
    - core: Integrators, forcing catalog, derived properties, energy.
    - recorder: Sinks that consume state snapshots.
    - io: JSON configuration files.

Example:
    from mass_spring import MassSpringSystem

    system = MassSpringSystem(mass=1.0, damping=0.5, spring_constant=1.0)
    system.set_forcing("step", {"step_time": 0.0})
    state = system.step(0.016)
"""
from .system import MassSpringSystem
from .types import (
    State,
    Parameters,
    ForcingSelection,
    DampingRegime,
    SystemProperties,
)
from .errors import (
    MassSpringError,
    InvalidParameterError,
    UnknownForcingPresetError,
)

__all__ = [
    # Core simulation
    "MassSpringSystem",
    # Values
    "State",
    "Parameters",
    "ForcingSelection",
    "DampingRegime",
    "SystemProperties",
    # Errors
    "MassSpringError",
    "InvalidParameterError",
    "UnknownForcingPresetError",
]
