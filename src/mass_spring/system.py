# MIT License (see LICENSE)
"""
The driven mass-spring-damper system and its simulation loop.

MassSpringSystem is the single stateful object of the engine. It owns:
- The physical parameters (mass, damping, spring constant).
- The current state (position, velocity, time).
- The active forcing preset.
- The initial conditions used by reset().

Each step() snapshots the parameters and forcing, binds them into a pure
derivative function and hands that to the RK4 integrator, so the integrator
never touches the system object.

Structure:
    - User creates a MassSpringSystem (parameters validated up front).
    - User optionally selects a forcing preset via set_forcing().
    - An external loop calls step(dt) at a fixed cadence and reads the
      returned State.
"""
from __future__ import annotations
import logging
from functools import partial
from typing import Any, Mapping

from .constants import (
    DEFAULT_MASS,
    DEFAULT_DAMPING,
    DEFAULT_SPRING_CONSTANT,
    DEFAULT_Y0,
    DEFAULT_V0,
)
from .core.forcing import Forcing, NoForcing, make_forcing, forcing_params
from .core.integrators import rk4_step
from .core.invariants import mechanical_energy
from .core.properties import system_properties
from .errors import InvalidParameterError
from .profiler import Profiler
from .recorder import StateSink
from .types import ForcingSelection, Parameters, State, SystemProperties

logger = logging.getLogger(__name__)


def oscillator_derivatives(
    y: float,
    v: float,
    t: float,
    params: Parameters,
    forcing: Forcing,
) -> tuple[float, float]:
    """
    Right-hand side of the first-order system.

        dy/dt = v
        dv/dt = (−b·v − k·y + f(t)) / m

    Everything the derivative depends on is passed in explicitly; bind
    `params` and `forcing` with functools.partial to get the (y, v, t)
    signature the integrators expect.
    """
    dvdt = (-params.damping * v - params.spring_constant * y + forcing(t)) / params.mass
    return v, dvdt


class MassSpringSystem:
    """
    Driven damped harmonic oscillator integrated with fixed-step RK4.

    Args:
        mass: Mass m in kg (> 0).
        damping: Damping coefficient b in N·s/m (>= 0).
        spring_constant: Spring stiffness k in N/m (>= 0).
        y0: Initial displacement in m.
        v0: Initial velocity in m/s.
        profiler: Optional Profiler; each step() is timed under "step".

    Raises:
        InvalidParameterError: If mass <= 0, damping < 0 or
            spring_constant < 0. No object is created in that case.

    Example:
        system = MassSpringSystem(mass=1.0, damping=0.0, spring_constant=1.0)
        system.set_forcing("sine", {"amplitude": 0.1, "frequency": 0.2})
        for _ in range(600):
            state = system.step(0.016)
    """

    def __init__(
        self,
        mass: float = DEFAULT_MASS,
        damping: float = DEFAULT_DAMPING,
        spring_constant: float = DEFAULT_SPRING_CONSTANT,
        y0: float = DEFAULT_Y0,
        v0: float = DEFAULT_V0,
        profiler: Profiler | None = None,
    ):
        self._params = Parameters(mass=mass, damping=damping, spring_constant=spring_constant)
        self._y0 = float(y0)
        self._v0 = float(v0)
        self._state = State(position=self._y0, velocity=self._v0, time=0.0)
        self._forcing: Forcing = NoForcing()
        self.profiler = profiler

        logger.debug(
            "created system m=%g b=%g k=%g y0=%g v0=%g",
            self._params.mass,
            self._params.damping,
            self._params.spring_constant,
            self._y0,
            self._v0,
        )

    def __repr__(self) -> str:
        p, s = self._params, self._state
        return (
            f"MassSpringSystem(mass={p.mass!r}, damping={p.damping!r}, "
            f"spring_constant={p.spring_constant!r}, forcing={self._forcing.name!r}, "
            f"t={s.time!r})"
        )

    # -------------------------------------------------------------------------
    # Time advance
    # -------------------------------------------------------------------------

    def step(self, dt: float) -> State:
        """
        Advance the simulation by dt seconds with one RK4 step.

        The derivative is built from the parameters and forcing in effect at
        the time of the call. Non-finite results are not guarded against.

        Args:
            dt: Timestep in seconds.

        Returns:
            The new state. States are immutable, so the caller can keep it
            without affecting the system.
        """
        deriv = partial(oscillator_derivatives, params=self._params, forcing=self._forcing)
        prof = self.profiler
        if prof:
            with prof.section("step"):
                self._state = rk4_step(self._state, deriv, dt)
        else:
            self._state = rk4_step(self._state, deriv, dt)
        return self._state

    def run(self, dt: float, n_steps: int, sink: StateSink | None = None) -> State:
        """
        Take n_steps fixed steps, handing every new state to `sink`.

        Returns:
            The state after the last step (the current state if n_steps == 0).
        """
        for _ in range(n_steps):
            state = self.step(dt)
            if sink is not None:
                sink.record(state)
        return self._state

    def reset(self) -> None:
        """
        Return to the initial conditions (y0, v0) at t = 0.

        Parameters and the forcing selection are left as they are.
        """
        self._state = State(position=self._y0, velocity=self._v0, time=0.0)
        logger.debug("reset to y0=%g v0=%g", self._y0, self._v0)

    def restore_state(self, state: State) -> None:
        """Replace the current state, e.g. to resume a saved run."""
        self._state = State(
            position=float(state.position),
            velocity=float(state.velocity),
            time=float(state.time),
        )

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def set_parameters(
        self,
        mass: float | None = None,
        damping: float | None = None,
        spring_constant: float | None = None,
    ) -> None:
        """
        Update some or all physical parameters.

        Fields left as None keep their current value. The complete candidate
        parameter set is validated before anything is assigned, so a call
        that raises leaves every parameter unchanged.

        Raises:
            InvalidParameterError: If any supplied value violates its bound.
        """
        current = self._params
        self._params = Parameters(
            mass=current.mass if mass is None else mass,
            damping=current.damping if damping is None else damping,
            spring_constant=current.spring_constant if spring_constant is None else spring_constant,
        )
        logger.debug(
            "parameters set m=%g b=%g k=%g",
            self._params.mass,
            self._params.damping,
            self._params.spring_constant,
        )

    def update_parameters(self, changes: Mapping[str, Any]) -> None:
        """
        Mapping form of set_parameters, e.g. update_parameters({"mass": 2}).

        Raises:
            InvalidParameterError: On an unknown key or an invalid value.
        """
        allowed = ("mass", "damping", "spring_constant")
        for key, value in changes.items():
            if key not in allowed:
                raise InvalidParameterError(key, value, "is not a system parameter")
        self.set_parameters(**changes)

    def set_forcing(self, name: str, params: Mapping[str, Any] | None = None) -> None:
        """
        Select the external forcing preset.

        Resolved parameters are the preset defaults overridden by `params`.
        The selection replaces the previous one entirely.

        Raises:
            UnknownForcingPresetError: If name is not a known preset. The
                previous forcing stays active.
            InvalidParameterError: If params holds an unknown key or a
                non-numeric value. The previous forcing stays active.
        """
        self._forcing = make_forcing(name, params)
        logger.debug("forcing set to %s %s", name, forcing_params(self._forcing))

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def time(self) -> float:
        return self._state.time

    @property
    def initial_conditions(self) -> tuple[float, float]:
        """(y0, v0) captured at construction."""
        return self._y0, self._v0

    def get_state(self) -> State:
        return self._state

    def get_parameters(self) -> Parameters:
        return self._params

    def get_forcing(self) -> ForcingSelection:
        return ForcingSelection(name=self._forcing.name, params=forcing_params(self._forcing))

    def get_system_properties(self) -> SystemProperties:
        """Natural/damped frequencies, damping ratio, regime and Q."""
        return system_properties(self._params)

    def get_energy(self) -> float:
        """
        Instantaneous mechanical energy ½·k·y² + ½·m·v² in Joules.

        Only conserved when damping is zero and forcing is "none", but
        always computed.
        """
        return mechanical_energy(self._params, self._state)
