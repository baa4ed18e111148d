# MIT License (see LICENSE)
"""
Fixed-step integrators for a two-variable first-order system.

The oscillator is integrated as
    dy/dt = g(y, v, t),    dv/dt = h(y, v, t)
where the caller supplies the derivative function. Integrators never look
inside it, so the same steppers work for any (y, v) system.

Available integrators:
- rk4_step: Classical 4th-order Runge-Kutta (local error O(dt⁵), global O(dt⁴))
- euler_step: Explicit Euler (first order), kept for accuracy comparisons

Neither integrator validates dt or the state: NaN in gives NaN out.

Reference:
    Runge-Kutta methods: https://en.wikipedia.org/wiki/Runge-Kutta_methods
"""
from __future__ import annotations
from typing import Callable

import numpy as np

from ..types import State

# (y, v, t) -> (dy/dt, dv/dt)
Derivative = Callable[[float, float, float], tuple[float, float]]


def rk4_step(state: State, deriv: Derivative, dt: float) -> State:
    """
    Advance state by dt using classical 4th-order Runge-Kutta.

    Evaluates the derivative at the start, twice at the midpoint and at the
    end of the interval, and combines the slopes with weights (1, 2, 2, 1)/6.

    Args:
        state: Current state (not modified).
        deriv: Pure derivative function f(y, v, t) -> (dy/dt, dv/dt).
        dt: Timestep in seconds.

    Returns:
        New State with time advanced by exactly dt.
    """
    y0, v0, t0 = state.position, state.velocity, state.time
    half = 0.5 * dt

    k1 = deriv(y0, v0, t0)
    k2 = deriv(y0 + half * k1[0], v0 + half * k1[1], t0 + half)
    k3 = deriv(y0 + half * k2[0], v0 + half * k2[1], t0 + half)
    k4 = deriv(y0 + dt * k3[0], v0 + dt * k3[1], t0 + dt)

    dy = (k1[0] + 2 * k2[0] + 2 * k3[0] + k4[0]) / 6.0
    dv = (k1[1] + 2 * k2[1] + 2 * k3[1] + k4[1]) / 6.0

    return State(position=y0 + dt * dy, velocity=v0 + dt * dv, time=t0 + dt)


def euler_step(state: State, deriv: Derivative, dt: float) -> State:
    """
    Advance state by dt using the explicit Euler method.

    Single derivative evaluation at the start of the interval. Only first
    order accurate and energy-gaining on undamped oscillators; provided as a
    baseline to compare against rk4_step.
    """
    dy, dv = deriv(state.position, state.velocity, state.time)
    return State(
        position=state.position + dt * dy,
        velocity=state.velocity + dt * dv,
        time=state.time + dt,
    )


INTEGRATORS: dict[str, Callable[[State, Derivative, float], State]] = {
    "rk4": rk4_step,
    "euler": euler_step,
}


def integrate(
    state: State,
    deriv: Derivative,
    dt: float,
    n_steps: int,
    method: str = "rk4",
) -> np.ndarray:
    """
    Repeatedly step a state and collect the trajectory.

    Args:
        state: Initial state.
        deriv: Derivative function.
        dt: Fixed timestep.
        n_steps: Number of steps to take.
        method: Key into INTEGRATORS ("rk4" or "euler").

    Returns:
        Array of shape (n_steps + 1, 3) with rows [time, position, velocity];
        row 0 is the initial state.

    Raises:
        ValueError: If method is not a known integrator.
    """
    try:
        stepper = INTEGRATORS[method]
    except KeyError:
        raise ValueError(f"Unknown integrator: {method}") from None

    out = np.empty((n_steps + 1, 3), dtype=np.float64)
    out[0] = (state.time, state.position, state.velocity)
    for i in range(1, n_steps + 1):
        state = stepper(state, deriv, dt)
        out[i] = (state.time, state.position, state.velocity)
    return out
