# MIT License (see LICENSE)
"""
Core type definitions for the mass-spring-damper engine.

Defines the value objects passed between the integrator, the forcing
library and the system wrapper:
- State: instantaneous (position, velocity, time) of the oscillator.
- Parameters: physical constants m, b, k with their validity rules.
- ForcingSelection: the active forcing preset and its resolved parameters.
- SystemProperties: derived quantities (frequencies, damping ratio, Q).

The equation of motion is
    m·y'' = −b·y' − k·y + f(t)
rewritten as the first-order system
    dy/dt = v,    dv/dt = (−b·v − k·y + f(t)) / m
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .errors import InvalidParameterError


# =============================================================================
# State
# =============================================================================

@dataclass(frozen=True)
class State:
    """
    Instantaneous condition of the oscillator.

    Frozen so that snapshots handed out by the system can never be used to
    alter its internal state.

    Attributes:
        position: Displacement from equilibrium y in meters.
        velocity: Velocity v = dy/dt in m/s.
        time: Simulation time in seconds (advanced only by stepping).
    """
    position: float
    velocity: float
    time: float = 0.0

    def as_dict(self) -> dict[str, float]:
        """Return a fresh plain-dict copy of the state."""
        return {"position": self.position, "velocity": self.velocity, "time": self.time}


# =============================================================================
# Parameters
# =============================================================================

def _real(name: str, value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidParameterError(name, value, "must be a real number") from None


@dataclass(frozen=True)
class Parameters:
    """
    Physical parameters of the oscillator.

    Attributes:
        mass: Mass m in kg. Must be > 0.
        damping: Damping coefficient b in N·s/m. Must be >= 0.
        spring_constant: Stiffness k in N/m. Must be >= 0.

    Raises:
        InvalidParameterError: On construction, if any field violates its
            constraint. NaN violates every constraint.
    """
    mass: float
    damping: float
    spring_constant: float

    def __post_init__(self) -> None:
        mass = _real("mass", self.mass)
        damping = _real("damping", self.damping)
        spring_constant = _real("spring_constant", self.spring_constant)

        # Written as `not (x > 0)` so NaN is rejected too
        if not mass > 0:
            raise InvalidParameterError("mass", self.mass, "must be positive")
        if not damping >= 0:
            raise InvalidParameterError("damping", self.damping, "must be non-negative")
        if not spring_constant >= 0:
            raise InvalidParameterError(
                "spring_constant", self.spring_constant, "must be non-negative"
            )

        object.__setattr__(self, "mass", mass)
        object.__setattr__(self, "damping", damping)
        object.__setattr__(self, "spring_constant", spring_constant)

    def as_dict(self) -> dict[str, float]:
        return {
            "mass": self.mass,
            "damping": self.damping,
            "spring_constant": self.spring_constant,
        }


# =============================================================================
# Forcing selection
# =============================================================================

@dataclass(frozen=True)
class ForcingSelection:
    """
    Public view of the active forcing preset.

    Attributes:
        name: Preset key, e.g. "sine".
        params: Resolved parameters (preset defaults overlaid with the
                caller's overrides).
    """
    name: str
    params: dict[str, float] = field(default_factory=dict)


# =============================================================================
# Derived properties
# =============================================================================

class DampingRegime(str, Enum):
    """Qualitative behaviour of the free (unforced) response."""
    UNDERDAMPED = "underdamped"
    CRITICAL = "critical"
    OVERDAMPED = "overdamped"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SystemProperties:
    """
    Quantities derived from the current parameters.

    Attributes:
        omega0: Natural angular frequency ω₀ = √(k/m) in rad/s.
        f0: Natural frequency ω₀/2π in Hz.
        period: Natural period 1/f₀ in s (inf when k = 0).
        zeta: Damping ratio ζ = b / (2√(mk)).
        regime: Underdamped, critical or overdamped.
        omega_d: Damped angular frequency ω₀√(1 − ζ²); 0 unless underdamped.
        f_d: Damped frequency ω_D/2π in Hz.
        quality_factor: Q = √(mk)/b; inf for an undamped system.
    """
    omega0: float
    f0: float
    period: float
    zeta: float
    regime: DampingRegime
    omega_d: float
    f_d: float
    quality_factor: float
