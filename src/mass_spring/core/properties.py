# MIT License (see LICENSE)
"""
Derived properties of a damped harmonic oscillator.

For m·y'' + b·y' + k·y = 0:
    ω₀ = √(k/m)               natural angular frequency
    ζ  = b / (2√(mk))         damping ratio
    ω_D = ω₀√(1 − ζ²)         damped angular frequency (ζ < 1 only)
    Q  = √(mk) / b = 1/(2ζ)   quality factor

The regime follows the sign of the characteristic discriminant b² − 4mk.

Degenerate parameter sets (k = 0, b = 0) yield IEEE inf/nan rather than
exceptions: an undamped oscillator has Q = inf, a spring-less one has an
infinite period.

Reference:
    https://en.wikipedia.org/wiki/Harmonic_oscillator#Damped_harmonic_oscillator
"""
from __future__ import annotations

import numpy as np

from ..constants import REGIME_TOLERANCE
from ..types import DampingRegime, Parameters, SystemProperties


def _ratio(num: float, den: float) -> float:
    """num/den with IEEE semantics (x/0 -> ±inf, 0/0 -> nan) and no warnings."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(np.float64(num), np.float64(den)))


def classify_regime(params: Parameters, tolerance: float = REGIME_TOLERANCE) -> DampingRegime:
    """
    Classify the damping regime from the discriminant d = b² − 4mk.

    |d| ≤ tolerance is critical, d > tolerance overdamped, otherwise
    underdamped. A system with b = 0 is always underdamped (pure SHM, or a
    free particle when k = 0 as well).
    """
    m, b, k = params.mass, params.damping, params.spring_constant
    if b == 0:
        return DampingRegime.UNDERDAMPED

    discriminant = b * b - 4 * m * k
    if abs(discriminant) <= tolerance:
        return DampingRegime.CRITICAL
    if discriminant > tolerance:
        return DampingRegime.OVERDAMPED
    return DampingRegime.UNDERDAMPED


def system_properties(params: Parameters, tolerance: float = REGIME_TOLERANCE) -> SystemProperties:
    """
    Compute all derived properties for a parameter set.

    Args:
        params: Validated physical parameters.
        tolerance: Critical-damping band passed to classify_regime.

    Returns:
        SystemProperties snapshot.
    """
    m, b, k = params.mass, params.damping, params.spring_constant

    omega0 = float(np.sqrt(k / m))
    f0 = omega0 / (2 * np.pi)
    period = _ratio(1.0, f0)

    sqrt_mk = float(np.sqrt(m * k))
    zeta = 0.0 if b == 0 else _ratio(b, 2 * sqrt_mk)
    regime = classify_regime(params, tolerance)

    if regime is DampingRegime.UNDERDAMPED:
        omega_d = omega0 * float(np.sqrt(1 - zeta * zeta))
    else:
        omega_d = 0.0
    f_d = omega_d / (2 * np.pi)

    quality_factor = np.inf if b == 0 else sqrt_mk / b

    return SystemProperties(
        omega0=omega0,
        f0=float(f0),
        period=period,
        zeta=zeta,
        regime=regime,
        omega_d=omega_d,
        f_d=float(f_d),
        quality_factor=float(quality_factor),
    )
