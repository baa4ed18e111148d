# MIT License (see LICENSE)
"""
Numeric constants and defaults shared across the engine.

All physical quantities use SI units: kg, N·s/m, N/m, m, m/s, s.
"""
from __future__ import annotations

# Band around a zero discriminant b² − 4mk inside which the system is
# classified as critically damped. Exact equality almost never holds in
# floating point (e.g. b = 2·√2 for m·k = 2 gives b² = 8.000000000000002).
REGIME_TOLERANCE: float = 1e-10

# Constructor defaults: a lightly damped unit oscillator released from y = 1.
DEFAULT_MASS: float = 1.0
DEFAULT_DAMPING: float = 0.1
DEFAULT_SPRING_CONSTANT: float = 1.0
DEFAULT_Y0: float = 1.0
DEFAULT_V0: float = 0.0

# Typical animation tick (about 60 frames per second).
DEFAULT_DT: float = 0.016
