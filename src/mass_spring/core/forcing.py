# MIT License (see LICENSE)
"""
Catalog of external forcing functions f(t).

Each preset is a frozen dataclass holding its own parameter record and
evaluating the force through ``__call__(t)``. Instances are pure: the same t
always gives the same force, and every preset accepts any real t, returning
0 (or its baseline) outside its active window.

Presets (defaults in brackets):
- none:     0
- constant: force                                            [force=1]
- sine:     amplitude·sin(2π·frequency·t)                    [1, 1 Hz]
- cosine:   amplitude·cos(2π·frequency·t)                    [1, 1 Hz]
- step:     amplitude for t ≥ step_time, else 0              [1, 1 s]
- square:   ±amplitude, +1 on the first half of each period  [1, 1 Hz]
- impulse:  amplitude/width on [impulse_time, impulse_time + width)
                                                             [1, 1 s, 0.01 s]

Names are resolved by make_forcing(), which is where an unknown preset is
reported, so a bad name can never reach the integration loop.
"""
from __future__ import annotations
from dataclasses import dataclass, fields, asdict
from typing import Any, ClassVar, Mapping, Union

import numpy as np

from ..errors import InvalidParameterError, UnknownForcingPresetError


@dataclass(frozen=True)
class NoForcing:
    """Unforced system: f(t) = 0."""
    name: ClassVar[str] = "none"

    def __call__(self, t: float) -> float:
        return 0.0


@dataclass(frozen=True)
class ConstantForcing:
    """Constant load: f(t) = force."""
    force: float = 1.0
    name: ClassVar[str] = "constant"

    def __call__(self, t: float) -> float:
        return self.force


@dataclass(frozen=True)
class SineForcing:
    """Sinusoidal drive: f(t) = amplitude·sin(2π·frequency·t)."""
    amplitude: float = 1.0
    frequency: float = 1.0
    name: ClassVar[str] = "sine"

    def __call__(self, t: float) -> float:
        return self.amplitude * float(np.sin(2 * np.pi * self.frequency * t))


@dataclass(frozen=True)
class CosineForcing:
    """Cosinusoidal drive: f(t) = amplitude·cos(2π·frequency·t)."""
    amplitude: float = 1.0
    frequency: float = 1.0
    name: ClassVar[str] = "cosine"

    def __call__(self, t: float) -> float:
        return self.amplitude * float(np.cos(2 * np.pi * self.frequency * t))


@dataclass(frozen=True)
class StepForcing:
    """Heaviside step switching on at step_time."""
    amplitude: float = 1.0
    step_time: float = 1.0
    name: ClassVar[str] = "step"

    def __call__(self, t: float) -> float:
        return self.amplitude if t >= self.step_time else 0.0


@dataclass(frozen=True)
class SquareForcing:
    """
    Square wave of the given frequency.

    The phase within the current period is frac(t·frequency), which equals
    (t mod period)/period. Using the floored modulo keeps the wave periodic
    for negative t as well.
    """
    amplitude: float = 1.0
    frequency: float = 1.0
    name: ClassVar[str] = "square"

    def __call__(self, t: float) -> float:
        phase = float(np.mod(t * self.frequency, 1.0))
        return self.amplitude if phase < 0.5 else -self.amplitude


@dataclass(frozen=True)
class ImpulseForcing:
    """
    Rectangular pulse approximating a Dirac delta.

    Delivers a total impulse of `amplitude` N·s spread over `width` seconds.
    """
    amplitude: float = 1.0
    impulse_time: float = 1.0
    width: float = 0.01
    name: ClassVar[str] = "impulse"

    def __call__(self, t: float) -> float:
        if self.impulse_time <= t < self.impulse_time + self.width:
            return self.amplitude / self.width
        return 0.0


Forcing = Union[
    NoForcing,
    ConstantForcing,
    SineForcing,
    CosineForcing,
    StepForcing,
    SquareForcing,
    ImpulseForcing,
]

FORCING_PRESETS: dict[str, type] = {
    cls.name: cls
    for cls in (
        NoForcing,
        ConstantForcing,
        SineForcing,
        CosineForcing,
        StepForcing,
        SquareForcing,
        ImpulseForcing,
    )
}

DEFAULT_PARAMS: dict[str, dict[str, float]] = {
    name: asdict(cls()) for name, cls in FORCING_PRESETS.items()
}

# camelCase spellings used by browser front-ends
_ALIASES = {
    "stepTime": "step_time",
    "impulseTime": "impulse_time",
}


def get_forcing_function(name: str) -> type:
    """
    Look up a preset class by name.

    Raises:
        UnknownForcingPresetError: If name is not in the catalog.
    """
    try:
        return FORCING_PRESETS[name]
    except (KeyError, TypeError):
        raise UnknownForcingPresetError(name, FORCING_PRESETS) from None


def make_forcing(name: str, params: Mapping[str, Any] | None = None) -> Forcing:
    """
    Build a forcing preset from its name and optional parameter overrides.

    Starts from the preset's defaults and replaces only the fields present in
    `params`, so the result always has every parameter set.

    Args:
        name: Preset key (see FORCING_PRESETS).
        params: Partial parameter mapping; caller values win over defaults.

    Raises:
        UnknownForcingPresetError: If name is not in the catalog.
        InvalidParameterError: If params has a key the preset does not take,
            or a value that is not a real number.
    """
    cls = get_forcing_function(name)
    allowed = {f.name for f in fields(cls)}

    resolved = dict(DEFAULT_PARAMS[name])
    for key, value in (params or {}).items():
        field_name = _ALIASES.get(key, key)
        if field_name not in allowed:
            raise InvalidParameterError(
                key, value, f"is not a parameter of forcing preset {name!r}"
            )
        try:
            resolved[field_name] = float(value)
        except (TypeError, ValueError):
            raise InvalidParameterError(key, value, "must be a real number") from None

    return cls(**resolved)


def forcing_params(forcing: Forcing) -> dict[str, float]:
    """Return a fresh dict of a preset's parameters."""
    return asdict(forcing)
