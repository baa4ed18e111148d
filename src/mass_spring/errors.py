# MIT License (see LICENSE)
"""
Exception types raised by the mass-spring engine.

Both concrete errors derive from ValueError so callers that already guard
against bad input with ``except ValueError`` keep working. Numerical
degeneracy (NaN/inf from extreme parameters) is never reported here; it is
passed through as ordinary floating-point values.
"""
from __future__ import annotations

from typing import Any, Iterable


class MassSpringError(Exception):
    """Base class for all errors raised by mass_spring."""


class InvalidParameterError(MassSpringError, ValueError):
    """
    A physical or forcing parameter was rejected.

    Attributes:
        name: Name of the offending field (e.g. "mass").
        value: The rejected value.
    """

    def __init__(self, name: str, value: Any, reason: str):
        self.name = name
        self.value = value
        super().__init__(f"{name} {reason}, got {value!r}")


class UnknownForcingPresetError(MassSpringError, ValueError):
    """
    A forcing preset name is not in the catalog.

    Attributes:
        name: The requested preset name.
        available: Names that would have been accepted.
    """

    def __init__(self, name: str, available: Iterable[str]):
        self.name = name
        self.available = tuple(available)
        super().__init__(
            f"Unknown forcing preset: {name!r} "
            f"(available: {', '.join(self.available)})"
        )
