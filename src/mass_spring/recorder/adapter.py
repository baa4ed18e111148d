# MIT License (see LICENSE)
"""
Sinks that consume state snapshots produced by the system.

Plotters, animators and loggers only ever read State values; they receive
them through the StateSink interface and get no handle that could mutate
the simulation.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from collections import deque
from typing import TYPE_CHECKING, Callable, TextIO
import sys

import numpy as np

from ..types import State

if TYPE_CHECKING:
    from ..system import MassSpringSystem


class StateSink(ABC):
    """
    Abstract consumer of State snapshots.

    Usage:
        sink = HistoryBuffer(maxlen=600)
        for _ in range(1000):
            sink.record(system.step(0.016))

    Or let the system drive it:
        system.run(0.016, 1000, sink=sink)
    """

    @abstractmethod
    def record(self, state: State) -> None:
        """
        Consume one snapshot.

        Args:
            state: Immutable state returned by MassSpringSystem.step().
        """
        ...

    def record_system(self, system: "MassSpringSystem") -> None:
        """Record the system's current state without stepping it."""
        self.record(system.get_state())


class TextSink(StateSink):
    """
    Writes one aligned table row per snapshot to a text stream.

    Example:
        sink = TextSink(energy_of=system.get_energy)
        sink.header()
        system.run(0.1, 20, sink=sink)

    Output:
        Time (s) | Position (m) | Velocity (m/s) | Energy (J)
             0.1 |     0.995004 |      -0.099833 |   0.500000
    """

    def __init__(
        self,
        output: TextIO | None = None,
        energy_of: Callable[[], float] | None = None,
        precision: int = 6,
    ):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            energy_of: Optional zero-argument callable appended as an energy
                column, typically a bound MassSpringSystem.get_energy.
            precision: Decimal places for position, velocity and energy.
        """
        self.output = output or sys.stdout
        self.energy_of = energy_of
        self.precision = precision

    def header(self) -> None:
        line = "Time (s) | Position (m) | Velocity (m/s)"
        if self.energy_of is not None:
            line += " | Energy (J)"
        self.output.write(line + "\n")
        self.output.write("-" * len(line) + "\n")

    def record(self, state: State) -> None:
        p = self.precision
        line = f"{state.time:8.3f} | {state.position:12.{p}f} | {state.velocity:14.{p}f}"
        if self.energy_of is not None:
            line += f" | {self.energy_of():10.{p}f}"
        self.output.write(line + "\n")


class NullSink(StateSink):
    """Discards everything. Placeholder for headless runs and benchmarks."""

    def record(self, state: State) -> None:
        pass


class HistoryBuffer(StateSink):
    """
    Ring buffer of recent snapshots for plotting.

    With maxlen=None the history is unbounded; otherwise only the newest
    maxlen states are kept, which is what a scrolling time-series plot or a
    phase portrait trail needs.
    """

    def __init__(self, maxlen: int | None = None):
        if maxlen is not None and maxlen <= 0:
            raise ValueError(f"maxlen must be positive or None, got {maxlen}")
        self.states: deque[State] = deque(maxlen=maxlen)

    @property
    def maxlen(self) -> int | None:
        return self.states.maxlen

    def __len__(self) -> int:
        return len(self.states)

    def record(self, state: State) -> None:
        self.states.append(state)

    def times(self) -> np.ndarray:
        return np.fromiter((s.time for s in self.states), dtype=np.float64, count=len(self.states))

    def positions(self) -> np.ndarray:
        return np.fromiter((s.position for s in self.states), dtype=np.float64, count=len(self.states))

    def velocities(self) -> np.ndarray:
        return np.fromiter((s.velocity for s in self.states), dtype=np.float64, count=len(self.states))

    def as_array(self) -> np.ndarray:
        """History as an (n, 3) array of [time, position, velocity] rows."""
        out = np.empty((len(self.states), 3), dtype=np.float64)
        for i, s in enumerate(self.states):
            out[i] = (s.time, s.position, s.velocity)
        return out

    def clear(self) -> None:
        self.states.clear()
