# MIT License (see LICENSE)
"""
Lightweight wall-clock timing of named code sections.

Timings are collected for reporting only and never feed back into the
simulation, which stays deterministic.

Example:
    profiler = Profiler()
    system = MassSpringSystem(profiler=profiler)
    system.run(0.01, 1000)
    print(profiler.stats.summary()["step"])
"""
from __future__ import annotations
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class ProfileStats:
    """Raw timing samples per section name, in seconds."""
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        self.samples.setdefault(name, []).append(dt)

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Per-section statistics.

        Returns:
            Dict mapping section name to {'n', 'mean_ms', 'max_ms'}.
        """
        return {
            name: {
                "n": len(times),
                "mean_ms": 1e3 * sum(times) / len(times),
                "max_ms": 1e3 * max(times),
            }
            for name, times in self.samples.items()
        }

    def clear(self) -> None:
        self.samples.clear()


class Profiler:
    """Times `with profiler.section(name):` blocks into self.stats."""

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)
