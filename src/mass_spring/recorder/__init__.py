# MIT License (see LICENSE)
"""
State sinks for visualization and recording.

This subpackage provides:
    - StateSink: Abstract base class defining the consumer interface.
    - TextSink: Aligned text table output (stdout by default).
    - NullSink: No-op sink for headless runs.
    - HistoryBuffer: Bounded or unbounded history for plotting.

The physics engine has no rendering dependency; sinks only read State values.

Typical usage:
    from mass_spring.recorder import HistoryBuffer

    history = HistoryBuffer(maxlen=1000)
    system.run(0.016, 600, sink=history)
    t, y = history.times(), history.positions()
"""
from .adapter import (
    StateSink,
    TextSink,
    NullSink,
    HistoryBuffer,
)

__all__ = [
    "StateSink",
    "TextSink",
    "NullSink",
    "HistoryBuffer",
]
