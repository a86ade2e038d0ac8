"""Frame timing, FPS counting and byte-size formatting."""

from __future__ import annotations

import time
from collections.abc import Callable

_KB = 1024.0
_MB = _KB * 1024.0
_GB = _MB * 1024.0


class GameTime:
    """Tracks frame delta time and time since initialisation."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._start = 0.0
        self._prev = 0.0
        self._delta = 0.0

    def init_time(self) -> None:
        """Start timing from now."""
        now = self._clock()
        self._start = now
        self._prev = now
        self._delta = 0.0

    def update_time(self) -> None:
        """Measure the time since the previous update."""
        now = self._clock()
        self._delta = now - self._prev
        self._prev = now

    def delta_time(self) -> float:
        """Seconds between the last two updates."""
        return self._delta

    def fixed_delta_time(self) -> float:
        """The fixed physics step, 60 steps per second."""
        return 1.0 / 60.0

    def elapsed_time(self) -> float:
        """Seconds since init_time."""
        return self._clock() - self._start


class FpsCounter:
    """Counts frames over a window and reports the last full count."""

    def __init__(self, max_time: float = 1.0) -> None:
        self.max_time = max_time
        self._timer = 0.0
        self._cached = 0
        self._count = 0

    def update(self, delta_time: float) -> None:
        """Record one frame that took delta_time seconds."""
        self._timer += delta_time
        self._cached += 1
        if self._timer > self.max_time:
            self._timer = 0.0
            self._count = self._cached
            self._cached = 0

    def fps(self) -> int:
        """Frames counted in the last completed window."""
        return self._count


def format_bytes(num_bytes: int) -> str:
    """Format a byte count as B, KB, MB or GB with two decimals."""
    if num_bytes < 0:
        raise ValueError("byte count must not be negative")
    if num_bytes >= _GB:
        return f"{num_bytes / _GB:.2f} GB"
    if num_bytes >= _MB:
        return f"{num_bytes / _MB:.2f} MB"
    if num_bytes >= _KB:
        return f"{num_bytes / _KB:.2f} KB"
    return f"{num_bytes} B"