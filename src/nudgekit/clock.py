"""Clock abstraction for debounce timing."""

from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    """Source of the current time in milliseconds."""

    def now_ms(self) -> float:
        ...


class SystemClock:
    """Monotonic wall clock."""

    def now_ms(self) -> float:
        return time.monotonic() * 1000.0


class ManualClock:
    """Clock that only moves when told to."""

    def __init__(self, start_ms: float = 0.0) -> None:
        self._now = float(start_ms)

    def now_ms(self) -> float:
        return self._now

    def advance(self, ms: float) -> None:
        if ms < 0:
            msg = "Cannot move a clock backwards"
            raise ValueError(msg)
        self._now += ms

    def set(self, ms: float) -> None:
        if ms < self._now:
            msg = "Cannot move a clock backwards"
            raise ValueError(msg)
        self._now = float(ms)
