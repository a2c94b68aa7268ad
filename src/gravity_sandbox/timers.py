# MIT License (see LICENSE)
"""
Wall-clock cooldowns.

The engine and the frame loop never sleep or throttle themselves; they
consult a Cooldown to decide whether something is due. Time is read from
an injectable millisecond clock so tests can drive it directly.
"""
from __future__ import annotations
import time
from typing import Callable

Clock = Callable[[], float]


def monotonic_ms() -> float:
    """Current monotonic time in milliseconds."""
    return time.monotonic() * 1000.0


class Cooldown:
    """
    Fires at most once per interval.

    ready() returns True when strictly more than `interval_ms` has passed
    since it last fired, and restarts the interval when it does. A fresh
    cooldown fires on its first check.
    """

    def __init__(self, interval_ms: float) -> None:
        self.interval_ms = float(interval_ms)
        self.last_fired: float | None = None

    def ready(self, now: float) -> bool:
        if self.last_fired is None or now - self.last_fired > self.interval_ms:
            self.last_fired = now
            return True
        return False

    def reset(self) -> None:
        self.last_fired = None
