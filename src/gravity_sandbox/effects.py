# MIT License (see LICENSE)
"""
Collision effect state machine.

A body falling into the central mass starts a short-lived effect that
renderers draw as an overlay and the frame loop uses to trigger a sound.

    IDLE ──trigger──▶ ACTIVE ──expire (now - start > duration)──▶ IDLE
                      ACTIVE ──trigger──▶ ACTIVE  (overwrite, no queue)
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class EffectPhase(Enum):
    IDLE = "idle"
    ACTIVE = "active"


@dataclass
class CollisionEffectState:
    """
    The single collision effect slot.

    Attributes:
        active: Whether the effect is currently shown.
        x, y: Position of the most recent collision.
        start_time: Clock time (ms) of the most recent collision.
    """
    active: bool = False
    x: float = 0.0
    y: float = 0.0
    start_time: float = 0.0

    @property
    def phase(self) -> EffectPhase:
        return EffectPhase.ACTIVE if self.active else EffectPhase.IDLE

    def trigger(self, x: float, y: float, now: float) -> bool:
        """
        Record a collision, overwriting any effect still running.

        Returns:
            True only for the IDLE → ACTIVE transition.
        """
        started = not self.active
        self.active = True
        self.x = float(x)
        self.y = float(y)
        self.start_time = float(now)
        return started

    def expire(self, now: float, duration_ms: float) -> bool:
        """
        Deactivate the effect once it has outlived `duration_ms`.

        Returns:
            True if the effect went ACTIVE → IDLE on this call.
        """
        if self.active and now - self.start_time > duration_ms:
            self.active = False
            return True
        return False
