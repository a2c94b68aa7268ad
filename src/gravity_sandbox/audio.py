# MIT License (see LICENSE)
"""
Sound cue dispatch.

The sandbox requests two cues: a short "pop" when a body is created and a
low rumble when a body falls into the central mass. Synthesis belongs to
a backend; AudioManager only resolves presets and forwards them.

Construct one AudioManager at startup and pass it to whoever needs it
(GestureInput, FrameLoop).
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SoundPreset:
    """
    Parameters of a sound cue.

    Attributes:
        frequency: Base frequency in Hz.
        duration_ms: Length of the cue in milliseconds.
        volume: Peak gain in [0, 1].
    """
    frequency: float
    duration_ms: float
    volume: float


PLANET_CREATION = "planet_creation"
SUN_COLLISION = "sun_collision"

DEFAULT_PRESETS: dict[str, SoundPreset] = {
    PLANET_CREATION: SoundPreset(frequency=880.0, duration_ms=150.0, volume=0.1),
    SUN_COLLISION: SoundPreset(frequency=50.0, duration_ms=800.0, volume=1.0),
}


class AudioBackend(Protocol):
    def play(self, preset: SoundPreset) -> None: ...


class NullAudioBackend:
    """Discards every cue."""

    def play(self, preset: SoundPreset) -> None:
        pass


class RecordingAudioBackend:
    """Keeps every cue it is asked to play, for tests and headless runs."""

    def __init__(self) -> None:
        self.played: list[SoundPreset] = []

    def play(self, preset: SoundPreset) -> None:
        self.played.append(preset)


class AudioManager:
    """
    Resolves preset names and forwards cues to a backend.

    Args:
        backend: Where cues are sent. Defaults to NullAudioBackend.
        presets: Name → SoundPreset table. Defaults to DEFAULT_PRESETS.
    """

    def __init__(
        self,
        backend: AudioBackend | None = None,
        presets: dict[str, SoundPreset] | None = None,
    ) -> None:
        self.backend = backend if backend is not None else NullAudioBackend()
        self.presets = dict(DEFAULT_PRESETS if presets is None else presets)

    def play_sound(self, preset: str | SoundPreset) -> bool:
        """
        Play a named preset or an explicit SoundPreset.

        Unknown preset names are logged and ignored.

        Returns:
            True if a cue was sent to the backend.
        """
        if isinstance(preset, str):
            params = self.presets.get(preset)
            if params is None:
                logger.error('Sound preset "%s" not found', preset)
                return False
        else:
            params = preset
        self.backend.play(params)
        return True
