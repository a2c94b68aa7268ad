# MIT License (see LICENSE)
"""
Frame loop wiring the engine to its collaborators.

A host (window toolkit, browser bridge, test) calls tick() from its own
frame callback. tick() does real work only when the draw interval has
elapsed; each processed frame runs

    step() → remove_out_of_range(viewport bounds) → collision cue → render

The collision cue plays once per IDLE → ACTIVE transition of the effect,
judged after step() has expired a stale effect. A collision that lands
while the effect is still showing only moves it.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field

from .audio import AudioManager, SUN_COLLISION
from .renderer.adapter import RendererAdapter
from .simulation import GravitySimulation
from .timers import Cooldown
from .types import Removal
from .viewport import Viewport

logger = logging.getLogger(__name__)


@dataclass
class FrameLoop:
    """
    Attributes:
        simulation: The engine to drive.
        viewport: Supplies removal bounds each frame.
        renderer: Draws each processed frame; released on body removal.
        audio: Plays the collision cue.
        frames: Number of processed frames.
        last_removals: Removals of the most recent processed frame.
    """
    simulation: GravitySimulation
    viewport: Viewport
    renderer: RendererAdapter
    audio: AudioManager
    frames: int = 0
    last_removals: list[Removal] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._frame_cooldown = Cooldown(self.simulation.config.draw_interval_ms)
        self.simulation.add_removal_listener(self.renderer.on_removal)

    def tick(self) -> bool:
        """
        Process one frame if it is due.

        Returns:
            True if a frame was processed.
        """
        sim = self.simulation
        now = sim.clock()
        if not self._frame_cooldown.ready(now):
            return False

        sim.step()
        was_active = sim.has_active_collision_effect()
        max_x, max_y = self.viewport.bounds()
        self.last_removals = sim.remove_out_of_range(max_x, max_y)

        if not was_active and sim.has_active_collision_effect():
            self.audio.play_sound(SUN_COLLISION)

        self.renderer.render_simulation(sim, now)
        self.frames += 1
        return True

    def close(self) -> None:
        """Detach the renderer from the simulation's removal notifications."""
        self.simulation.remove_removal_listener(self.renderer.on_removal)
