# MIT License (see LICENSE)
"""
Pointer gesture handling.

A press marks the spawn point, dragging aims, and the release spawns a
body whose velocity is proportional to the drag vector:

    vx =  dx · speed_factor
    vy = -dy · speed_factor      (screen y grows downward, world y upward)

Mouse and touch backends both translate their events into the three
pointer_* calls. Calls that arrive out of order (a move or release with
no press) are ignored.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field

from .audio import AudioManager, PLANET_CREATION
from .simulation import GravitySimulation
from .viewport import Viewport

logger = logging.getLogger(__name__)


@dataclass
class GestureInput:
    """
    Attributes:
        simulation: Receives add_body() on release.
        viewport: Maps pointer pixels to world coordinates.
        audio: Plays the creation cue for each spawned body.
        speed_factor: Pixels of drag → velocity. Defaults to the
                      simulation config's speed_factor.
    """
    simulation: GravitySimulation
    viewport: Viewport
    audio: AudioManager
    speed_factor: float | None = None

    is_pointer_down: bool = field(default=False, init=False)
    start: tuple[float, float] = field(default=(0.0, 0.0), init=False)
    current: tuple[float, float] = field(default=(0.0, 0.0), init=False)

    def __post_init__(self) -> None:
        if self.speed_factor is None:
            self.speed_factor = self.simulation.config.speed_factor

    def pointer_down(self, sx: float, sy: float) -> None:
        self.is_pointer_down = True
        self.start = (sx, sy)
        self.current = (sx, sy)

    def pointer_move(self, sx: float, sy: float) -> None:
        if not self.is_pointer_down:
            return
        self.current = (sx, sy)

    def pointer_up(self) -> int | None:
        """
        Finish the gesture and spawn a body at the press point.

        Returns:
            The new body's id, or None if no gesture was in progress.
        """
        if not self.is_pointer_down:
            return None

        dx = self.current[0] - self.start[0]
        dy = self.current[1] - self.start[1]
        vx = dx * self.speed_factor
        vy = -dy * self.speed_factor

        x, y = self.viewport.screen_to_world(*self.start)
        body_id = self.simulation.add_body(x, y, vx, vy)
        self.audio.play_sound(PLANET_CREATION)

        self.is_pointer_down = False
        logger.debug("gesture spawned body %d, drag=(%.1f, %.1f) px", body_id, dx, dy)
        return body_id

    def cancel(self) -> None:
        """Abandon the gesture without spawning (e.g. pointer left the window)."""
        self.is_pointer_down = False

    def drag_preview(self) -> tuple[tuple[float, float], tuple[float, float]] | None:
        """
        World-space (start, end) of the aiming arrow while dragging.

        Returns None when no gesture is in progress.
        """
        if not self.is_pointer_down:
            return None
        return (
            self.viewport.screen_to_world(*self.start),
            self.viewport.screen_to_world(*self.current),
        )
