# MIT License (see LICENSE)
"""
Orthographic viewport framing.

The world is framed by an orthographic camera centered on the origin:
half-height `view_size`, half-width `view_size * aspect`. The viewport
supplies the removal bounds each frame and maps pointer coordinates
(pixels, origin top-left, y down) to world coordinates (y up).
"""
from __future__ import annotations
from dataclasses import dataclass

from . import constants as C
from .config import SimulationConfig


@dataclass
class Viewport:
    """
    Attributes:
        width, height: Drawable area in pixels.
        view_size: Half-height of the frame in world units.
        margin: World units beyond the frame before bodies are dropped.
    """
    width: float
    height: float
    view_size: float = C.VIEW_SIZE
    margin: float = C.SCREEN_MARGIN

    def __post_init__(self) -> None:
        self._check(self.width, self.height)

    @staticmethod
    def _check(width: float, height: float) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Viewport size must be positive, got {width}x{height}")

    @property
    def aspect(self) -> float:
        return self.width / self.height

    @property
    def right(self) -> float:
        return self.view_size * self.aspect

    @property
    def left(self) -> float:
        return -self.right

    @property
    def top(self) -> float:
        return self.view_size

    @property
    def bottom(self) -> float:
        return -self.view_size

    def resize(self, width: float, height: float) -> None:
        """Reframe for a new window size; the vertical extent is kept."""
        self._check(width, height)
        self.width = width
        self.height = height

    def bounds(self) -> tuple[float, float]:
        """(max_x, max_y) for GravitySimulation.remove_out_of_range()."""
        return (self.right + self.margin, self.top + self.margin)

    def screen_to_world(self, sx: float, sy: float) -> tuple[float, float]:
        # pixels -> normalized device coords in [-1, 1], y flipped
        nx = (sx / self.width) * 2.0 - 1.0
        ny = -(sy / self.height) * 2.0 + 1.0
        return (nx * self.right, ny * self.top)

    @classmethod
    def from_config(cls, width: float, height: float, config: SimulationConfig) -> "Viewport":
        return cls(width, height, view_size=config.view_size, margin=config.screen_margin)
