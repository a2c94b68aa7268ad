# MIT License (see LICENSE)
"""
Renderer adapters for the gravity sandbox.

The engine has no rendering dependency. A renderer consumes immutable
BodySnapshots each frame and owns whatever display resources it creates
for a body (mesh, trail line, ...), keyed by body id. When the engine
removes a body it calls release_body() through a removal listener, and
the renderer must drop those resources.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

from ..types import BodySnapshot, Removal

if TYPE_CHECKING:
    from ..simulation import GravitySimulation


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Usage:
        sim.add_removal_listener(renderer.on_removal)
        renderer.render_simulation(sim, time_ms)

    Subclasses implement the drawing hooks for a concrete backend
    (pygame, matplotlib, a web frontend, ...).
    """

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        """
        Begin a new frame.

        Args:
            time: Clock time of the frame in milliseconds.
        """
        ...

    @abstractmethod
    def draw_body(self, body: BodySnapshot) -> None:
        """Draw one body and its trail."""
        ...

    @abstractmethod
    def draw_collision_effect(self, x: float, y: float) -> None:
        """Draw the collision overlay at (x, y)."""
        ...

    @abstractmethod
    def end_frame(self) -> None:
        ...

    @abstractmethod
    def release_body(self, body_id: int) -> None:
        """Drop every display resource created for `body_id`."""
        ...

    def on_removal(self, removal: Removal) -> None:
        """Removal listener: release the removed body's resources."""
        self.release_body(removal.body_id)

    def render_simulation(self, sim: "GravitySimulation", time: float) -> None:
        """
        Convenience method to draw the current state of a simulation.

        Draws every body, then the collision overlay if it is active.
        """
        self.begin_frame(time)
        for body in sim.get_planets():
            self.draw_body(body)
        if sim.has_active_collision_effect():
            self.draw_collision_effect(sim.get_collision_effect_x(), sim.get_collision_effect_y())
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Text renderer for development without a graphics backend.

    Output:
        === Frame t=1234.0 ms ===
        [1] @ (12.50, -3.00) v=(1.0e-12, 0.0e+00) #c8a0f0
        [!] collision at (1.20, 0.40)
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        self.output = output or sys.stdout
        self.verbose = verbose

    def begin_frame(self, time: float) -> None:
        self.output.write(f"=== Frame t={time:.1f} ms ===\n")

    def draw_body(self, body: BodySnapshot) -> None:
        line = f"[{body.id}] @ ({body.x:.2f}, {body.y:.2f})"
        if self.verbose:
            r, g, b = (int(round(c * 255)) for c in body.color)
            line += f" v=({body.vx:.1e}, {body.vy:.1e}) #{r:02x}{g:02x}{b:02x}"
        self.output.write(line + "\n")

    def draw_collision_effect(self, x: float, y: float) -> None:
        self.output.write(f"[!] collision at ({x:.2f}, {y:.2f})\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()

    def release_body(self, body_id: int) -> None:
        if self.verbose:
            self.output.write(f"[-] released {body_id}\n")


class NullRenderer(RendererAdapter):
    """No-op renderer, for headless runs and benchmarks."""

    def begin_frame(self, time: float) -> None:
        pass

    def draw_body(self, body: BodySnapshot) -> None:
        pass

    def draw_collision_effect(self, x: float, y: float) -> None:
        pass

    def end_frame(self) -> None:
        pass

    def release_body(self, body_id: int) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Records frames and releases instead of drawing them.

    Tracks which body ids currently hold "resources" (were drawn and not
    yet released), which makes leaks easy to assert on.

    Example:
        renderer = BufferedRenderer()
        loop = FrameLoop(sim, viewport, renderer, audio)
        for _ in range(100):
            loop.tick()
        for frame in renderer.frames:
            print(frame["time"], len(frame["bodies"]))
    """

    def __init__(self):
        self.frames: list[dict] = []
        self.released: list[int] = []
        self.live_ids: set[int] = set()
        self._current_frame: dict | None = None

    def begin_frame(self, time: float) -> None:
        self._current_frame = {
            "time": time,
            "bodies": [],
            "effect": None,
        }

    def draw_body(self, body: BodySnapshot) -> None:
        if self._current_frame is None:
            return
        self.live_ids.add(body.id)
        self._current_frame["bodies"].append({
            "id": body.id,
            "position": [body.x, body.y],
            "velocity": [body.vx, body.vy],
            "trail": [list(p) for p in body.trail],
        })

    def draw_collision_effect(self, x: float, y: float) -> None:
        if self._current_frame is not None:
            self._current_frame["effect"] = [x, y]

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def release_body(self, body_id: int) -> None:
        self.released.append(body_id)
        self.live_ids.discard(body_id)

    def clear(self) -> None:
        self.frames.clear()
        self.released.clear()
