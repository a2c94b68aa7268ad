# MIT License (see LICENSE)
"""
Core type definitions for the gravity sandbox.

Defines the fundamental data structures:
- CentralMass: the fixed gravity source at the origin.
- Body: a mobile point mass with a fixed-length position trail.
- BodySnapshot: the immutable view handed to renderers and audio.
- Removal: a record of why and where a body left the simulation.

Bodies follow the discrete equations of motion used by the engine
(semi-implicit Euler with a fixed time scale h):
  v ← v + a·h
  x ← x + v·h
"""
from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from .util import f64


# =============================================================================
# Central mass
# =============================================================================

@dataclass(frozen=True)
class CentralMass:
    """
    Fixed gravity source at the origin.

    Attributes:
        mass: Mass used in the central inverse-square force.
        collision_radius: Bodies strictly closer than this collide with it.
    """
    mass: float
    collision_radius: float

    @property
    def position(self) -> tuple[float, float]:
        return (0.0, 0.0)

    def get_mass(self) -> float:
        return self.mass

    def get_radius(self) -> float:
        return self.collision_radius


# =============================================================================
# Color
# =============================================================================

def random_pastel_color(rng: np.random.Generator) -> tuple[float, float, float]:
    """
    Pick a pastel RGB color with one dominant channel.

    One channel (chosen uniformly) is drawn from [200, 255), the other two
    from [80, 229); all three are then normalized to [0, 1].

    Args:
        rng: Random generator, injected so colors are reproducible in tests.

    Returns:
        (r, g, b) with each component in [0, 1].
    """
    dominant = int(rng.integers(3))
    channels = []
    for i in range(3):
        if i == dominant:
            channels.append(200.0 + rng.random() * 55.0)
        else:
            channels.append(80.0 + rng.random() * 149.0)
    r, g, b = (c / 255.0 for c in channels)
    return (r, g, b)


def color_to_hex(color: tuple[float, float, float]) -> int:
    """Pack a normalized RGB triple into a 0xRRGGBB integer."""
    r, g, b = (int(round(min(1.0, max(0.0, c)) * 255)) for c in color)
    return (r << 16) | (g << 8) | b


# =============================================================================
# Snapshots and removal records
# =============================================================================

@dataclass(frozen=True)
class BodySnapshot:
    """
    Read-only copy of a body's state, safe to hand to collaborators.

    Attributes:
        id: Identity of the body; renderers key their resources on it.
        x, y: Position.
        vx, vy: Velocity.
        color: Normalized RGB triple.
        trail: Historical positions, most recent first.
    """
    id: int
    x: float
    y: float
    vx: float
    vy: float
    color: tuple[float, float, float]
    trail: tuple[tuple[float, float], ...]


class RemovalReason(Enum):
    """Why a body left the live collection."""
    EVICTED = "evicted"
    OUT_OF_BOUNDS = "out_of_bounds"
    CENTRAL_COLLISION = "central_collision"


@dataclass(frozen=True)
class Removal:
    """A body leaving the simulation, delivered to removal listeners."""
    body_id: int
    reason: RemovalReason
    x: float
    y: float


# =============================================================================
# Body
# =============================================================================

@dataclass(eq=False)
class Body:
    """
    A mobile point mass.

    Mass is not stored here: every body shares SimulationConfig.body_mass.

    Attributes:
        position: [x, y] in world units.
        velocity: [vx, vy] in world units per time-scale unit.
        color: Normalized RGB triple assigned once at creation.
        trail_length: Number of samples the trail holds.
        trail: Historical positions, most recent first. Filled with the
               spawn position on init so its length is always trail_length.
        id: Unique identifier assigned by GravitySimulation.add_body().
    """
    position: np.ndarray | tuple[float, float] = (0.0, 0.0)
    velocity: np.ndarray | tuple[float, float] = (0.0, 0.0)
    color: tuple[float, float, float] = (1.0, 1.0, 1.0)
    trail_length: int = 10
    trail: deque = field(init=False, repr=False)
    id: int = -1

    def __post_init__(self) -> None:
        self.position = f64(self.position)
        self.velocity = f64(self.velocity)
        start = (float(self.position[0]), float(self.position[1]))
        self.trail = deque([start] * self.trail_length, maxlen=self.trail_length)

    @property
    def x(self) -> float:
        return float(self.position[0])

    @property
    def y(self) -> float:
        return float(self.position[1])

    @property
    def color_hex(self) -> int:
        return color_to_hex(self.color)

    def integrate(self, ax: float, ay: float, time_scale: float) -> None:
        """
        Advance one step with semi-implicit Euler.

        The updated velocity is used for the position update.

        Args:
            ax, ay: Acceleration accumulated for this step.
            time_scale: Fixed step size (not the measured frame time).
        """
        self.velocity[0] += ax * time_scale
        self.velocity[1] += ay * time_scale
        self.position[0] += self.velocity[0] * time_scale
        self.position[1] += self.velocity[1] * time_scale

    def sample_trail(self) -> None:
        """Push the current position onto the head of the trail, dropping the oldest."""
        self.trail.appendleft((self.x, self.y))

    def is_out_of_bounds(self, max_x: float, max_y: float) -> bool:
        return abs(self.position[0]) > max_x or abs(self.position[1]) > max_y

    def is_collided_with_central(self, central: CentralMass) -> bool:
        """True if strictly inside the central collision radius."""
        r = central.collision_radius
        x, y = self.position
        return x * x + y * y < r * r

    def snapshot(self) -> BodySnapshot:
        return BodySnapshot(
            id=self.id,
            x=self.x,
            y=self.y,
            vx=float(self.velocity[0]),
            vy=float(self.velocity[1]),
            color=self.color,
            trail=tuple(self.trail),
        )
