# MIT License (see LICENSE)
"""
The gravity simulation core.

GravitySimulation owns the live bodies and advances them. It manages:
- The ordered, bounded collection of bodies (creation order, FIFO eviction).
- The per-frame step:
    1. Trail-sampling cooldown and collision-effect expiry.
    2. Force accumulation (central mass + pairwise with cutoff/floor).
    3. Fixed-step semi-implicit Euler integration.
    4. Trail sampling, when the cooldown fired.
- Removal of bodies that leave the viewport or fall into the center,
  with synchronous notification of removal listeners.

Structure:
    - Caller creates a GravitySimulation.
    - Input collaborators call add_body() between frames.
    - Each frame the caller calls step(), then remove_out_of_range(),
      then reads get_planets() / collision-effect accessors.

The core never sleeps, throttles, or spawns threads; cadence is the
caller's business.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field, replace
from typing import Callable

import numpy as np

from .config import SimulationConfig
from .core.forces import apply_central_gravity, apply_pairwise_gravity
from .core.integrators import integrate_all
from .effects import CollisionEffectState
from .profiler import Profiler, maybe_section
from .timers import Clock, Cooldown, monotonic_ms
from .types import (
    Body,
    BodySnapshot,
    CentralMass,
    Removal,
    RemovalReason,
    random_pastel_color,
)

logger = logging.getLogger(__name__)

RemovalListener = Callable[[Removal], None]


@dataclass
class GravitySimulation:
    """
    Bounded N-body sandbox around a fixed central mass.

    Attributes:
        config: Tunables (constants, capacity, cooldown intervals).
        clock: Millisecond clock consulted by the cooldowns. Defaults to
               a monotonic wall clock; tests inject a fake.
        rng: Random generator used for body colors.
        profiler: Optional Profiler for per-phase timings.
        steps: Number of step() calls so far.
    """
    config: SimulationConfig = field(default_factory=SimulationConfig)
    clock: Clock = monotonic_ms
    rng: np.random.Generator = field(default_factory=np.random.default_rng)
    profiler: Profiler | None = None
    steps: int = 0

    # Internal state
    _bodies: list[Body] = field(default_factory=list, init=False, repr=False)
    _listeners: list[RemovalListener] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self._central = CentralMass(
            mass=self.config.central_mass,
            collision_radius=self.config.central_radius,
        )
        self._effect = CollisionEffectState()
        self._trail_cooldown = Cooldown(self.config.trail_interval_ms)
        self._next_id = 1
        logger.info(
            "GravitySimulation created: capacity=%d, cutoff=%.1f, trail=%d samples every %.0f ms",
            self.config.max_bodies,
            self.config.max_force_distance,
            self.config.trail_length,
            self.config.trail_interval_ms,
        )

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def add_body(self, x: float, y: float, vx: float, vy: float) -> int:
        """
        Append a new body; evict the oldest if capacity is exceeded.

        Inputs are trusted (finite numbers). Eviction is plain FIFO by
        creation order, regardless of where the oldest body is.

        Returns:
            The id assigned to the new body.
        """
        body = Body(
            position=(x, y),
            velocity=(vx, vy),
            color=random_pastel_color(self.rng),
            trail_length=self.config.trail_length,
        )
        body.id = self._next_id
        self._next_id += 1
        self._bodies.append(body)
        logger.debug("body %d spawned at (%.2f, %.2f)", body.id, x, y)

        if len(self._bodies) > self.config.max_bodies:
            oldest = self._bodies.pop(0)
            logger.debug("body %d evicted (capacity %d)", oldest.id, self.config.max_bodies)
            self._notify(Removal(oldest.id, RemovalReason.EVICTED, oldest.x, oldest.y))

        return body.id

    def add_removal_listener(self, listener: RemovalListener) -> None:
        """
        Register a callback invoked synchronously whenever a body is removed.

        Renderers use it to release resources keyed by Removal.body_id.
        """
        self._listeners.append(listener)

    def remove_removal_listener(self, listener: RemovalListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, removal: Removal) -> None:
        for listener in list(self._listeners):
            listener(removal)

    # -------------------------------------------------------------------------
    # Per-frame update
    # -------------------------------------------------------------------------

    def step(self) -> bool:
        """
        Advance every body by one fixed step.

        Architecture:
        1. Consult the trail cooldown (fires → sample this step).
        2. Expire the collision effect if it outlived its duration.
        3. Accumulate accelerations: central, then pairwise.
        4. Integrate with the fixed time scale.
        5. Sample trails if the cooldown fired.

        Returns:
            Whether trails were sampled on this step.
        """
        prof = self.profiler
        cfg = self.config
        now = self.clock()
        self.steps += 1

        sample_trails = self._trail_cooldown.ready(now)

        with maybe_section(prof, "effects"):
            if self._effect.expire(now, cfg.effect_duration_ms):
                logger.debug("collision effect expired")

        if not self._bodies:
            return sample_trails

        acc = np.zeros((len(self._bodies), 2), dtype=np.float64)

        with maybe_section(prof, "forces"):
            apply_central_gravity(self._bodies, acc, self._central, cfg)
            apply_pairwise_gravity(self._bodies, acc, cfg)

        with maybe_section(prof, "integrate"):
            integrate_all(self._bodies, acc, cfg.time_scale)

        if sample_trails:
            with maybe_section(prof, "trails"):
                for b in self._bodies:
                    b.sample_trail()

        return sample_trails

    def remove_out_of_range(self, max_x: float, max_y: float) -> list[Removal]:
        """
        Drop bodies outside the viewport or inside the central mass.

        Bodies are visited once each, newest first, so deleting by index
        never skips a body. Boundary exit is checked first; a body that
        is both out of bounds and inside the central radius is removed as
        OUT_OF_BOUNDS and does not start a collision effect.

        Args:
            max_x, max_y: Half-extents of the allowed region.

        Returns:
            The removals, in the order they happened.
        """
        removals: list[Removal] = []
        if not self._bodies:
            return removals

        now: float | None = None
        with maybe_section(self.profiler, "removal"):
            for i in range(len(self._bodies) - 1, -1, -1):
                body = self._bodies[i]

                if body.is_out_of_bounds(max_x, max_y):
                    reason = RemovalReason.OUT_OF_BOUNDS
                    logger.debug("body %d left the viewport at (%.2f, %.2f)", body.id, body.x, body.y)
                elif body.is_collided_with_central(self._central):
                    reason = RemovalReason.CENTRAL_COLLISION
                    if now is None:
                        now = self.clock()
                    self._effect.trigger(body.x, body.y, now)
                    logger.debug("body %d fell into the central mass at (%.2f, %.2f)", body.id, body.x, body.y)
                else:
                    continue

                del self._bodies[i]
                removal = Removal(body.id, reason, body.x, body.y)
                removals.append(removal)
                self._notify(removal)

        return removals

    # -------------------------------------------------------------------------
    # Read-only accessors
    # -------------------------------------------------------------------------

    @property
    def central(self) -> CentralMass:
        return self._central

    @property
    def collision_effect(self) -> CollisionEffectState:
        """A copy of the collision effect state."""
        return replace(self._effect)

    def get_planet_count(self) -> int:
        return len(self._bodies)

    def get_planets(self) -> tuple[BodySnapshot, ...]:
        """Snapshots of the live bodies, oldest first."""
        return tuple(b.snapshot() for b in self._bodies)

    def has_active_collision_effect(self) -> bool:
        return self._effect.active

    def get_collision_effect_x(self) -> float:
        return self._effect.x

    def get_collision_effect_y(self) -> float:
        return self._effect.y
