# MIT License (see LICENSE)
"""
Simulation configuration.

SimulationConfig gathers every tunable of the sandbox in one frozen
dataclass. Defaults come from constants.py; values are validated on
construction so the engine never has to check them per step.
"""
from __future__ import annotations
from dataclasses import dataclass, fields

from . import constants as C


@dataclass(frozen=True)
class SimulationConfig:
    """
    Tunables for the gravity engine and its collaborators.

    Attributes:
        gravitational_constant: G in the inverse-square law.
        time_scale: Fixed integration step applied to velocity and position.
        distance_scale: World-unit to force-law distance factor (squared in r²).
        min_distance: Floor for pairwise separation.
        max_force_distance: Pairwise cutoff; beyond it pairs do not interact.
        speed_factor: Gesture drag length (pixels) to initial velocity.
        central_mass: Mass of the fixed central body.
        central_radius: Collision radius of the central body.
        body_mass: Mass shared by every mobile body.
        body_radius: Display radius of a body.
        max_bodies: Capacity of the live-body collection.
        trail_length: Number of samples kept per trail.
        trail_interval_ms: Minimum wall-clock gap between trail samples.
        effect_duration_ms: Lifetime of the collision effect.
        draw_interval_ms: Minimum wall-clock gap between processed frames.
        screen_margin: Extra world units beyond the frame before a body is dropped.
        view_size: Half-height of the orthographic frame in world units.
    """
    gravitational_constant: float = C.G
    time_scale: float = C.TIME_SCALE
    distance_scale: float = C.DISTANCE_SCALE
    min_distance: float = C.MIN_DISTANCE
    max_force_distance: float = C.MAX_FORCE_DISTANCE
    speed_factor: float = C.SPEED_FACTOR
    central_mass: float = C.CENTRAL_MASS
    central_radius: float = C.CENTRAL_RADIUS
    body_mass: float = C.BODY_MASS
    body_radius: float = C.BODY_RADIUS
    max_bodies: int = C.MAX_BODIES
    trail_length: int = C.TRAIL_LENGTH
    trail_interval_ms: float = C.TRAIL_INTERVAL_MS
    effect_duration_ms: float = C.EFFECT_DURATION_MS
    draw_interval_ms: float = C.DRAW_INTERVAL_MS
    screen_margin: float = C.SCREEN_MARGIN
    view_size: float = C.VIEW_SIZE

    def __post_init__(self) -> None:
        positive = (
            "gravitational_constant", "time_scale", "distance_scale",
            "min_distance", "max_force_distance", "speed_factor",
            "body_mass", "body_radius", "central_radius", "view_size",
        )
        for name in positive:
            value = getattr(self, name)
            if not value > 0:
                raise ValueError(f"{name} must be positive, got {value}")

        non_negative = (
            "central_mass", "trail_interval_ms", "effect_duration_ms",
            "draw_interval_ms", "screen_margin",
        )
        for name in non_negative:
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

        if self.max_bodies < 1:
            raise ValueError(f"max_bodies must be at least 1, got {self.max_bodies}")
        if self.trail_length < 1:
            raise ValueError(f"trail_length must be at least 1, got {self.trail_length}")

    @property
    def distance_scale_sq(self) -> float:
        return self.distance_scale * self.distance_scale

    @property
    def min_distance_sq(self) -> float:
        return self.min_distance * self.min_distance

    @property
    def max_force_distance_sq(self) -> float:
        return self.max_force_distance * self.max_force_distance

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        """Names of all configurable fields, in declaration order."""
        return tuple(f.name for f in fields(cls))
