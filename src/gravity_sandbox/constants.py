# MIT License (see LICENSE)
"""
Default constants for the gravity sandbox.

Values are in scaled "world" units: positions are measured in viewport
units (the default frame is 100 units tall), masses are dimensionless
and DISTANCE_SCALE / TIME_SCALE map the inverse-square law onto those
units. These are the defaults of SimulationConfig; tune through the
config rather than editing this module.
"""
from __future__ import annotations

# -----------------------------------------------------------------------------
# Physics
# -----------------------------------------------------------------------------

# Gravitational constant, m^3 kg^-1 s^-2
G: float = 6.67430e-11

# Fixed integration step. Multiplies both acceleration and velocity each
# step(), so simulation speed follows how often step() is called.
TIME_SCALE: float = 2.0e11

# Divides r² in the force law: world units -> "physical" distance.
DISTANCE_SCALE: float = 1.0e9

# Pairwise separations below this are floored to it (r² → max(r², MIN²)).
MIN_DISTANCE: float = 1.0

# Pairs further apart than this exert no force on each other.
MAX_FORCE_DISTANCE: float = 100.0

# Gesture drag length (pixels) -> initial velocity.
SPEED_FACTOR: float = 2.0e-14

# -----------------------------------------------------------------------------
# Central mass ("sun")
# -----------------------------------------------------------------------------

CENTRAL_MASS: float = 1.11e7
CENTRAL_RADIUS: float = 5.0

# -----------------------------------------------------------------------------
# Bodies ("planets")
# -----------------------------------------------------------------------------

BODY_MASS: float = 200000.0
BODY_RADIUS: float = 1.0  # display only
MAX_BODIES: int = 10
TRAIL_LENGTH: int = 10

# -----------------------------------------------------------------------------
# Frame cadence and viewport
# -----------------------------------------------------------------------------

DRAW_INTERVAL_MS: float = 70.0
TRAIL_INTERVAL_MS: float = 35.0
SCREEN_MARGIN: float = 20.0
VIEW_SIZE: float = 50.0

# -----------------------------------------------------------------------------
# Collision effect
# -----------------------------------------------------------------------------

EFFECT_DURATION_MS: float = 105.0
EFFECT_RADIUS: float = 2.0  # display only
