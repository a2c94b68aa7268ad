# MIT License (see LICENSE)
"""
Diagnostic quantities for the body system.

The engine makes no conservation guarantees (fixed-step Euler, force
cutoff, distance floor), but these are handy to watch drift in
benchmarks and to check properties of the pairwise model in tests:
pairwise forces alone leave total linear momentum unchanged.
"""
from __future__ import annotations
from typing import Sequence

import numpy as np

from ..config import SimulationConfig
from ..types import Body


def kinetic_energy(bodies: Sequence[Body], body_mass: float) -> float:
    """
    T = Σ 0.5 · m · v²
    """
    ke = 0.0
    for b in bodies:
        ke += 0.5 * body_mass * float(np.dot(b.velocity, b.velocity))
    return ke


def linear_momentum(bodies: Sequence[Body], body_mass: float) -> np.ndarray:
    """
    P = Σ m · v
    """
    p = np.zeros(2, dtype=np.float64)
    for b in bodies:
        p += body_mass * b.velocity
    return p


def central_potential_energy(bodies: Sequence[Body], config: SimulationConfig) -> float:
    """
    U = Σ -G · M · m / (r · D²)  for the central field only.

    Matches the scaling of central_acceleration(). Bodies at the origin
    are skipped.
    """
    k = config.gravitational_constant * config.central_mass * config.body_mass / config.distance_scale_sq
    u = 0.0
    for b in bodies:
        r = float(np.hypot(b.position[0], b.position[1]))
        if r > 0.0:
            u -= k / r
    return u
