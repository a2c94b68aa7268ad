# MIT License (see LICENSE)
"""
Gravity force model.

Accelerations are accumulated into an (n, 2) float64 array indexed like
the live-body list, then handed to the integrator. Two sources:

- Central gravity: every body is pulled toward the origin by the central
  mass with the inverse-square law
      F = G · M · m / (r² · D²)        a = F / m
  where D is the distance scale.

- Pairwise gravity between bodies, with two deliberate approximations:
    * pairs with r² > R_cut² are skipped entirely (bounds the O(N²) cost);
    * r² is floored to r_min² so the force stays finite as r → 0.
  Each interacting pair receives equal and opposite accelerations.

The direction term uses the raw separation vector divided by the
effective (floored) distance, so coincident bodies get a zero vector
instead of a NaN.
"""
from __future__ import annotations
from typing import Sequence

import numpy as np

from ..config import SimulationConfig
from ..types import Body, CentralMass
from ..util import norm2


def central_acceleration(
    position: np.ndarray,
    central: CentralMass,
    config: SimulationConfig,
) -> np.ndarray:
    """
    Acceleration of a body at `position` due to the central mass.

    Args:
        position: Body position [x, y].
        central: The fixed central mass at the origin.
        config: Supplies G, body mass and distance scale.

    Returns:
        Acceleration [ax, ay]. Zero for a body exactly at the origin,
        where the direction is undefined.
    """
    d = -np.asarray(position, dtype=np.float64)
    r2 = norm2(d)
    if r2 == 0.0:
        return np.zeros(2, dtype=np.float64)
    r = np.sqrt(r2)
    m = config.body_mass
    force = config.gravitational_constant * m * central.mass / (r2 * config.distance_scale_sq)
    return force * d / (r * m)


def pair_force(r2: float, config: SimulationConfig) -> float:
    """
    Scalar force between two bodies at squared separation `r2`.

    Separations under the floor are evaluated at the floor. The cutoff
    is not applied here; see pair_acceleration().
    """
    r2_eff = max(r2, config.min_distance_sq)
    m = config.body_mass
    return config.gravitational_constant * m * m / (r2_eff * config.distance_scale_sq)


def pair_acceleration(
    pi: np.ndarray,
    pj: np.ndarray,
    config: SimulationConfig,
) -> np.ndarray:
    """
    Acceleration body i receives from body j (body j receives the negative).

    Returns:
        [ax, ay]; exactly zero if the pair is beyond the cutoff distance.
    """
    d = np.asarray(pj, dtype=np.float64) - np.asarray(pi, dtype=np.float64)
    r2 = norm2(d)
    if r2 > config.max_force_distance_sq:
        return np.zeros(2, dtype=np.float64)
    r = np.sqrt(max(r2, config.min_distance_sq))
    return pair_force(r2, config) * d / (r * config.body_mass)


def apply_central_gravity(
    bodies: Sequence[Body],
    acc: np.ndarray,
    central: CentralMass,
    config: SimulationConfig,
) -> None:
    """
    Add central-mass gravity to every row of `acc`.

    Modifies acc in-place.
    """
    for i, b in enumerate(bodies):
        acc[i] += central_acceleration(b.position, central, config)


def apply_pairwise_gravity(
    bodies: Sequence[Body],
    acc: np.ndarray,
    config: SimulationConfig,
) -> int:
    """
    Add body-body gravity for every unordered pair within the cutoff.

    Uses Newton's third law: the pair's contribution is added to i and
    subtracted from j.

    Complexity: O(N²) pair checks; only pairs within the cutoff pay for
    the sqrt and force evaluation.

    Args:
        bodies: Live bodies, in the same order as the rows of acc.
        acc: (n, 2) acceleration accumulator, modified in-place.
        config: Supplies cutoff, floor, G, mass and distance scale.

    Returns:
        Number of pairs that interacted (within the cutoff).
    """
    n = len(bodies)
    cutoff_sq = config.max_force_distance_sq
    interacting = 0
    for i in range(n):
        pi = bodies[i].position
        for j in range(i + 1, n):
            pj = bodies[j].position
            dx = pj[0] - pi[0]
            dy = pj[1] - pi[1]
            if dx * dx + dy * dy > cutoff_sq:
                continue

            a = pair_acceleration(pi, pj, config)

            # Newton's third law
            acc[i] += a
            acc[j] -= a
            interacting += 1
    return interacting
