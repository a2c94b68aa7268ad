# MIT License (see LICENSE)
import numpy as np

from gravity_sandbox.config import SimulationConfig
from gravity_sandbox.core.forces import (
    apply_central_gravity,
    apply_pairwise_gravity,
    central_acceleration,
    pair_acceleration,
    pair_force,
)
from gravity_sandbox.types import Body, CentralMass


def _bodies(*positions):
    return [Body(position=p) for p in positions]


def test_pairs_beyond_cutoff_contribute_nothing():
    cfg = SimulationConfig()
    # 120 apart, cutoff 100
    bodies = _bodies((-60.0, 0.0), (60.0, 0.0))
    acc = np.zeros((2, 2))

    n = apply_pairwise_gravity(bodies, acc, cfg)

    assert n == 0
    assert np.array_equal(acc, np.zeros((2, 2)))
    assert np.array_equal(pair_acceleration(np.array([0.0, 0.0]), np.array([0.0, 100.5]), cfg), [0.0, 0.0])


def test_pair_at_exact_cutoff_still_interacts():
    cfg = SimulationConfig()
    a = pair_acceleration(np.array([0.0, 0.0]), np.array([100.0, 0.0]), cfg)
    assert a[0] > 0.0
    assert a[1] == 0.0


def test_force_below_floor_equals_force_at_floor():
    cfg = SimulationConfig(min_distance=2.0)
    at_floor = pair_force(4.0, cfg)

    for r2 in (0.0, 1e-12, 0.5, 3.99):
        assert pair_force(r2, cfg) == at_floor
    assert pair_force(9.0, cfg) < at_floor


def test_coincident_bodies_stay_finite():
    cfg = SimulationConfig()
    bodies = _bodies((3.0, 4.0), (3.0, 4.0))
    acc = np.zeros((2, 2))

    apply_pairwise_gravity(bodies, acc, cfg)

    assert np.all(np.isfinite(acc))
    assert np.array_equal(acc, np.zeros((2, 2)))


def test_pairwise_is_equal_and_opposite():
    cfg = SimulationConfig(gravitational_constant=1.0, distance_scale=1.0, body_mass=1.0)
    positions = [np.array(p) for p in ((10.0, 3.0), (12.0, -1.0), (15.0, 5.0), (10.2, 3.1))]

    for i in range(len(positions)):
        for j in range(i + 1, len(positions)):
            a_ij = pair_acceleration(positions[i], positions[j], cfg)
            a_ji = pair_acceleration(positions[j], positions[i], cfg)
            assert np.array_equal(a_ij, -a_ji)

    acc = np.zeros((4, 2))
    apply_pairwise_gravity(_bodies(*positions), acc, cfg)
    assert np.allclose(acc.sum(axis=0), 0.0, atol=1e-12)


def test_pair_acceleration_points_at_partner():
    cfg = SimulationConfig(gravitational_constant=1.0, distance_scale=1.0, body_mass=1.0)
    a = pair_acceleration(np.array([0.0, 0.0]), np.array([0.0, 4.0]), cfg)
    # F = G m m / r^2 = 1/16, a = F/m
    assert a[0] == 0.0
    assert np.isclose(a[1], 1.0 / 16.0)


def test_central_gravity_points_to_origin():
    cfg = SimulationConfig()
    central = CentralMass(mass=cfg.central_mass, collision_radius=cfg.central_radius)

    a = central_acceleration(np.array([50.0, 0.0]), central, cfg)
    expected = cfg.gravitational_constant * cfg.central_mass / (2500.0 * cfg.distance_scale_sq)

    assert a[0] < 0.0
    assert a[1] == 0.0
    assert np.isclose(-a[0], expected)

    b = central_acceleration(np.array([-30.0, 40.0]), central, cfg)
    assert b[0] > 0.0 and b[1] < 0.0
    assert np.isclose(b[1] / b[0], 40.0 / -30.0)


def test_central_gravity_at_origin_is_zero():
    cfg = SimulationConfig()
    central = CentralMass(mass=cfg.central_mass, collision_radius=cfg.central_radius)
    a = central_acceleration(np.array([0.0, 0.0]), central, cfg)
    assert np.array_equal(a, [0.0, 0.0])


def test_separated_pair_feels_only_the_center():
    """
    Two bodies further apart than the cutoff: both accelerate toward the
    center, and the pairwise pass adds exactly nothing.
    """
    cfg = SimulationConfig()
    central = CentralMass(mass=cfg.central_mass, collision_radius=cfg.central_radius)
    bodies = _bodies((-60.0, 10.0), (60.0, -10.0))
    acc = np.zeros((2, 2))

    apply_central_gravity(bodies, acc, central, cfg)
    central_only = acc.copy()
    apply_pairwise_gravity(bodies, acc, cfg)

    assert np.all(np.abs(central_only) > 0.0)
    assert central_only[0, 0] > 0.0 and central_only[1, 0] < 0.0
    assert np.array_equal(acc, central_only)
