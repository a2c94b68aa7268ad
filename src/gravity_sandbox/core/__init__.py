# MIT License (see LICENSE)
"""
Core physics of the gravity sandbox.

This subpackage provides:
    - Force model: central gravity and pairwise gravity with cutoff/floor.
    - Integrator: fixed-step semi-implicit Euler.
    - Invariants: energy and momentum diagnostics.

Typical usage:
    from gravity_sandbox.core import apply_central_gravity, integrate_all

    acc = np.zeros((len(bodies), 2))
    apply_central_gravity(bodies, acc, central, config)
    integrate_all(bodies, acc, config.time_scale)
"""
from .forces import (
    central_acceleration,
    pair_force,
    pair_acceleration,
    apply_central_gravity,
    apply_pairwise_gravity,
)
from .integrators import semi_implicit_euler_step, integrate_all
from .invariants import kinetic_energy, linear_momentum, central_potential_energy

__all__ = [
    # Forces
    "central_acceleration",
    "pair_force",
    "pair_acceleration",
    "apply_central_gravity",
    "apply_pairwise_gravity",
    # Integrators
    "semi_implicit_euler_step",
    "integrate_all",
    # Invariants
    "kinetic_energy",
    "linear_momentum",
    "central_potential_energy",
]
