# MIT License (see LICENSE)
"""
Time stepping for the gravity engine.

The engine uses semi-implicit (symplectic) Euler with a *fixed* step:

    v(t+h) = v(t) + a(t)·h
    x(t+h) = x(t) + v(t+h)·h

h is SimulationConfig.time_scale, not the measured wall time between
frames. Simulation speed is therefore tied to how often the caller
invokes step(); this coupling is intentional and not compensated.

Reference:
    https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
"""
from __future__ import annotations
from typing import Sequence

import numpy as np

from ..types import Body


def semi_implicit_euler_step(body: Body, a: np.ndarray, h: float) -> None:
    """
    Advance one body by one fixed step.

    Args:
        body: Body to integrate (modified in-place).
        a: Acceleration [ax, ay] for this step.
        h: Fixed step size.
    """
    body.integrate(float(a[0]), float(a[1]), h)


def integrate_all(bodies: Sequence[Body], acc: np.ndarray, h: float) -> None:
    """Advance every body using the matching row of `acc`."""
    for i, b in enumerate(bodies):
        semi_implicit_euler_step(b, acc[i], h)
