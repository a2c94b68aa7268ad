# MIT License (see LICENSE)
"""
Small numeric helpers shared by the force model and the body type.

All vectors are numpy float64 arrays of shape (2,).
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Lets callers pass tuples or lists for positions and velocities.
    """
    return np.array(x, dtype=np.float64)


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 2D vector. Avoids sqrt."""
    return float(v[0] * v[0] + v[1] * v[1])
