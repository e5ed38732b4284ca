# MIT License (see LICENSE)
"""
Utility functions for vector math and numeric operations.

The simulation's vector primitive is a float64 numpy array of shape (2,).
These helpers give it the magnitude / normalize operations the force model
needs, plus small range checks used when validating input.
"""
from __future__ import annotations
import math

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Lets callers pass tuples or lists for positions and velocities.
    """
    return np.array(x, dtype=np.float64)


def zeros2() -> np.ndarray:
    """A fresh 2D zero vector."""
    return np.zeros(2, dtype=np.float64)


def norm2(v: np.ndarray) -> float:
    """
    Squared magnitude of a 2D vector. Avoids sqrt for performance.

    Computed on Python floats, so an overflow quietly gives inf instead of
    a numpy RuntimeWarning; callers treat non-finite results as degenerate.
    """
    x, y = float(v[0]), float(v[1])
    return x * x + y * y


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 2D vector."""
    return float(np.sqrt(norm2(v)))


def unit(v: np.ndarray, eps: float = 1e-12) -> np.ndarray:
    """
    Return a unit (normalized) vector in the same direction as v.

    Returns zero vector if |v| < eps to avoid division by zero.
    """
    n = norm(v)
    if n < eps:
        return zeros2()
    return v / n


def is_finite_vec(v: np.ndarray) -> bool:
    return bool(np.all(np.isfinite(v)))


def in_closed_range(x: float, lo: float, hi: float) -> bool:
    """True if lo <= x <= hi and x is finite."""
    return math.isfinite(x) and lo <= x <= hi
