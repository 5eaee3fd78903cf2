# MIT License (see LICENSE)
"""
Small 2D vector helpers on top of numpy.

All vectors are float64 numpy arrays of shape (2,).
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Lets callers pass tuples or lists for positions and velocities.
    """
    return np.array(x, dtype=np.float64)


def vec2(x, name: str = "vector") -> np.ndarray:
    """
    Convert to a finite float64 vector of shape (2,).

    Raises:
        ValueError: If the input does not have exactly two finite components.
    """
    try:
        v = f64(x)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be a pair of numbers, got {x!r}") from exc
    if v.shape != (2,):
        raise ValueError(f"{name} must have shape (2,), got {v.shape}")
    if not np.all(np.isfinite(v)):
        raise ValueError(f"{name} must be finite, got {v.tolist()}")
    return v


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 2D vector."""
    return float(v[0] * v[0] + v[1] * v[1])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 2D vector."""
    return float(np.sqrt(norm2(v)))
