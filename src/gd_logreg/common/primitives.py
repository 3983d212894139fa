"""
Elementwise numeric primitives shared by the normalizer, cost and solver.

All functions are stateless, return new arrays and preserve the input shape.
"""

from __future__ import annotations

import numpy as np

# Probabilities are kept this far away from 0 and 1 before taking logs.
PROBABILITY_EPSILON = 1e-12


def sigmoid(z: np.ndarray) -> np.ndarray:
    """
    Logistic function ``1 / (1 + exp(-z))``.

    Computed in two branches so large negative inputs do not overflow ``exp``.
    """
    z = np.asarray(z, dtype=float)
    out = np.empty_like(z)
    pos = z >= 0
    out[pos] = 1.0 / (1.0 + np.exp(-z[pos]))
    exp_z = np.exp(z[~pos])
    out[~pos] = exp_z / (1.0 + exp_z)
    return out


def log(z: np.ndarray) -> np.ndarray:
    """Elementwise natural logarithm."""
    return np.log(np.asarray(z, dtype=float))


def one_minus(z: np.ndarray) -> np.ndarray:
    """Elementwise ``1 - z``."""
    return 1.0 - np.asarray(z, dtype=float)


def one_by(z: np.ndarray) -> np.ndarray:
    """Elementwise reciprocal ``1 / z``."""
    return 1.0 / np.asarray(z, dtype=float)


def clamp_probabilities(p: np.ndarray, eps: float = PROBABILITY_EPSILON) -> np.ndarray:
    """Clip probabilities into ``[eps, 1 - eps]`` so their logs stay finite."""
    return np.clip(np.asarray(p, dtype=float), eps, 1.0 - eps)


def matrix_size(m: np.ndarray) -> str:
    """Describe an array shape as ``RxC`` (``Rx1`` for vectors)."""
    shape = np.shape(m)
    if len(shape) == 1:
        return f'{shape[0]}x1'
    return 'x'.join(str(dim) for dim in shape)
