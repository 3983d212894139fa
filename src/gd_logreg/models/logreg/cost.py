"""
Regularized cross-entropy cost and its gradient.

Conventions: ``mX`` is m x n (column 0 is the bias column of ones),
``vY`` has m entries in {0, 1}, ``vTheta`` has n entries.
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from gd_logreg.common.errors import DimensionMismatchError
from gd_logreg.common.primitives import (
    clamp_probabilities,
    log,
    matrix_size,
    one_minus,
    sigmoid,
)


class CostResult(NamedTuple):
    cost: float
    gradient: np.ndarray


def regularization_penalty(vTheta: np.ndarray, reg_lambda: float, m: int) -> float:
    """``(lambda / 2m) * sum(theta[1:] ** 2)``; theta[0] is never penalized."""
    tail = vTheta[1:]
    return float((reg_lambda / (2.0 * m)) * (tail @ tail))


def evaluate(
    mX: np.ndarray,
    vY: np.ndarray,
    vTheta: np.ndarray,
    reg_lambda: float,
) -> CostResult:
    """
    Cost of ``vTheta`` on ``(mX, vY)`` and the gradient of that cost.

    The logs are taken of probabilities clamped to ``[1e-12, 1 - 1e-12]`` so the
    cost stays finite when the model saturates. The gradient uses the
    unclamped probabilities.
    """
    m, n = mX.shape
    if vTheta.shape != (n,):
        raise DimensionMismatchError(
            f'parameter vector {matrix_size(vTheta)} does not fit matrix {matrix_size(mX)}'
        )
    if vY.shape != (m,):
        raise DimensionMismatchError(
            f'label vector {matrix_size(vY)} does not fit matrix {matrix_size(mX)}'
        )

    h_x = sigmoid(mX @ vTheta)
    h_safe = clamp_probabilities(h_x)

    # cost = (-1/m) * (log(h)' * y + log(1 - h)' * (1 - y))
    cost = (-1.0 / m) * (log(h_safe) @ vY + log(one_minus(h_safe)) @ one_minus(vY))
    cost += regularization_penalty(vTheta, reg_lambda, m)

    diff = h_x - vY
    grad = (1.0 / m) * (diff @ mX)
    reg = (reg_lambda / m) * vTheta
    reg[0] = 0.0
    grad = grad + reg

    return CostResult(cost=float(cost), gradient=grad)
