"""
Batch gradient descent with a stepped learning-rate decay.

Every ``ALPHA_SCALING_ITERATIONS`` iterations the step size is divided by
``ALPHA_SCALING_FACTOR``, before that iteration's update. The loop always runs
the requested number of iterations.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from gd_logreg.config import ALPHA_DEFAULT, LAMBDA_DEFAULT, NUM_ITER_DEFAULT
from gd_logreg.utils import get_logger, json_log

from .cost import evaluate

log = get_logger(__name__)

ALPHA_SCALING_FACTOR = 2.0
ALPHA_SCALING_ITERATIONS = 50


@dataclass(frozen=True)
class DescentState:
    theta: np.ndarray
    alpha: float


@dataclass
class DescentResult:
    """Final parameters plus per-iteration diagnostics."""

    theta: np.ndarray
    # costs[t - 1] is the cost evaluated before update t
    costs: list[float] = field(default_factory=list)
    # step_sizes[t - 1] is the alpha applied in update t
    step_sizes: list[float] = field(default_factory=list)

    @property
    def final_cost(self) -> float | None:
        return self.costs[-1] if self.costs else None


def step_size(
    iteration: int,
    alpha: float,
    period: int = ALPHA_SCALING_ITERATIONS,
    factor: float = ALPHA_SCALING_FACTOR,
) -> float:
    """Step size in force for the 1-based ``iteration``."""
    for _ in range(iteration // period):
        alpha /= factor
    return alpha


def descent_step(
    state: DescentState,
    iteration: int,
    gradient: np.ndarray,
) -> DescentState:
    """One update: decay alpha on period boundaries, then move against the gradient."""
    alpha = state.alpha
    if iteration % ALPHA_SCALING_ITERATIONS == 0:
        alpha /= ALPHA_SCALING_FACTOR
    return DescentState(theta=state.theta - alpha * gradient, alpha=alpha)


def gradient_descent(
    mX: np.ndarray,
    vY: np.ndarray,
    initial_theta: np.ndarray,
    alpha: float = ALPHA_DEFAULT,
    reg_lambda: float = LAMBDA_DEFAULT,
    num_iterations: int = NUM_ITER_DEFAULT,
) -> DescentResult:
    """
    Run ``num_iterations`` full-batch gradient descent updates.

    Args:
        mX: Training matrix (m x n), bias column included
        vY: Training labels (m,)
        initial_theta: Starting parameters (n,); not modified
        alpha: Initial step size
        reg_lambda: L2 penalty
        num_iterations: Number of updates

    Returns:
        DescentResult with the final theta, costs and step sizes
    """
    if num_iterations < 0:
        raise ValueError(f'num_iterations must be non-negative, got {num_iterations}')

    state = DescentState(theta=np.array(initial_theta, dtype=float), alpha=float(alpha))
    costs: list[float] = []
    step_sizes: list[float] = []

    log.debug(
        json_log(
            'descent.start',
            component='optimizer',
            alpha=alpha,
            reg_lambda=reg_lambda,
            num_iterations=num_iterations,
            n_params=state.theta.shape[0],
        )
    )

    for iteration in range(1, num_iterations + 1):
        cost, grad = evaluate(mX, vY, state.theta, reg_lambda)
        state = descent_step(state, iteration, grad)
        costs.append(cost)
        step_sizes.append(state.alpha)

        if iteration % ALPHA_SCALING_ITERATIONS == 0:
            log.debug(
                json_log(
                    'descent.progress',
                    component='optimizer',
                    iteration=iteration,
                    cost=cost,
                    alpha=state.alpha,
                )
            )

    log.debug(
        json_log(
            'descent.completed',
            component='optimizer',
            iterations=num_iterations,
            final_cost=costs[-1] if costs else None,
        )
    )
    return DescentResult(theta=state.theta, costs=costs, step_sizes=step_sizes)
