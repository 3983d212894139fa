"""
Train on one matrix, predict on another.

``solve`` validates its inputs, normalizes both matrices from the training
statistics (bias column prepended), starts every parameter at 0.5, runs
gradient descent and thresholds the test probabilities.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from gd_logreg.common.errors import (
    as_feature_matrix,
    as_label_vector,
    check_label_rows,
    check_same_columns,
)
from gd_logreg.common.primitives import matrix_size, sigmoid
from gd_logreg.common.threshold import apply_threshold
from gd_logreg.config import (
    ALPHA_DEFAULT,
    LAMBDA_DEFAULT,
    NUM_ITER_DEFAULT,
    THRESHOLD_DEFAULT,
    SolverConfig,
)
from gd_logreg.features.normalization import normalize_with_bias
from gd_logreg.utils import get_logger, json_log

from .optimizer import gradient_descent

log = get_logger(__name__)

INITIAL_THETA_VALUE = 0.5


@dataclass
class SolveResult:
    """Predictions for the test matrix and the trained parameters."""

    labels: np.ndarray
    probabilities: np.ndarray
    theta: np.ndarray
    retained_indices: list[int] = field(default_factory=list)
    costs: list[float] = field(default_factory=list)
    step_sizes: list[float] = field(default_factory=list)

    def as_tuple(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        return self.labels, self.probabilities, self.theta


def predict_proba(norm_X: np.ndarray, theta: np.ndarray) -> np.ndarray:
    """Positive-class probability for each row of an already-normalized matrix."""
    if norm_X.shape[1] != theta.shape[0]:
        raise ValueError(
            f'matrix {matrix_size(norm_X)} does not fit parameters {matrix_size(theta)}'
        )
    return sigmoid(norm_X @ theta)


def solve(
    mX_training: np.ndarray,
    vY_training: np.ndarray,
    mX_test: np.ndarray,
    alpha: float = ALPHA_DEFAULT,
    reg_lambda: float = LAMBDA_DEFAULT,
    num_iterations: int = NUM_ITER_DEFAULT,
    threshold: float = THRESHOLD_DEFAULT,
) -> SolveResult:
    """
    Fit logistic regression on the training set and predict the test set.

    Args:
        mX_training: Training features (m x n)
        vY_training: Training labels, m values in {0, 1}
        mX_test: Test features (k x n)
        alpha: Initial gradient-descent step size
        reg_lambda: L2 penalty (bias excluded)
        num_iterations: Number of gradient-descent updates
        threshold: Probability at or above which a test row is labelled 1

    Returns:
        SolveResult with labels, probabilities and trained theta

    Raises:
        DimensionMismatchError: if column counts or label rows disagree
        DegenerateFeatureError: if every training column is constant
    """
    # Validates the hyperparameters
    config = SolverConfig(
        alpha=alpha,
        reg_lambda=reg_lambda,
        num_iterations=num_iterations,
        threshold=threshold,
    )

    mX_training = as_feature_matrix(mX_training, name='training matrix')
    mX_test = as_feature_matrix(mX_test, name='test matrix')
    vY_training = as_label_vector(vY_training, name='training labels')
    check_same_columns(mX_training, mX_test)
    check_label_rows(mX_training, vY_training)

    log.info(
        json_log(
            'solve.start',
            component='solver',
            training=matrix_size(mX_training),
            test=matrix_size(mX_test),
            **config.as_dict(),
        )
    )

    norm_training, norm_test, indices = normalize_with_bias(mX_training, mX_test)

    initial_theta = np.full(norm_training.shape[1], INITIAL_THETA_VALUE)
    descent = gradient_descent(
        norm_training,
        vY_training,
        initial_theta,
        alpha=config.alpha,
        reg_lambda=config.reg_lambda,
        num_iterations=config.num_iterations,
    )
    theta = descent.theta

    probabilities = predict_proba(norm_test, theta)
    labels = apply_threshold(probabilities, config.threshold)

    log.info(
        json_log(
            'solve.completed',
            component='solver',
            retained_features=len(indices),
            final_cost=descent.final_cost,
            predicted_pos=int(labels.sum()),
            predicted_neg=int(labels.size - labels.sum()),
        )
    )

    return SolveResult(
        labels=labels,
        probabilities=probabilities,
        theta=theta.copy(),
        retained_indices=indices,
        costs=descent.costs,
        step_sizes=descent.step_sizes,
    )


def solve_from_config(
    mX_training: np.ndarray,
    vY_training: np.ndarray,
    mX_test: np.ndarray,
    config: SolverConfig,
) -> SolveResult:
    """Run :func:`solve` with hyperparameters taken from a ``SolverConfig``."""
    return solve(mX_training, vY_training, mX_test, **config.as_dict())
