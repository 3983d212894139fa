"""
Classification metrics for predictions on a labelled test set.

Thin wrapper over ``sklearn.metrics`` with the positive class fixed to 1.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from sklearn.metrics import (
    accuracy_score,
    confusion_matrix,
    f1_score,
    log_loss,
    precision_score,
    recall_score,
)

from .errors import as_label_vector
from .primitives import PROBABILITY_EPSILON, clamp_probabilities


@dataclass
class ClassificationMetrics:
    """Metrics for binary predictions (positive class = 1)."""

    accuracy: float
    precision: float
    recall: float
    f1: float
    support_neg: int
    support_pos: int
    confusion_matrix: list[list[int]] = field(default_factory=list)
    # Only set when probabilities are supplied
    log_loss: float | None = None


def compute_classification_metrics(
    y_true: np.ndarray,
    y_pred: np.ndarray,
    probabilities: np.ndarray | None = None,
) -> ClassificationMetrics:
    """
    Compute accuracy, precision, recall and F1 for the positive class.

    Args:
        y_true: True labels (0/1)
        y_pred: Predicted labels (0/1)
        probabilities: Optional positive-class probabilities for log loss

    Returns:
        ClassificationMetrics
    """
    y_true = as_label_vector(y_true, name='y_true').astype(int)
    y_pred = as_label_vector(y_pred, name='y_pred').astype(int)
    if y_true.shape != y_pred.shape:
        raise ValueError(
            f'y_true and y_pred lengths differ: {len(y_true)} vs {len(y_pred)}'
        )

    cm = confusion_matrix(y_true, y_pred, labels=[0, 1])

    loss = None
    if probabilities is not None:
        p = clamp_probabilities(np.asarray(probabilities, dtype=float).ravel(), PROBABILITY_EPSILON)
        loss = float(log_loss(y_true, p, labels=[0, 1]))

    return ClassificationMetrics(
        accuracy=float(accuracy_score(y_true, y_pred)),
        precision=float(precision_score(y_true, y_pred, pos_label=1, zero_division=0.0)),
        recall=float(recall_score(y_true, y_pred, pos_label=1, zero_division=0.0)),
        f1=float(f1_score(y_true, y_pred, pos_label=1, zero_division=0.0)),
        support_neg=int(np.sum(y_true == 0)),
        support_pos=int(np.sum(y_true == 1)),
        confusion_matrix=cm.tolist(),
        log_loss=loss,
    )
