"""Decision rule turning positive-class probabilities into labels."""

from __future__ import annotations

import numpy as np


def apply_threshold(probabilities: np.ndarray, threshold: float) -> np.ndarray:
    """
    Apply decision rule to get predictions.

    Decision rule: predict positive (1) if probability >= threshold.

    Args:
        probabilities: Predicted probability of the positive class
        threshold: Decision threshold in [0, 1]

    Returns:
        Predicted labels (0=negative, 1=positive) as an int array
    """
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f'threshold must be in [0, 1], got {threshold}')
    return np.where(np.asarray(probabilities) >= threshold, 1, 0)
