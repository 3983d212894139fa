"""
Min/max feature scaling driven by the training matrix.

Constant training columns (``max == min``) carry no information and are
dropped. The retained columns, their order and their min/max come from the
training matrix only; the test matrix is rescaled with the same statistics,
so its values may fall outside [0, 1].
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from gd_logreg.common.errors import (
    DegenerateFeatureError,
    as_feature_matrix,
    check_same_columns,
)
from gd_logreg.common.primitives import matrix_size
from gd_logreg.utils import get_logger, json_log

log = get_logger(__name__)


@dataclass(frozen=True)
class NormalizationStats:
    """Per-column min/max for the training columns with a non-zero range."""

    indices: tuple[int, ...]
    minimums: np.ndarray
    maximums: np.ndarray
    n_columns: int

    @property
    def ranges(self) -> np.ndarray:
        return self.maximums - self.minimums

    @property
    def dropped(self) -> tuple[int, ...]:
        kept = set(self.indices)
        return tuple(i for i in range(self.n_columns) if i not in kept)

    def apply(self, mX: np.ndarray) -> np.ndarray:
        """Rescale ``mX`` into the retained-column space (returns a new array)."""
        mX = np.asarray(mX, dtype=float)
        if mX.shape[1] != self.n_columns:
            raise ValueError(
                f'expected {self.n_columns} columns, got {matrix_size(mX)}'
            )
        selected = mX[:, list(self.indices)]
        return (selected - self.minimums) / self.ranges


def compute_normalization_stats(mX_training: np.ndarray) -> NormalizationStats:
    """
    Collect min/max of every training column with ``max - min > 0``.

    Raises:
        DegenerateFeatureError: if every column is constant.
    """
    mX_training = as_feature_matrix(mX_training, name='training matrix')
    maxx = mX_training.max(axis=0)
    minx = mX_training.min(axis=0)
    keep = (maxx - minx) > 0.0
    indices = tuple(int(i) for i in np.flatnonzero(keep))

    if not indices:
        raise DegenerateFeatureError(
            f'all {mX_training.shape[1]} training columns are constant; '
            'nothing left to train on'
        )

    stats = NormalizationStats(
        indices=indices,
        minimums=minx[keep],
        maximums=maxx[keep],
        n_columns=mX_training.shape[1],
    )
    if stats.dropped:
        log.info(
            json_log(
                'normalize.dropped_columns',
                component='features.normalization',
                dropped=list(stats.dropped),
                retained=len(indices),
            )
        )
    return stats


def normalize(
    mX_training: np.ndarray,
    mX_test: np.ndarray,
) -> tuple[np.ndarray, np.ndarray, list[int]]:
    """
    Normalize both matrices according to the training matrix.

    Returns:
        (normalized training, normalized test, retained column indices)
    """
    mX_training = as_feature_matrix(mX_training, name='training matrix')
    mX_test = as_feature_matrix(mX_test, name='test matrix')
    check_same_columns(mX_training, mX_test)

    stats = compute_normalization_stats(mX_training)
    return stats.apply(mX_training), stats.apply(mX_test), list(stats.indices)


def add_bias_column(*matrices: np.ndarray) -> list[np.ndarray]:
    """Prepend a column of ones to each of the given matrices."""
    result = []
    for m in matrices:
        m = np.asarray(m, dtype=float)
        result.append(np.hstack([np.ones((m.shape[0], 1)), m]))
    return result


def normalize_with_bias(
    mX_training: np.ndarray,
    mX_test: np.ndarray,
) -> tuple[np.ndarray, np.ndarray, list[int]]:
    """Like :func:`normalize`, with the bias column of ones as column 0."""
    norm_training, norm_test, indices = normalize(mX_training, mX_test)
    norm_training, norm_test = add_bias_column(norm_training, norm_test)
    return norm_training, norm_test, indices
