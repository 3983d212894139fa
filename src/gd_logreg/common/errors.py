"""Error types and input coercion used before any computation starts."""

from __future__ import annotations

import numpy as np

from .primitives import matrix_size


class DimensionMismatchError(ValueError):
    """Raised when matrices, labels or parameters have incompatible shapes."""


class DegenerateFeatureError(ValueError):
    """Raised when no training column has a non-zero range."""


def as_feature_matrix(values, name: str = 'matrix') -> np.ndarray:
    """Return ``values`` as a finite 2-D float array (copying, never aliasing)."""
    arr = np.array(values, dtype=float)
    if arr.ndim != 2:
        raise ValueError(f'{name} must be 2-dimensional, got shape {arr.shape}')
    if arr.shape[0] == 0 or arr.shape[1] == 0:
        raise ValueError(f'{name} must not be empty, got {matrix_size(arr)}')
    if not np.all(np.isfinite(arr)):
        raise ValueError(f'{name} contains NaN or infinite values')
    return arr


def as_label_vector(values, name: str = 'labels') -> np.ndarray:
    """Return binary labels as a 1-D float array; ``(m, 1)`` columns are flattened."""
    arr = np.array(values, dtype=float)
    if arr.ndim == 2 and arr.shape[1] == 1:
        arr = arr[:, 0]
    if arr.ndim != 1:
        raise ValueError(f'{name} must be a vector, got shape {arr.shape}')
    if not np.all(np.isin(arr, (0.0, 1.0))):
        raise ValueError(f'{name} must only contain 0 and 1')
    return arr


def check_same_columns(mX_training: np.ndarray, mX_test: np.ndarray) -> None:
    if mX_training.shape[1] != mX_test.shape[1]:
        raise DimensionMismatchError(
            'training and test matrices must have the same number of columns: '
            f'{matrix_size(mX_training)} vs {matrix_size(mX_test)}'
        )


def check_label_rows(mX: np.ndarray, vY: np.ndarray) -> None:
    if mX.shape[0] != vY.shape[0]:
        raise DimensionMismatchError(
            f'label vector ({matrix_size(vY)}) does not match '
            f'training matrix rows ({matrix_size(mX)})'
        )
