"""Numeric primitives, validation and decision helpers."""

from .errors import (
    DegenerateFeatureError,
    DimensionMismatchError,
    as_feature_matrix,
    as_label_vector,
)
from .metrics import ClassificationMetrics, compute_classification_metrics
from .primitives import (
    PROBABILITY_EPSILON,
    clamp_probabilities,
    log,
    matrix_size,
    one_by,
    one_minus,
    sigmoid,
)
from .threshold import apply_threshold

__all__ = [
    # Errors
    'DegenerateFeatureError',
    'DimensionMismatchError',
    'as_feature_matrix',
    'as_label_vector',
    # Metrics
    'ClassificationMetrics',
    'compute_classification_metrics',
    # Primitives
    'PROBABILITY_EPSILON',
    'clamp_probabilities',
    'log',
    'matrix_size',
    'one_by',
    'one_minus',
    'sigmoid',
    # Threshold
    'apply_threshold',
]
