"""Feature preprocessing for gd_logreg."""

from .normalization import (
    NormalizationStats,
    add_bias_column,
    compute_normalization_stats,
    normalize,
    normalize_with_bias,
)

__all__ = [
    'NormalizationStats',
    'add_bias_column',
    'compute_normalization_stats',
    'normalize',
    'normalize_with_bias',
]
