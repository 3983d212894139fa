"""Model implementations for gd_logreg."""

from . import logreg

__all__ = ['logreg']
