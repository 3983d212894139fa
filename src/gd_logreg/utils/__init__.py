"""Utility helpers for gd_logreg."""

from .logging import get_logger, json_log

__all__ = ['get_logger', 'json_log']
