"""Configuration utilities for gd_logreg."""

from .solver import (
    ALPHA_DEFAULT,
    LAMBDA_DEFAULT,
    NUM_ITER_DEFAULT,
    THRESHOLD_DEFAULT,
    SolverConfig,
    load_solver_config,
)

__all__ = [
    'ALPHA_DEFAULT',
    'LAMBDA_DEFAULT',
    'NUM_ITER_DEFAULT',
    'THRESHOLD_DEFAULT',
    'SolverConfig',
    'load_solver_config',
]
