"""Binary logistic regression trained by batch gradient descent."""

from .common import DegenerateFeatureError, DimensionMismatchError
from .config import SolverConfig, load_solver_config
from .models.logreg import SolveResult, solve, solve_from_config

__all__ = [
    'DegenerateFeatureError',
    'DimensionMismatchError',
    'SolveResult',
    'SolverConfig',
    'load_solver_config',
    'solve',
    'solve_from_config',
]

__version__ = '0.1.0'
