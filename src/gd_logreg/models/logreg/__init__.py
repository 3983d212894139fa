"""Logistic regression trained by batch gradient descent.

- cost.py: regularized cross-entropy cost and gradient
- optimizer.py: gradient descent with stepped step-size decay
- solver.py: normalize, train and predict in one call
"""

from .cost import CostResult, evaluate, regularization_penalty
from .optimizer import (
    ALPHA_SCALING_FACTOR,
    ALPHA_SCALING_ITERATIONS,
    DescentResult,
    DescentState,
    descent_step,
    gradient_descent,
    step_size,
)
from .solver import INITIAL_THETA_VALUE, SolveResult, predict_proba, solve, solve_from_config

__all__ = [
    'ALPHA_SCALING_FACTOR',
    'ALPHA_SCALING_ITERATIONS',
    'CostResult',
    'DescentResult',
    'DescentState',
    'INITIAL_THETA_VALUE',
    'SolveResult',
    'descent_step',
    'evaluate',
    'gradient_descent',
    'predict_proba',
    'regularization_penalty',
    'solve',
    'solve_from_config',
    'step_size',
]
