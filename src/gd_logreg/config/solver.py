"""Config model and loader for the gradient-descent solver."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

ALPHA_DEFAULT = 0.2
LAMBDA_DEFAULT = 0.1
NUM_ITER_DEFAULT = 300
THRESHOLD_DEFAULT = 0.5


@dataclass(frozen=True)
class SolverConfig:
    alpha: float = ALPHA_DEFAULT
    reg_lambda: float = LAMBDA_DEFAULT
    num_iterations: int = NUM_ITER_DEFAULT
    threshold: float = THRESHOLD_DEFAULT

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        for name in ('alpha', 'reg_lambda', 'threshold'):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f'{name} must be finite, got {getattr(self, name)}')
        if not self.alpha > 0.0:
            raise ValueError(f'alpha must be positive, got {self.alpha}')
        if self.reg_lambda < 0.0:
            raise ValueError(f'reg_lambda must be non-negative, got {self.reg_lambda}')
        if isinstance(self.num_iterations, bool) or not isinstance(
            self.num_iterations, numbers.Integral
        ):
            raise ValueError(f'num_iterations must be an integer, got {self.num_iterations!r}')
        if self.num_iterations < 0:
            raise ValueError(
                f'num_iterations must be non-negative, got {self.num_iterations}'
            )
        if not 0.0 <= self.threshold <= 1.0:
            raise ValueError(f'threshold must be in [0, 1], got {self.threshold}')

    def as_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def load_solver_config(config_path: str | Path) -> SolverConfig:
    """Load a solver config YAML file.

    Options may sit at the top level or under a ``solver:`` section; any
    option left out keeps its default.
    """
    cfg_path = Path(config_path).expanduser().resolve()
    if not cfg_path.exists():
        raise FileNotFoundError(f'Config file not found: {cfg_path}')

    with cfg_path.open('r', encoding='utf-8') as fh:
        data = yaml.safe_load(fh) or {}

    if not isinstance(data, dict):
        raise ValueError('solver config must be a mapping')
    section = data.get('solver', data) or {}
    if not isinstance(section, dict):
        raise ValueError('solver config must be a mapping')

    known = {f.name for f in fields(SolverConfig)}
    unknown = sorted(set(section) - known)
    if unknown:
        raise ValueError(f'Unknown solver options: {", ".join(unknown)}')

    return SolverConfig(
        alpha=float(section.get('alpha', ALPHA_DEFAULT)),
        reg_lambda=float(section.get('reg_lambda', LAMBDA_DEFAULT)),
        num_iterations=int(section.get('num_iterations', NUM_ITER_DEFAULT)),
        threshold=float(section.get('threshold', THRESHOLD_DEFAULT)),
    )
