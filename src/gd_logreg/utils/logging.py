"""JSON event logging for normalization, gradient descent and solve runs."""

from __future__ import annotations

import json
import logging
import os
import sys
import time
from typing import Any


def json_log(message: str, **extra: Any) -> str:
    """Return a JSON-formatted log string."""
    payload = {'ts': time.time(), 'msg': message, **extra}
    return json.dumps(payload, ensure_ascii=False, default=_to_builtin)


def get_logger(name: str) -> logging.Logger:
    """Return a logger writing bare JSON messages to stdout.

    INFO carries ``normalize.dropped_columns``, ``solve.start`` and
    ``solve.completed``. The optimizer's ``descent.start``, ``descent.progress``
    (once per step-size decay period) and ``descent.completed`` events are
    DEBUG and only appear when ``GDLR_DEBUG`` is set.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(handler)

    level = logging.DEBUG if os.getenv('GDLR_DEBUG') else logging.INFO
    logger.setLevel(level)
    return logger


def _to_builtin(value: Any) -> Any:
    # numpy scalars and arrays end up in log payloads
    if hasattr(value, 'tolist'):
        return value.tolist()
    return str(value)
