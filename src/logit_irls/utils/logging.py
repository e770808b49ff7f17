"""JSON log lines for training, optimization and serving events.

Every module logs through ``log = get_logger(__name__)`` and formats its
records with :func:`json_log`, so each line on stdout is one JSON object with
an ``event`` name, a ``ts`` epoch timestamp and event-specific fields.

The level is read once per logger from ``LOGIT_IRLS_LOG_LEVEL`` (a level name
such as ``WARNING``). ``LOGIT_IRLS_DEBUG`` set to any value forces ``DEBUG``.
"""

from __future__ import annotations

import json
import logging
import os
import sys
import time
from typing import Any

import numpy as np

LEVEL_ENV = 'LOGIT_IRLS_LOG_LEVEL'
DEBUG_ENV = 'LOGIT_IRLS_DEBUG'


def _to_jsonable(value: Any) -> Any:
    # IRLS diagnostics and coefficients arrive as numpy scalars and arrays
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, np.ndarray):
        return value.tolist()
    return str(value)


def json_log(event: str, **fields: Any) -> str:
    """Serialize ``event`` and ``fields`` as a single JSON line."""
    record = {'ts': round(time.time(), 3), 'event': event}
    record.update(fields)
    return json.dumps(record, ensure_ascii=False, default=_to_jsonable)


def _resolve_level() -> int:
    if os.getenv(DEBUG_ENV):
        return logging.DEBUG
    name = os.getenv(LEVEL_ENV, 'INFO').upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f'{LEVEL_ENV} must name a logging level, got {name!r}')
    return level


def get_logger(name: str) -> logging.Logger:
    """Return ``name``'s logger with a stdout handler attached once."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter('%(message)s'))
        logger.addHandler(handler)
    logger.setLevel(_resolve_level())
    return logger
