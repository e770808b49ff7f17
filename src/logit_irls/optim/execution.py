"""Execution contexts handed to optimizers.

``parallel=True`` yields a thread pool sized to the logical core count;
``parallel=False`` yields a single-worker context that runs tasks inline.
Both are ``joblib.Parallel`` instances managed as context managers, so the
workers are released when the block exits, whether or not it raised.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import joblib
from joblib import Parallel

from ..utils import get_logger, json_log

log = get_logger(__name__)


def logical_cores() -> int:
    """Number of logical processing units available to this process."""
    return max(1, joblib.cpu_count(only_physical_cores=False))


@contextmanager
def execution_context(parallel: bool) -> Iterator[Parallel]:
    """Yield a worker pool for the duration of a ``with`` block."""
    n_jobs = logical_cores() if parallel else 1
    log.debug(
        json_log('execution.open', component='optim.execution', parallel=parallel, n_jobs=n_jobs)
    )
    with Parallel(n_jobs=n_jobs, backend='threading') as pool:
        yield pool
    log.debug(json_log('execution.closed', component='optim.execution', n_jobs=n_jobs))
