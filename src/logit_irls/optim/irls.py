"""Iteratively reweighted least squares for single-index models.

The optimizer fits ``y ~ f(x; c)`` where ``c = [bias, w_1, ..., w_n]`` and
``f_derivative`` is the derivative of ``f`` with respect to its linear
argument ``c[0] + x @ c[1:]``. Each iteration solves

    (X^T W X) delta = X^T (y - f(x))

with ``X`` the design matrix (leading column of ones) and ``W`` the diagonal
of ``f_derivative``, then applies ``c += delta``. For the logistic function
this is exactly the Newton step on the log-likelihood.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Protocol

import numpy as np
from joblib import Parallel, delayed

from ..utils import get_logger, json_log

log = get_logger(__name__)

FeatureFunction = Callable[[np.ndarray], float]


class Optimizer(Protocol):
    """Protocol for coefficient optimizers consumed by the linear models."""

    def optimize(
        self,
        tolerance: float,
        max_iterations: int,
        f: FeatureFunction,
        f_derivative: FeatureFunction,
        initial_coefficients: np.ndarray,
        rows: Sequence[np.ndarray] | np.ndarray,
        targets: np.ndarray,
        executor: Parallel,
    ) -> np.ndarray:
        ...


@dataclass(frozen=True)
class IRLSRun:
    """Diagnostics of the most recent :meth:`optimize` call."""

    iterations: int
    converged: bool
    max_delta: float


def _partial_system(
    rows: np.ndarray,
    targets: np.ndarray,
    f: FeatureFunction,
    f_derivative: FeatureFunction,
) -> tuple[np.ndarray, np.ndarray]:
    fitted = np.fromiter((f(row) for row in rows), dtype=float, count=rows.shape[0])
    weights = np.fromiter((f_derivative(row) for row in rows), dtype=float, count=rows.shape[0])
    design = np.hstack([np.ones((rows.shape[0], 1)), rows])
    hessian = design.T @ (design * weights[:, None])
    gradient = design.T @ (targets - fitted)
    return hessian, gradient


class IterativelyReweightedLeastSquares:
    """Newton-type solver for generalized linear models.

    ``initial_coefficients`` is updated in place on every iteration and
    returned, so callables bound to that array always see the current fit.
    Rows are split into one block per worker of ``executor`` and the partial
    normal equations are summed.

    Running out of iterations is not an error: the coefficients reached so
    far are returned and ``last_run.converged`` is ``False``.
    """

    def __init__(self) -> None:
        self.last_run: IRLSRun | None = None

    def optimize(
        self,
        tolerance: float,
        max_iterations: int,
        f: FeatureFunction,
        f_derivative: FeatureFunction,
        initial_coefficients: np.ndarray,
        rows: Sequence[np.ndarray] | np.ndarray,
        targets: np.ndarray,
        executor: Parallel,
    ) -> np.ndarray:
        coefficients = initial_coefficients
        x = np.asarray(rows, dtype=float)
        y = np.asarray(targets, dtype=float).ravel()

        if x.ndim != 2 or x.shape[0] == 0:
            raise ValueError('IRLS requires a non-empty 2-D block of rows')
        if x.shape[0] != y.shape[0]:
            raise ValueError(f'{x.shape[0]} rows but {y.shape[0]} targets')
        if coefficients.shape != (x.shape[1] + 1,):
            raise ValueError(
                f'Expected {x.shape[1] + 1} coefficients, got shape {coefficients.shape}'
            )
        if tolerance <= 0 or max_iterations < 1:
            raise ValueError('tolerance must be positive and max_iterations at least 1')

        n_blocks = max(1, min(int(getattr(executor, 'n_jobs', 1)), x.shape[0]))
        blocks = np.array_split(np.arange(x.shape[0]), n_blocks)

        converged = False
        max_delta = float('inf')
        iteration = 0
        for iteration in range(1, max_iterations + 1):
            parts = executor(
                delayed(_partial_system)(x[idx], y[idx], f, f_derivative) for idx in blocks
            )
            hessian = sum(p[0] for p in parts)
            gradient = sum(p[1] for p in parts)

            delta = np.linalg.lstsq(hessian, gradient, rcond=None)[0]
            if not np.all(np.isfinite(delta)):
                log.warning(
                    json_log('irls.non_finite_step', component='optim.irls', iteration=iteration)
                )
                break

            coefficients += delta
            max_delta = float(np.max(np.abs(delta)))
            log.debug(
                json_log(
                    'irls.iteration',
                    component='optim.irls',
                    iteration=iteration,
                    max_delta=max_delta,
                )
            )
            if max_delta < tolerance:
                converged = True
                break

        self.last_run = IRLSRun(iterations=iteration, converged=converged, max_delta=max_delta)
        log.info(
            json_log(
                'irls.converged' if converged else 'irls.max_iterations',
                component='optim.irls',
                iterations=iteration,
                max_delta=max_delta,
            )
        )
        return coefficients
