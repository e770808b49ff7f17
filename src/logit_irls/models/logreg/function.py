"""Logistic transform bound to a coefficient vector."""

from __future__ import annotations

import numpy as np
from scipy.special import expit


def logit(z: float | np.ndarray) -> float | np.ndarray:
    """Logistic (sigmoid) function ``1 / (1 + exp(-z))``."""
    return expit(z)


class LogitFunction:
    """Evaluates ``logit(c[0] + x @ c[1:])`` against a shared coefficient array.

    The instance holds a reference, not a copy, so in-place updates to
    ``coefficients`` (as done by the optimizer) are visible on the next call.
    Evaluation only reads the array and may run from several threads at once.
    """

    def __init__(self, coefficients: np.ndarray) -> None:
        self.coefficients = coefficients

    def _linear(self, features: np.ndarray) -> float | np.ndarray:
        x = np.asarray(features, dtype=float)
        n_features = self.coefficients.shape[0] - 1
        if x.shape[-1] != n_features:
            raise ValueError(f'Expected {n_features} features, got {x.shape[-1]}')
        return self.coefficients[0] + x @ self.coefficients[1:]

    def evaluate(self, features: np.ndarray) -> float | np.ndarray:
        """Probability for one feature vector, or one per row of a 2-D block."""
        y = logit(self._linear(features))
        return float(y) if np.ndim(y) == 0 else y

    def derivative(self, features: np.ndarray) -> float | np.ndarray:
        """Derivative ``y * (1 - y)`` of the logistic output w.r.t. its linear argument."""
        y = self.evaluate(features)
        return y * (1.0 - y)

    __call__ = evaluate
