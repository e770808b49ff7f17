"""Logistic regression fit by iteratively reweighted least squares.

One trained model serves two roles:

- classification of two-class data, where ``classify`` returns the
  probability of each class;
- bounded-range regression, where the logistic output in [0, 1] is mapped
  back onto the ``[min, max]`` range of the training targets.

Coefficients are laid out as ``[bias, w_1, ..., w_n]``.
"""

from __future__ import annotations

import copy

import numpy as np

from ...common.errors import ModelModeError, UntrainedModelError
from ...common.results import CategoricalResults
from ...data.datasets import ClassificationDataSet, RegressionDataSet
from ...optim import IterativelyReweightedLeastSquares, Optimizer, execution_context
from ...utils import get_logger, json_log
from .adapter import to_regression_dataset
from .function import LogitFunction
from .rescale import TargetRescaler

log = get_logger(__name__)

DEFAULT_TOLERANCE = 1e-5
DEFAULT_MAX_ITERATIONS = 100


class LogisticRegression:
    """Binary logistic regression / bounded regressor with a single weight vector."""

    def __init__(
        self,
        tolerance: float = DEFAULT_TOLERANCE,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        optimizer: Optimizer | None = None,
    ) -> None:
        self.tolerance = tolerance
        self.max_iterations = max_iterations
        self.optimizer = optimizer if optimizer is not None else IterativelyReweightedLeastSquares()
        self._coefficients: np.ndarray | None = None
        self._rescaler = TargetRescaler()

    @property
    def shift(self) -> float:
        return self._rescaler.shift

    @property
    def scale(self) -> float:
        return self._rescaler.scale

    @property
    def is_trained(self) -> bool:
        return self._coefficients is not None

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------

    def train(
        self,
        dataset: RegressionDataSet | ClassificationDataSet,
        parallel: bool = False,
    ) -> None:
        """Train as a classifier or regressor depending on the dataset type."""
        if isinstance(dataset, ClassificationDataSet):
            self.train_classifier(dataset, parallel)
        else:
            self.train_regressor(dataset, parallel)

    def train_classifier(self, dataset: ClassificationDataSet, parallel: bool = False) -> None:
        """Fit on two-class data; raises ``FailedToFitError`` for any other class count."""
        self.train_regressor(to_regression_dataset(dataset), parallel)

    def train_regressor(self, dataset: RegressionDataSet, parallel: bool = False) -> None:
        """Fit on real-valued targets.

        Targets are rescaled onto [0, 1] in a private copy; ``dataset`` is
        left untouched. Model state is replaced only once the optimizer
        returns, so a failed call keeps the previous fit.
        """
        rows = dataset.numerical_matrix()
        targets = dataset.target_values()
        rescaler = TargetRescaler.fit(targets)
        rescaler.normalize(targets)

        coefficients = np.zeros(dataset.num_numerical_vars + 1, dtype=float)
        function = LogitFunction(coefficients)

        log.info(
            json_log(
                'model.train.start',
                component='models.logreg',
                n_samples=dataset.sample_size,
                n_features=dataset.num_numerical_vars,
                shift=rescaler.shift,
                scale=rescaler.scale,
                parallel=parallel,
            )
        )
        with execution_context(parallel) as executor:
            fitted = self.optimizer.optimize(
                self.tolerance,
                self.max_iterations,
                function.evaluate,
                function.derivative,
                coefficients,
                rows,
                targets,
                executor,
            )

        self._coefficients = np.asarray(fitted, dtype=float)
        self._rescaler = rescaler
        log.info(
            json_log(
                'model.train.completed',
                component='models.logreg',
                bias=float(self._coefficients[0]),
            )
        )

    def supports_weighted_data(self) -> bool:
        return False

    # ------------------------------------------------------------------
    # Inference
    # ------------------------------------------------------------------

    def _require_trained(self) -> np.ndarray:
        if self._coefficients is None:
            raise UntrainedModelError('Model has not been trained')
        return self._coefficients

    def predict(self, features: np.ndarray) -> float:
        """Logistic output mapped back onto the training target range."""
        coefficients = self._require_trained()
        x = np.asarray(features, dtype=float)
        if x.ndim != 1:
            raise ValueError(f'Expected a 1-D feature vector, got shape {x.shape}')
        return float(self._rescaler.denormalize(LogitFunction(coefficients).evaluate(x)))

    regress = predict

    def predict_batch(self, rows: np.ndarray) -> np.ndarray:
        """Vectorised :meth:`predict` over the rows of a 2-D array."""
        coefficients = self._require_trained()
        x = np.atleast_2d(np.asarray(rows, dtype=float))
        return self._rescaler.denormalize(LogitFunction(coefficients).evaluate(x))

    def classify(self, features: np.ndarray) -> CategoricalResults:
        """Class probabilities ``(p0, p1)`` for one feature vector.

        Only valid for models trained on classification data, where the
        targets were exactly {0, 1} and the rescaling is the identity.
        """
        self._require_trained()
        if not self._rescaler.is_identity:
            raise ModelModeError('Model was trained for regression, not classification')
        p1 = self.predict(features)
        return CategoricalResults(p0=1.0 - p1, p1=p1)

    # ------------------------------------------------------------------
    # Single weight vector
    # ------------------------------------------------------------------

    def get_coefficients(self) -> np.ndarray:
        """The live coefficient array; writing to it changes the model."""
        return self._require_trained()

    def get_bias(self, index: int = 0) -> float:
        if index != 0:
            raise IndexError('Model has only 1 weight vector')
        return float(self._require_trained()[0])

    def get_raw_weight(self, index: int = 0) -> np.ndarray:
        """View of ``coefficients[1:]`` sharing memory with the model."""
        if index != 0:
            raise IndexError('Model has only 1 weight vector')
        return self._require_trained()[1:]

    def num_weight_vecs(self) -> int:
        return 1

    def clone(self) -> LogisticRegression:
        cloned = LogisticRegression(
            tolerance=self.tolerance,
            max_iterations=self.max_iterations,
            optimizer=copy.deepcopy(self.optimizer),
        )
        if self._coefficients is not None:
            cloned._coefficients = self._coefficients.copy()
        cloned._rescaler = self._rescaler
        return cloned

    def __repr__(self) -> str:
        state = 'trained' if self.is_trained else 'untrained'
        return (
            f'LogisticRegression({state}, shift={self.shift!r}, scale={self.scale!r}, '
            f'tolerance={self.tolerance!r}, max_iterations={self.max_iterations!r})'
        )
