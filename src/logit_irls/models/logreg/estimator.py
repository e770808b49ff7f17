"""scikit-learn estimators wrapping :class:`LogisticRegression`."""

from __future__ import annotations

import numpy as np
from sklearn.base import BaseEstimator, ClassifierMixin, RegressorMixin
from sklearn.utils.validation import check_array, check_is_fitted, check_X_y

from ...common.errors import FailedToFitError
from ...data.datasets import ClassificationDataSet, RegressionDataSet
from .model import DEFAULT_MAX_ITERATIONS, DEFAULT_TOLERANCE, LogisticRegression


class _LogisticIRLSBase(BaseEstimator):
    def __init__(
        self,
        tol: float = DEFAULT_TOLERANCE,
        max_iter: int = DEFAULT_MAX_ITERATIONS,
        parallel: bool = False,
    ) -> None:
        self.tol = tol
        self.max_iter = max_iter
        self.parallel = parallel

    def _new_model(self) -> LogisticRegression:
        return LogisticRegression(tolerance=self.tol, max_iterations=self.max_iter)

    def _set_fitted(self, model: LogisticRegression) -> None:
        self.model_ = model
        self.coef_ = model.get_raw_weight().copy()
        self.intercept_ = model.get_bias()
        self.n_features_in_ = self.coef_.shape[0]


class LogisticIRLSClassifier(ClassifierMixin, _LogisticIRLSBase):
    """Binary classifier; ``predict_proba`` columns follow ``classes_``."""

    def fit(self, X, y) -> LogisticIRLSClassifier:
        X, y = check_X_y(X, y, dtype=float)
        classes, labels = np.unique(y, return_inverse=True)
        if classes.shape[0] != 2:
            raise FailedToFitError(
                'Logistic Regression works only in the case of two classes, '
                f'and can not handle {classes.shape[0]} classes'
            )
        dataset = ClassificationDataSet.from_arrays(
            X, labels, class_names=[str(c) for c in classes]
        )
        model = self._new_model()
        model.train_classifier(dataset, parallel=self.parallel)
        self.classes_ = classes
        self._set_fitted(model)
        return self

    def predict_proba(self, X) -> np.ndarray:
        check_is_fitted(self, 'model_')
        X = check_array(X, dtype=float)
        p1 = self.model_.predict_batch(X)
        return np.column_stack([1.0 - p1, p1])

    def predict(self, X) -> np.ndarray:
        proba = self.predict_proba(X)
        return self.classes_[(proba[:, 1] > proba[:, 0]).astype(int)]


class LogisticIRLSRegressor(RegressorMixin, _LogisticIRLSBase):
    """Regressor whose predictions stay inside the training target range."""

    def fit(self, X, y) -> LogisticIRLSRegressor:
        X, y = check_X_y(X, y, dtype=float, y_numeric=True)
        model = self._new_model()
        model.train_regressor(RegressionDataSet.from_arrays(X, y), parallel=self.parallel)
        self._set_fitted(model)
        return self

    def predict(self, X) -> np.ndarray:
        check_is_fitted(self, 'model_')
        X = check_array(X, dtype=float)
        return self.model_.predict_batch(X)
