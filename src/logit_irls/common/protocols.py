"""Model protocols defining standard interfaces."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from ..data.datasets import ClassificationDataSet, RegressionDataSet
    from .results import CategoricalResults


@runtime_checkable
class Classifier(Protocol):
    """Protocol for models that predict class membership."""

    def train_classifier(self, dataset: ClassificationDataSet, parallel: bool = False) -> None:
        ...

    def classify(self, features: np.ndarray) -> CategoricalResults:
        ...

    def supports_weighted_data(self) -> bool:
        ...


@runtime_checkable
class Regressor(Protocol):
    """Protocol for models that predict a real-valued target."""

    def train_regressor(self, dataset: RegressionDataSet, parallel: bool = False) -> None:
        ...

    def regress(self, features: np.ndarray) -> float:
        ...

    def supports_weighted_data(self) -> bool:
        ...


@runtime_checkable
class SingleWeightVectorModel(Protocol):
    """Linear model exposing exactly one (bias, weights) pair.

    Only index 0 is valid for the indexed accessors; anything else
    raises ``IndexError``.
    """

    def num_weight_vecs(self) -> int:
        ...

    def get_bias(self, index: int = 0) -> float:
        ...

    def get_raw_weight(self, index: int = 0) -> np.ndarray:
        ...
