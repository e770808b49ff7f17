"""In-memory datasets consumed by the models.

A dataset is an ordered list of :class:`DataPoint` rows plus one target per
row. Regression targets are real numbers; classification targets are class
indices into the ``predicting`` :class:`CategoricalData` descriptor.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np


@dataclass(frozen=True)
class CategoricalData:
    """Describes one categorical variable and the names of its categories."""

    name: str
    category_names: tuple[str, ...]

    @property
    def num_categories(self) -> int:
        return len(self.category_names)


@dataclass(frozen=True, eq=False)
class DataPoint:
    """One model input: numeric features plus passthrough categorical values."""

    numerical_values: np.ndarray
    categorical_values: tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        values = np.asarray(self.numerical_values, dtype=float)
        if values.ndim != 1:
            raise ValueError(f'numerical_values must be 1-D, got shape {values.shape}')
        object.__setattr__(self, 'numerical_values', values)


class _DataSet:
    def __init__(
        self,
        num_numerical_vars: int,
        categories: Sequence[CategoricalData] = (),
        feature_names: Sequence[str] | None = None,
    ) -> None:
        if num_numerical_vars < 0:
            raise ValueError('num_numerical_vars must be non-negative')
        if feature_names is not None and len(feature_names) != num_numerical_vars:
            raise ValueError(
                f'{len(feature_names)} feature names for {num_numerical_vars} numeric features'
            )
        self._num_numerical_vars = int(num_numerical_vars)
        self._feature_names = tuple(feature_names) if feature_names is not None else None
        self._categories = tuple(categories)
        self._points: list[DataPoint] = []

    @property
    def num_numerical_vars(self) -> int:
        return self._num_numerical_vars

    @property
    def categories(self) -> tuple[CategoricalData, ...]:
        return self._categories

    @property
    def feature_names(self) -> tuple[str, ...] | None:
        """Column names of the numeric features, in order, when known."""
        return self._feature_names

    @property
    def sample_size(self) -> int:
        return len(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def get_data_point(self, index: int) -> DataPoint:
        return self._points[index]

    def numerical_matrix(self) -> np.ndarray:
        """Stack all numeric feature vectors into an ``(n, num_numerical_vars)`` array."""
        if not self._points:
            return np.empty((0, self._num_numerical_vars), dtype=float)
        return np.vstack([p.numerical_values for p in self._points])

    def _append(self, point: DataPoint) -> None:
        if point.numerical_values.shape[0] != self._num_numerical_vars:
            raise ValueError(
                f'Expected {self._num_numerical_vars} numeric features, '
                f'got {point.numerical_values.shape[0]}'
            )
        self._points.append(point)


class RegressionDataSet(_DataSet):
    """Rows with real-valued targets."""

    def __init__(
        self,
        num_numerical_vars: int,
        categories: Sequence[CategoricalData] = (),
        feature_names: Sequence[str] | None = None,
    ) -> None:
        super().__init__(num_numerical_vars, categories, feature_names)
        self._targets: list[float] = []

    @classmethod
    def from_arrays(
        cls,
        features: np.ndarray,
        targets: Sequence[float] | np.ndarray,
        categories: Sequence[CategoricalData] = (),
        feature_names: Sequence[str] | None = None,
    ) -> RegressionDataSet:
        x = np.atleast_2d(np.asarray(features, dtype=float))
        y = np.asarray(targets, dtype=float).ravel()
        if x.shape[0] != y.shape[0]:
            raise ValueError(f'features has {x.shape[0]} rows but targets has {y.shape[0]}')
        dataset = cls(x.shape[1], categories, feature_names)
        for row, target in zip(x, y, strict=True):
            dataset.add_data_point(DataPoint(row), float(target))
        return dataset

    def add_data_point(self, point: DataPoint, target: float) -> None:
        self._append(point)
        self._targets.append(float(target))

    def get_target_value(self, index: int) -> float:
        return self._targets[index]

    def set_target_value(self, index: int, value: float) -> None:
        self._targets[index] = float(value)

    def target_values(self) -> np.ndarray:
        """Return a copy of the targets; mutating it does not affect the dataset."""
        return np.asarray(self._targets, dtype=float)


class ClassificationDataSet(_DataSet):
    """Rows labelled with a class index into ``predicting``."""

    def __init__(
        self,
        num_numerical_vars: int,
        categories: Sequence[CategoricalData],
        predicting: CategoricalData,
        feature_names: Sequence[str] | None = None,
    ) -> None:
        super().__init__(num_numerical_vars, categories, feature_names)
        self._predicting = predicting
        self._labels: list[int] = []

    @classmethod
    def from_arrays(
        cls,
        features: np.ndarray,
        labels: Sequence[int] | np.ndarray,
        class_names: Sequence[str] | None = None,
        categories: Sequence[CategoricalData] = (),
        feature_names: Sequence[str] | None = None,
    ) -> ClassificationDataSet:
        x = np.atleast_2d(np.asarray(features, dtype=float))
        y = np.asarray(labels, dtype=int).ravel()
        if x.shape[0] != y.shape[0]:
            raise ValueError(f'features has {x.shape[0]} rows but labels has {y.shape[0]}')
        if class_names is None:
            n_classes = int(y.max()) + 1 if y.size else 0
            class_names = [str(i) for i in range(n_classes)]
        predicting = CategoricalData('class', tuple(str(c) for c in class_names))
        dataset = cls(x.shape[1], categories, predicting, feature_names)
        for row, label in zip(x, y, strict=True):
            dataset.add_data_point(DataPoint(row), int(label))
        return dataset

    @property
    def predicting(self) -> CategoricalData:
        return self._predicting

    @property
    def class_size(self) -> int:
        return self._predicting.num_categories

    def add_data_point(self, point: DataPoint, category: int) -> None:
        if not 0 <= category < self.class_size:
            raise ValueError(f'Class index {category} outside [0, {self.class_size})')
        self._append(point)
        self._labels.append(int(category))

    def get_data_point_category(self, index: int) -> int:
        return self._labels[index]

    def labels(self) -> np.ndarray:
        return np.asarray(self._labels, dtype=int)
