"""Convert two-class classification data into 0/1 regression data."""

from __future__ import annotations

from ...common.errors import FailedToFitError
from ...data.datasets import ClassificationDataSet, RegressionDataSet


def to_regression_dataset(dataset: ClassificationDataSet) -> RegressionDataSet:
    """Build a regression dataset whose targets are the class indices as floats.

    Raises:
        FailedToFitError: If the dataset does not have exactly two classes.
    """
    if dataset.class_size != 2:
        raise FailedToFitError(
            'Logistic Regression works only in the case of two classes, '
            f'and can not handle {dataset.class_size} classes'
        )

    regression = RegressionDataSet(dataset.num_numerical_vars, dataset.categories)
    for i in range(dataset.sample_size):
        # class index is 0 or 1, so it doubles as the probability target
        regression.add_data_point(
            dataset.get_data_point(i),
            float(dataset.get_data_point_category(i)),
        )
    return regression
