"""Datasets and loaders."""

from .datasets import CategoricalData, ClassificationDataSet, DataPoint, RegressionDataSet
from .loading import load_classification_csv, load_regression_csv

__all__ = [
    'CategoricalData',
    'ClassificationDataSet',
    'DataPoint',
    'RegressionDataSet',
    'load_classification_csv',
    'load_regression_csv',
]
