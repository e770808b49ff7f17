"""Logistic regression fit by iteratively reweighted least squares."""

from .common.errors import (
    DegenerateTargetsError,
    FailedToFitError,
    LogitModelError,
    ModelModeError,
    UntrainedModelError,
)
from .common.results import CategoricalResults
from .data.datasets import CategoricalData, ClassificationDataSet, DataPoint, RegressionDataSet
from .models.logreg import (
    LogisticIRLSClassifier,
    LogisticIRLSRegressor,
    LogisticRegression,
    LogitFunction,
    TargetRescaler,
)

__version__ = '0.1.0'

__all__ = [
    'CategoricalData',
    'CategoricalResults',
    'ClassificationDataSet',
    'DataPoint',
    'DegenerateTargetsError',
    'FailedToFitError',
    'LogisticIRLSClassifier',
    'LogisticIRLSRegressor',
    'LogisticRegression',
    'LogitFunction',
    'LogitModelError',
    'ModelModeError',
    'RegressionDataSet',
    'TargetRescaler',
    'UntrainedModelError',
]
