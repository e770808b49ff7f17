"""Logistic Regression model implementation.

This package contains:
- function.py: logistic transform bound to the coefficient vector
- rescale.py: target range mapping onto [0, 1]
- adapter.py: two-class classification data as 0/1 regression data
- model.py: the IRLS-trained model
- estimator.py: scikit-learn wrappers
- training/: config-driven training pipeline
"""

from .adapter import to_regression_dataset
from .estimator import LogisticIRLSClassifier, LogisticIRLSRegressor
from .function import LogitFunction, logit
from .model import DEFAULT_MAX_ITERATIONS, DEFAULT_TOLERANCE, LogisticRegression
from .rescale import TargetRescaler

__all__ = [
    'DEFAULT_MAX_ITERATIONS',
    'DEFAULT_TOLERANCE',
    'LogisticIRLSClassifier',
    'LogisticIRLSRegressor',
    'LogisticRegression',
    'LogitFunction',
    'TargetRescaler',
    'logit',
    'to_regression_dataset',
]
