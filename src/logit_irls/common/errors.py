"""Exception types raised by models and training."""

from __future__ import annotations


class LogitModelError(RuntimeError):
    """Base class for model errors."""


class UntrainedModelError(LogitModelError):
    """Raised when inference is requested before a successful training call."""


class ModelModeError(LogitModelError):
    """Raised when a regression-mode model is asked to classify."""


class FailedToFitError(LogitModelError):
    """Raised when a dataset cannot be fit by the model."""


class DegenerateTargetsError(FailedToFitError):
    """Raised when regression targets have no range (empty or all identical)."""
