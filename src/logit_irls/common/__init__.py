"""Common types shared across model implementations."""

from .artifacts import (
    METADATA_FILENAME,
    METRICS_FILENAME,
    MODEL_FILENAME,
    generate_run_id,
    get_environment_info,
    save_model_artifact,
)
from .errors import (
    DegenerateTargetsError,
    FailedToFitError,
    LogitModelError,
    ModelModeError,
    UntrainedModelError,
)
from .protocols import Classifier, Regressor, SingleWeightVectorModel
from .results import CategoricalResults

__all__ = [
    # Artifacts
    'MODEL_FILENAME',
    'METADATA_FILENAME',
    'METRICS_FILENAME',
    'generate_run_id',
    'get_environment_info',
    'save_model_artifact',
    # Errors
    'LogitModelError',
    'UntrainedModelError',
    'ModelModeError',
    'FailedToFitError',
    'DegenerateTargetsError',
    # Protocols
    'Classifier',
    'Regressor',
    'SingleWeightVectorModel',
    # Results
    'CategoricalResults',
]
