"""Loading persisted models and scoring new data."""

from .loader import ModelArtifact, ModelLoadError, load_model
from .predict import predict_frame

__all__ = ['ModelArtifact', 'ModelLoadError', 'load_model', 'predict_frame']
