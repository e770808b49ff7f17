"""Configuration utilities for logit_irls."""

from .training import (
    ArtifactConfig,
    DataConfig,
    OptimizerConfig,
    TrainingConfig,
    load_training_config,
)

__all__ = [
    'ArtifactConfig',
    'DataConfig',
    'OptimizerConfig',
    'TrainingConfig',
    'load_training_config',
]
