"""Logistic Regression training module.

Contains the config-driven training pipeline.
"""

from .training import evaluate, train_from_config

__all__ = ['evaluate', 'train_from_config']
