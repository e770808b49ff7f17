"""Model loading utilities for the serving module."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import joblib

from ..common.artifacts import METADATA_FILENAME, MODEL_FILENAME
from ..models.logreg.model import LogisticRegression
from ..utils import get_logger, json_log

log = get_logger(__name__)


@dataclass(frozen=True)
class ModelArtifact:
    """Container for loaded model and its metadata."""

    model: LogisticRegression
    metadata: dict[str, Any]
    version: str
    mode: str
    feature_columns: list[str] | None
    class_names: list[str] | None
    model_name: str


class ModelLoadError(RuntimeError):
    """Raised when model loading fails."""


def load_model(model_dir: str | Path) -> ModelArtifact:
    """
    Load a trained model and its metadata from a directory.

    Args:
        model_dir: Path to directory containing logit_irls.joblib and metadata.json.

    Returns:
        ModelArtifact containing the model and its configuration.

    Raises:
        ModelLoadError: If model files are missing, corrupted or not a trained model.
    """
    model_path = Path(model_dir)

    if not model_path.exists():
        raise ModelLoadError(f'Model directory not found: {model_path}')

    joblib_path = model_path / MODEL_FILENAME
    metadata_path = model_path / METADATA_FILENAME

    if not joblib_path.exists():
        raise ModelLoadError(f'Model file not found: {joblib_path}')

    if not metadata_path.exists():
        raise ModelLoadError(f'Metadata file not found: {metadata_path}')

    try:
        model = joblib.load(joblib_path)
    except Exception as exc:
        raise ModelLoadError(f'Failed to load model: {exc}') from exc

    if not isinstance(model, LogisticRegression) or not model.is_trained:
        raise ModelLoadError(f'Not a trained LogisticRegression: {joblib_path}')

    try:
        metadata = json.loads(metadata_path.read_text(encoding='utf-8'))
    except (json.JSONDecodeError, OSError) as exc:
        raise ModelLoadError(f'Failed to load metadata: {exc}') from exc

    version = metadata.get('version', 'unknown')
    mode = metadata.get('mode', 'classification')

    log.info(
        json_log(
            'model.loaded',
            component='serving.loader',
            model_dir=str(model_path),
            version=version,
            mode=mode,
        )
    )

    return ModelArtifact(
        model=model,
        metadata=metadata,
        version=version,
        mode=mode,
        feature_columns=metadata.get('feature_columns'),
        class_names=metadata.get('class_names'),
        model_name=metadata.get('model_name', 'unknown'),
    )
