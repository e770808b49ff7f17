"""Artifact persistence for trained models.

A model artifact directory holds:
- logit_irls.joblib: the pickled model
- metadata.json: model name, version, mode, feature columns, class names
- metrics_test.json: evaluation metrics (when a test split was given)
"""

from __future__ import annotations

import json
import platform
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import joblib

MODEL_FILENAME = 'logit_irls.joblib'
METADATA_FILENAME = 'metadata.json'
METRICS_FILENAME = 'metrics_test.json'


def get_environment_info() -> dict[str, str]:
    """Get Python, numpy and scikit-learn versions."""
    import numpy
    import sklearn

    return {
        'python_version': platform.python_version(),
        'numpy_version': numpy.__version__,
        'sklearn_version': sklearn.__version__,
    }


def generate_run_id(base_dir: Path, prefix: str = 'model') -> str:
    """Generate unique run ID based on date and sequence number."""
    today = datetime.now(UTC).strftime('%Y-%m-%d')
    existing = (
        sorted(
            p.name
            for p in base_dir.iterdir()
            if p.is_dir() and p.name.startswith(f'{prefix}.{today}_')
        )
        if base_dir.exists()
        else []
    )

    last_idx = int(existing[-1].split('_')[-1]) if existing else 0
    return f'{prefix}.{today}_{last_idx + 1:03d}'


def save_model_artifact(
    model: Any,
    metadata: dict[str, Any],
    output_dir: Path,
    metrics: dict[str, Any] | None = None,
) -> Path:
    """
    Persist a trained model with its metadata into a fresh run directory.

    Args:
        model: Trained model (must be picklable)
        metadata: JSON-serialisable metadata; run_id and version are added
        output_dir: Parent directory for run directories
        metrics: Optional evaluation metrics

    Returns:
        Path to the created run directory
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    run_id = generate_run_id(output_dir)
    run_dir = output_dir / run_id
    run_dir.mkdir(parents=True, exist_ok=False)

    model_path = run_dir / MODEL_FILENAME
    joblib.dump(model, model_path, compress=3)

    full_metadata = {
        **metadata,
        'version': run_id.split('.', 1)[1],
        'run_id': run_id,
        'created_at': datetime.now(UTC).isoformat(),
        'environment': get_environment_info(),
        'artifacts': {'format': 'joblib', 'path': str(model_path)},
    }
    (run_dir / METADATA_FILENAME).write_text(
        json.dumps(full_metadata, indent=2, ensure_ascii=False),
        encoding='utf-8',
    )
    if metrics is not None:
        (run_dir / METRICS_FILENAME).write_text(
            json.dumps(metrics, indent=2, ensure_ascii=False),
            encoding='utf-8',
        )
    return run_dir
