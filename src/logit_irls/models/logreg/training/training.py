from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

import numpy as np
from sklearn.metrics import (
    accuracy_score,
    brier_score_loss,
    log_loss,
    mean_absolute_error,
    mean_squared_error,
    r2_score,
    roc_auc_score,
)

from ....common.artifacts import save_model_artifact
from ....config import TrainingConfig, load_training_config
from ....data import (
    ClassificationDataSet,
    RegressionDataSet,
    load_classification_csv,
    load_regression_csv,
)
from ....utils import get_logger, json_log
from ..model import LogisticRegression

log = get_logger(__name__)


def _load_split(
    cfg: TrainingConfig,
    path: Path,
    feature_columns: Sequence[str] | None = None,
    class_names: Sequence[str] | None = None,
) -> ClassificationDataSet | RegressionDataSet:
    columns = feature_columns or cfg.data.feature_columns
    if cfg.mode == 'classification':
        return load_classification_csv(
            path,
            cfg.data.target_column,
            feature_columns=columns,
            class_names=class_names or cfg.data.class_names,
        )
    return load_regression_csv(
        path,
        cfg.data.target_column,
        feature_columns=columns,
    )


def classification_metrics(y_true: np.ndarray, p1: np.ndarray) -> dict[str, Any]:
    """Accuracy, log loss, ROC AUC and Brier score for class-1 probabilities."""
    y_pred = (p1 > 0.5).astype(int)
    metrics: dict[str, Any] = {
        'n_samples': int(y_true.shape[0]),
        'accuracy': float(accuracy_score(y_true, y_pred)),
        'log_loss': float(log_loss(y_true, np.clip(p1, 1e-15, 1 - 1e-15), labels=[0, 1])),
        'brier_score': float(brier_score_loss(y_true, p1)),
    }
    # AUC is undefined when the split holds a single class
    metrics['roc_auc'] = (
        float(roc_auc_score(y_true, p1)) if np.unique(y_true).shape[0] == 2 else None
    )
    return metrics


def regression_metrics(y_true: np.ndarray, y_pred: np.ndarray) -> dict[str, Any]:
    """MAE, RMSE and R² of real-valued predictions."""
    return {
        'n_samples': int(y_true.shape[0]),
        'mae': float(mean_absolute_error(y_true, y_pred)),
        'rmse': float(np.sqrt(mean_squared_error(y_true, y_pred))),
        'r2': float(r2_score(y_true, y_pred)) if y_true.shape[0] > 1 else None,
    }


def evaluate(
    model: LogisticRegression,
    dataset: ClassificationDataSet | RegressionDataSet,
) -> dict[str, Any]:
    predictions = model.predict_batch(dataset.numerical_matrix())
    if isinstance(dataset, ClassificationDataSet):
        return classification_metrics(dataset.labels(), predictions)
    return regression_metrics(dataset.target_values(), predictions)


def train_from_config(config_path: str | Path) -> dict:
    """Train a model from a YAML config and persist it as a run directory.

    Returns:
        Dict with the test ``report`` (empty without a test split) and the
        ``artifact_dir`` path.
    """
    cfg = load_training_config(config_path)

    train_ds = _load_split(cfg, cfg.data.train_path)
    model = LogisticRegression(
        tolerance=cfg.optimizer.tolerance,
        max_iterations=cfg.optimizer.max_iterations,
    )

    log.info(
        json_log(
            'training.start',
            component='training',
            config=str(config_path),
            mode=cfg.mode,
            n_samples=train_ds.sample_size,
        )
    )
    model.train(train_ds, parallel=cfg.optimizer.parallel)
    log.info(json_log('training.completed', component='training'))

    report: dict[str, Any] = {}
    if cfg.data.test_path is not None:
        # the test split is read with the train split's columns and class indices
        test_ds = _load_split(
            cfg,
            cfg.data.test_path,
            feature_columns=train_ds.feature_names,
            class_names=(
                train_ds.predicting.category_names
                if isinstance(train_ds, ClassificationDataSet)
                else None
            ),
        )
        if test_ds.num_numerical_vars != train_ds.num_numerical_vars:
            raise ValueError(
                f'Test split has {test_ds.num_numerical_vars} features, '
                f'train split has {train_ds.num_numerical_vars}'
            )
        report = evaluate(model, test_ds)
        log.info(json_log('training.evaluated', component='training', **report))

    metadata: dict[str, Any] = {
        'model_name': cfg.model_name,
        'mode': cfg.mode,
        'config_path': str(config_path),
        'target_column': cfg.data.target_column,
        'feature_columns': list(train_ds.feature_names),
        'n_features': train_ds.num_numerical_vars,
        'shift': model.shift,
        'scale': model.scale,
        'coefficients': model.get_coefficients().tolist(),
    }
    if isinstance(train_ds, ClassificationDataSet):
        metadata['class_names'] = list(train_ds.predicting.category_names)

    out_dir = save_model_artifact(
        model,
        metadata,
        cfg.artifacts.output_dir,
        metrics=report or None,
    )
    log.info(json_log('training.saved', component='training', artifact_dir=str(out_dir)))

    return {'report': report, 'artifact_dir': str(out_dir)}
