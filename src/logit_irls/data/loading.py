"""CSV loaders producing in-memory datasets."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import numpy as np
import pandas as pd

from ..utils import get_logger, json_log
from .datasets import ClassificationDataSet, RegressionDataSet

log = get_logger(__name__)


def _read_frame(
    csv_path: str | Path,
    target_column: str,
    feature_columns: Sequence[str] | None,
) -> tuple[pd.DataFrame, list[str]]:
    path = Path(csv_path)
    if not path.exists():
        raise FileNotFoundError(f'Dataset not found: {path}')

    df = pd.read_csv(path)
    if target_column not in df.columns:
        raise ValueError(f"Target column '{target_column}' not found in {path}")

    columns = (
        list(feature_columns)
        if feature_columns
        else [c for c in df.columns if c != target_column]
    )
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ValueError(f'Feature columns not found in {path}: {missing}')
    if df[columns].isna().any().any():
        raise ValueError(f'Feature columns contain missing values in {path}')

    return df, columns


def load_regression_csv(
    csv_path: str | Path,
    target_column: str,
    feature_columns: Sequence[str] | None = None,
) -> RegressionDataSet:
    """Load a CSV into a :class:`RegressionDataSet`.

    Args:
        csv_path: Path to a CSV file with a header row.
        target_column: Column holding the real-valued target.
        feature_columns: Numeric feature columns, in order. Defaults to every
            column except the target.
    """
    df, columns = _read_frame(csv_path, target_column, feature_columns)
    features = df[columns].to_numpy(dtype=float)
    targets = df[target_column].astype(float).to_numpy()

    log.info(
        json_log(
            'data.loaded',
            component='data.loading',
            path=str(csv_path),
            kind='regression',
            rows=len(df),
            features=len(columns),
        )
    )
    return RegressionDataSet.from_arrays(features, targets, feature_names=columns)


def load_classification_csv(
    csv_path: str | Path,
    target_column: str,
    feature_columns: Sequence[str] | None = None,
    class_names: Sequence[str] | None = None,
) -> ClassificationDataSet:
    """Load a CSV into a :class:`ClassificationDataSet`.

    Labels are mapped to class indices following ``class_names`` when given,
    otherwise the distinct label values sorted by their original type. The
    resolved feature columns are kept on ``dataset.feature_names``.
    """
    df, columns = _read_frame(csv_path, target_column, feature_columns)
    raw_labels = df[target_column].astype(str)

    # sort on the raw values so numeric labels order numerically
    names = (
        [str(c) for c in class_names]
        if class_names is not None
        else [str(v) for v in sorted(df[target_column].unique())]
    )
    mapping = {name: idx for idx, name in enumerate(names)}
    unknown = sorted(set(raw_labels) - set(mapping))
    if unknown:
        raise ValueError(f'Labels not in class_names: {unknown}')

    features = df[columns].to_numpy(dtype=float)
    labels = raw_labels.map(mapping).to_numpy(dtype=np.int64)

    log.info(
        json_log(
            'data.loaded',
            component='data.loading',
            path=str(csv_path),
            kind='classification',
            rows=len(df),
            features=len(columns),
            classes=names,
        )
    )
    return ClassificationDataSet.from_arrays(
        features, labels, class_names=names, feature_names=columns
    )
