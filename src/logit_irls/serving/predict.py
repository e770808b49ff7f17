"""Batch prediction over tabular input."""

from __future__ import annotations

import numpy as np
import pandas as pd

from .loader import ModelArtifact


def predict_frame(artifact: ModelArtifact, df: pd.DataFrame) -> pd.DataFrame:
    """Score every row of ``df``.

    Classification models add ``p0``, ``p1`` and ``label`` columns;
    regression models add a ``prediction`` column. Features are taken from the
    columns recorded at training time, in that order, so extra or reordered
    input columns do not change the scores. Artifacts without recorded
    columns fall back to every column except the target.
    """
    columns = artifact.feature_columns
    if not columns:
        target = artifact.metadata.get('target_column')
        columns = [c for c in df.columns if c != target]
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ValueError(f'Input is missing feature columns: {missing}')

    features = df[columns].to_numpy(dtype=float)
    scores = artifact.model.predict_batch(features)

    out = df.copy()
    if artifact.mode == 'classification':
        names = artifact.class_names or ['0', '1']
        out['p0'] = 1.0 - scores
        out['p1'] = scores
        out['label'] = np.where(scores > 0.5, names[1], names[0])
    else:
        out['prediction'] = scores
    return out
