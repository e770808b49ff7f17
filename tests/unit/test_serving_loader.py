"""Unit tests for serving module loader and batch prediction."""

from __future__ import annotations

import json
from pathlib import Path

import joblib
import numpy as np
import pandas as pd
import pytest

from logit_irls.common.artifacts import save_model_artifact
from logit_irls.data.datasets import ClassificationDataSet, RegressionDataSet
from logit_irls.models.logreg import LogisticRegression
from logit_irls.serving import ModelArtifact, ModelLoadError, load_model, predict_frame


@pytest.fixture
def model_dir(tmp_path: Path) -> Path:
    """Create a run directory holding a trained classifier."""
    features = np.array([[0.0], [1.0], [2.0], [7.0], [3.0], [8.0], [9.0], [10.0]])
    dataset = ClassificationDataSet.from_arrays(
        features, [0, 0, 0, 0, 1, 1, 1, 1], class_names=['neg', 'pos']
    )
    model = LogisticRegression()
    model.train(dataset)

    metadata = {
        'model_name': 'test_model',
        'mode': 'classification',
        'target_column': 'label',
        'feature_columns': ['x'],
        'class_names': ['neg', 'pos'],
    }
    return save_model_artifact(model, metadata, tmp_path / 'models')


def test_load_model_success(model_dir: Path) -> None:
    artifact = load_model(model_dir)

    assert isinstance(artifact, ModelArtifact)
    assert isinstance(artifact.model, LogisticRegression)
    assert artifact.model.is_trained
    assert artifact.mode == 'classification'
    assert artifact.class_names == ['neg', 'pos']
    assert artifact.feature_columns == ['x']
    assert artifact.model_name == 'test_model'
    assert artifact.version == model_dir.name.split('.', 1)[1]


def test_run_directory_naming(model_dir: Path) -> None:
    assert model_dir.name.startswith('model.')
    assert model_dir.name.endswith('_001')
    metadata = json.loads((model_dir / 'metadata.json').read_text(encoding='utf-8'))
    assert metadata['run_id'] == model_dir.name
    assert 'sklearn_version' in metadata['environment']


def test_second_run_gets_next_sequence(model_dir: Path) -> None:
    second = save_model_artifact(LogisticRegression(), {}, model_dir.parent)

    assert second.name.endswith('_002')


def test_load_model_missing_directory() -> None:
    with pytest.raises(ModelLoadError, match='Model directory not found'):
        load_model('/nonexistent/path')


def test_load_model_missing_joblib(tmp_path: Path) -> None:
    (tmp_path / 'metadata.json').write_text('{}', encoding='utf-8')

    with pytest.raises(ModelLoadError, match='Model file not found'):
        load_model(tmp_path)


def test_load_model_missing_metadata(model_dir: Path) -> None:
    (model_dir / 'metadata.json').unlink()

    with pytest.raises(ModelLoadError, match='Metadata file not found'):
        load_model(model_dir)


def test_load_model_rejects_untrained(tmp_path: Path) -> None:
    joblib.dump(LogisticRegression(), tmp_path / 'logit_irls.joblib')
    (tmp_path / 'metadata.json').write_text('{}', encoding='utf-8')

    with pytest.raises(ModelLoadError, match='Not a trained LogisticRegression'):
        load_model(tmp_path)


def test_load_model_corrupt_metadata(model_dir: Path) -> None:
    (model_dir / 'metadata.json').write_text('{not json', encoding='utf-8')

    with pytest.raises(ModelLoadError, match='Failed to load metadata'):
        load_model(model_dir)


def test_reloaded_model_predicts_identically(model_dir: Path) -> None:
    original = joblib.load(model_dir / 'logit_irls.joblib')
    artifact = load_model(model_dir)

    x = np.array([4.5])
    assert artifact.model.classify(x) == original.classify(x)


def test_predict_frame_classification(model_dir: Path) -> None:
    artifact = load_model(model_dir)
    df = pd.DataFrame({'x': [0.0, 10.0], 'note': ['a', 'b']})

    scored = predict_frame(artifact, df)

    assert list(scored['label']) == ['neg', 'pos']
    np.testing.assert_allclose(scored['p0'] + scored['p1'], 1.0)
    assert list(scored['note']) == ['a', 'b']


def test_predict_frame_missing_columns(model_dir: Path) -> None:
    artifact = load_model(model_dir)

    with pytest.raises(ValueError, match='missing feature columns'):
        predict_frame(artifact, pd.DataFrame({'y': [1.0]}))


def test_predict_frame_regression(tmp_path: Path) -> None:
    dataset = RegressionDataSet.from_arrays(
        np.array([[0.0], [1.0], [2.0], [3.0], [4.0]]), [2.0, 2.5, 4.0, 5.5, 6.0]
    )
    model = LogisticRegression()
    model.train(dataset)
    run_dir = save_model_artifact(
        model, {'mode': 'regression', 'target_column': 'y'}, tmp_path / 'models'
    )

    scored = predict_frame(load_model(run_dir), pd.DataFrame({'x': [0.0, 2.0, 4.0]}))

    assert 'prediction' in scored.columns
    assert scored['prediction'].between(2.0, 6.0).all()


def test_predict_frame_uses_recorded_column_order(tmp_path: Path) -> None:
    """Reordered inputs and extra columns score the same as the training layout."""
    features = np.array(
        [[0.0, 5.0], [1.0, 4.0], [2.0, 6.0], [7.0, 1.0], [3.0, 2.0], [8.0, 0.0], [9.0, 3.0]]
    )
    dataset = ClassificationDataSet.from_arrays(
        features, [0, 0, 0, 1, 1, 1, 1], class_names=['no', 'yes'], feature_names=['a', 'b']
    )
    model = LogisticRegression()
    model.train(dataset)
    run_dir = save_model_artifact(
        model,
        {
            'mode': 'classification',
            'target_column': 'label',
            'feature_columns': ['a', 'b'],
            'class_names': ['no', 'yes'],
        },
        tmp_path / 'models',
    )
    artifact = load_model(run_dir)

    in_order = pd.DataFrame({'a': [0.5, 8.5], 'b': [4.5, 0.5]})
    shuffled = pd.DataFrame({'id': [11, 12], 'b': [4.5, 0.5], 'a': [0.5, 8.5]})

    expected = predict_frame(artifact, in_order)
    scored = predict_frame(artifact, shuffled)

    np.testing.assert_allclose(scored['p1'], expected['p1'])
    assert list(scored['label']) == list(expected['label'])
    assert list(scored['id']) == [11, 12]
