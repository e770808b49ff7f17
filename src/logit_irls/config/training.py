"""Config models and loaders for training."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

import yaml

from ..models.logreg.model import DEFAULT_MAX_ITERATIONS, DEFAULT_TOLERANCE

Mode = Literal['classification', 'regression']
_MODES: tuple[str, ...] = ('classification', 'regression')


@dataclass(frozen=True)
class DataConfig:
    train_path: Path
    target_column: str
    test_path: Path | None = None
    feature_columns: tuple[str, ...] | None = None
    class_names: tuple[str, ...] | None = None


@dataclass(frozen=True)
class OptimizerConfig:
    tolerance: float = DEFAULT_TOLERANCE
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    parallel: bool = False


@dataclass(frozen=True)
class ArtifactConfig:
    output_dir: Path = Path('artifacts/models')


@dataclass(frozen=True)
class TrainingConfig:
    data: DataConfig
    mode: Mode = 'classification'
    model_name: str = 'logit_irls'
    optimizer: OptimizerConfig = field(default_factory=OptimizerConfig)
    artifacts: ArtifactConfig = field(default_factory=ArtifactConfig)


def load_training_config(config_path: str | Path) -> TrainingConfig:
    """Load a training config YAML file."""
    cfg_path = Path(config_path).expanduser().resolve()
    if not cfg_path.exists():
        raise FileNotFoundError(f'Config file not found: {cfg_path}')

    with cfg_path.open('r', encoding='utf-8') as fh:
        data = yaml.safe_load(fh) or {}

    base_dir = cfg_path.parent

    data_section = data.get('data') or {}
    optimizer_section = data.get('optimizer') or {}
    artifacts_section = data.get('artifacts') or {}
    model_section = data.get('model') or {}

    train_path = data_section.get('train_path')
    if not train_path:
        raise ValueError('data.train_path must be set in training config')
    target_column = data_section.get('target_column')
    if not target_column:
        raise ValueError('data.target_column must be set in training config')

    mode = data.get('mode', 'classification')
    if mode not in _MODES:
        raise ValueError(f"mode must be one of {_MODES}, got '{mode}'")

    data_cfg = DataConfig(
        train_path=_resolve_path(base_dir, train_path),
        target_column=str(target_column),
        test_path=_resolve_optional_path(base_dir, data_section.get('test_path')),
        feature_columns=_optional_tuple(data_section.get('feature_columns')),
        class_names=_optional_tuple(data_section.get('class_names')),
    )

    optimizer = OptimizerConfig(
        tolerance=float(optimizer_section.get('tolerance', DEFAULT_TOLERANCE)),
        max_iterations=int(optimizer_section.get('max_iterations', DEFAULT_MAX_ITERATIONS)),
        parallel=bool(optimizer_section.get('parallel', False)),
    )
    if optimizer.tolerance <= 0:
        raise ValueError('optimizer.tolerance must be positive')
    if optimizer.max_iterations < 1:
        raise ValueError('optimizer.max_iterations must be at least 1')

    artifacts = ArtifactConfig(
        output_dir=_resolve_path(base_dir, artifacts_section.get('output_dir', 'artifacts/models')),
    )

    return TrainingConfig(
        data=data_cfg,
        mode=mode,
        model_name=str(model_section.get('name', 'logit_irls')),
        optimizer=optimizer,
        artifacts=artifacts,
    )


def _resolve_path(base: Path, value: str | Path) -> Path:
    path = Path(value)
    if not path.is_absolute():
        path = (base / path).resolve()
    return path


def _resolve_optional_path(base: Path, value: str | Path | None) -> Path | None:
    if value is None:
        return None
    return _resolve_path(base, value)


def _optional_tuple(items: Iterable[str] | None) -> tuple[str, ...] | None:
    if not items:
        return None
    return tuple(str(item) for item in items)
