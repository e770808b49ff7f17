"""Unit tests for the JSON logging helpers."""

from __future__ import annotations

import json
import logging

import numpy as np
import pytest

from logit_irls.utils import get_logger, json_log


def test_json_log_encodes_numpy_values() -> None:
    line = json_log(
        'irls.iteration',
        max_delta=np.float64(0.25),
        iteration=np.int64(3),
        coefficients=np.array([1.0, -2.0]),
    )

    record = json.loads(line)
    assert record['event'] == 'irls.iteration'
    assert record['max_delta'] == 0.25
    assert record['iteration'] == 3
    assert record['coefficients'] == [1.0, -2.0]
    assert isinstance(record['ts'], float)


def test_json_log_falls_back_to_str(tmp_path) -> None:
    record = json.loads(json_log('data.loaded', path=tmp_path))

    assert record['path'] == str(tmp_path)


def test_level_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv('LOGIT_IRLS_DEBUG', raising=False)
    monkeypatch.setenv('LOGIT_IRLS_LOG_LEVEL', 'warning')

    logger = get_logger('logit_irls.tests.level')

    assert logger.level == logging.WARNING


def test_debug_flag_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('LOGIT_IRLS_LOG_LEVEL', 'ERROR')
    monkeypatch.setenv('LOGIT_IRLS_DEBUG', '1')

    assert get_logger('logit_irls.tests.debug').level == logging.DEBUG


def test_unknown_level_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv('LOGIT_IRLS_DEBUG', raising=False)
    monkeypatch.setenv('LOGIT_IRLS_LOG_LEVEL', 'chatty')

    with pytest.raises(ValueError, match='LOGIT_IRLS_LOG_LEVEL'):
        get_logger('logit_irls.tests.bad')


def test_handler_attached_once() -> None:
    first = get_logger('logit_irls.tests.once')
    second = get_logger('logit_irls.tests.once')

    assert first is second
    assert len(second.handlers) == 1
