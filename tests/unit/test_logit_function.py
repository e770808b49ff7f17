"""Unit tests for the logistic function bound to coefficients."""

from __future__ import annotations

import math

import numpy as np
import pytest

from logit_irls.models.logreg.function import LogitFunction, logit


class TestLogit:
    """Tests for the scalar logistic transform."""

    def test_zero_maps_to_half(self) -> None:
        assert logit(0.0) == pytest.approx(0.5)

    def test_matches_closed_form(self) -> None:
        for z in (-3.0, -0.5, 1.25, 4.0):
            assert logit(z) == pytest.approx(1.0 / (1.0 + math.exp(-z)))

    def test_extreme_inputs_saturate_without_nan(self) -> None:
        """Very large |z| stays finite and within [0, 1]."""
        assert logit(-1000.0) == 0.0
        assert logit(1000.0) == 1.0


class TestLogitFunction:
    """Tests for LogitFunction.evaluate / derivative."""

    def test_evaluate_uses_bias_then_weights(self) -> None:
        """z = c[0] + sum(x[i-1] * c[i])."""
        fn = LogitFunction(np.array([1.0, 2.0, -1.0]))

        result = fn.evaluate(np.array([0.5, 3.0]))

        # z = 1 + 0.5*2 - 3*1 = -1
        assert result == pytest.approx(logit(-1.0))
        assert isinstance(result, float)

    def test_derivative_is_y_times_one_minus_y(self) -> None:
        fn = LogitFunction(np.array([0.3, -0.7]))
        x = np.array([2.0])

        y = fn.evaluate(x)

        assert fn.derivative(x) == pytest.approx(y * (1.0 - y))

    def test_derivative_peaks_at_quarter(self) -> None:
        fn = LogitFunction(np.zeros(3))

        assert fn.derivative(np.array([5.0, -2.0])) == pytest.approx(0.25)

    def test_reads_live_coefficients(self) -> None:
        """In-place updates to the shared array are seen on the next call."""
        coefficients = np.zeros(2)
        fn = LogitFunction(coefficients)
        x = np.array([1.0])
        assert fn.evaluate(x) == pytest.approx(0.5)

        coefficients[1] = 2.0

        assert fn.evaluate(x) == pytest.approx(logit(2.0))

    def test_evaluates_block_of_rows(self) -> None:
        fn = LogitFunction(np.array([0.0, 1.0]))
        rows = np.array([[0.0], [1.0], [-1.0]])

        result = fn.evaluate(rows)

        np.testing.assert_allclose(result, [0.5, logit(1.0), logit(-1.0)])

    def test_wrong_feature_count_raises(self) -> None:
        fn = LogitFunction(np.zeros(3))

        with pytest.raises(ValueError, match='Expected 2 features'):
            fn.evaluate(np.array([1.0, 2.0, 3.0]))
