from __future__ import annotations

import math

import numpy as np
import pytest

from bicseg.segmentation.log_det import LOG_VARIANCE_FLOOR, log_determinant


def test_log_determinant_sums_feature_log_variances() -> None:
    window = np.array(
        [
            [1.0, -1.0, 1.0, -1.0],
            [2.0, -2.0, 2.0, -2.0],
        ]
    )
    assert log_determinant(window) == pytest.approx(math.log(1.0) + math.log(4.0))


def test_log_determinant_constant_features_use_floor() -> None:
    window = np.full((3, 10), 2.5)
    assert log_determinant(window) == pytest.approx(3 * LOG_VARIANCE_FLOOR)


def test_log_determinant_single_frame_is_flat() -> None:
    window = np.array([[0.3], [7.0]])
    assert log_determinant(window) == pytest.approx(2 * LOG_VARIANCE_FLOOR)


def test_log_determinant_mixes_floor_and_log() -> None:
    window = np.array(
        [
            [5.0, 5.0, 5.0, 5.0],
            [0.0, 3.0, 0.0, 3.0],
        ]
    )
    expected = LOG_VARIANCE_FLOOR + math.log(2.25)
    assert log_determinant(window) == pytest.approx(expected)


def test_log_determinant_ignores_frame_order() -> None:
    rng = np.random.default_rng(7)
    window = rng.normal(loc=3.0, scale=2.0, size=(4, 64))
    shuffled = window[:, rng.permutation(window.shape[1])]
    assert log_determinant(shuffled) == pytest.approx(log_determinant(window), rel=1e-9)


def test_log_determinant_empty_window_scores_zero() -> None:
    assert log_determinant(np.empty((0, 0))) == 0.0
