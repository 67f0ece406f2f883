from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from bicseg.features import load_feature_matrix


def test_load_feature_matrix_npy(tmp_path: Path) -> None:
    path = tmp_path / "features.npy"
    data = np.arange(12, dtype=float).reshape(3, 4)
    np.save(path, data)

    matrix = load_feature_matrix(path)

    assert matrix.shape == (3, 4)
    assert np.array_equal(matrix, data)


def test_load_feature_matrix_csv_frames_first(tmp_path: Path) -> None:
    path = tmp_path / "features.csv"
    path.write_text("1.0,10.0\n2.0,20.0\n3.0,30.0\n")

    matrix = load_feature_matrix(path, frames_first=True)

    assert matrix.shape == (2, 3)
    assert matrix[1].tolist() == [10.0, 20.0, 30.0]


def test_load_feature_matrix_single_feature(tmp_path: Path) -> None:
    path = tmp_path / "single.txt"
    path.write_text("0.5\n1.5\n2.5\n")

    matrix = load_feature_matrix(path)

    assert matrix.shape == (1, 3)


def test_load_feature_matrix_errors(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_feature_matrix(tmp_path / "missing.npy")
    other = tmp_path / "features.wav"
    other.write_bytes(b"RIFF")
    with pytest.raises(ValueError):
        load_feature_matrix(other)
