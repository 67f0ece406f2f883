from __future__ import annotations

import numpy as np

MIN_FRAMES = 2


class InsufficientDataError(ValueError):
    """Raised when a feature matrix has too few frames to segment."""


def as_feature_matrix(features: np.ndarray) -> np.ndarray:
    """Validate ``features`` as a (features, frames) matrix and return it as float64."""

    matrix = np.asarray(features, dtype=np.float64)
    if matrix.ndim != 2:
        raise ValueError(f"Feature matrix must be 2-D, got {matrix.ndim} dimension(s)")
    n_features, n_frames = matrix.shape
    if n_features < 1:
        raise ValueError("Feature matrix must contain at least one feature")
    if n_frames < MIN_FRAMES:
        raise InsufficientDataError(
            f"Feature matrix has {n_frames} frame(s); at least {MIN_FRAMES} are "
            "required to perform segmentation"
        )
    if not np.all(np.isfinite(matrix)):
        raise ValueError("Feature matrix contains non-finite values")
    return matrix


def sub_matrix(matrix: np.ndarray, i0: int, i1: int, j0: int, j1: int) -> np.ndarray:
    """Copy rows ``i0..i1`` and columns ``j0..j1`` (both inclusive).

    Returns an empty ``(0, 0)`` array when either range is empty.
    """

    rows = i1 - i0 + 1
    cols = j1 - j0 + 1
    if rows < 1 or cols < 1:
        return np.empty((0, 0), dtype=np.float64)
    return np.array(matrix[i0 : i1 + 1, j0 : j1 + 1], dtype=np.float64, copy=True)


def frame_window(matrix: np.ndarray, start: int, end: int) -> np.ndarray:
    """All features for frames ``start..end`` (inclusive)."""

    return sub_matrix(matrix, 0, matrix.shape[0] - 1, start, end)
