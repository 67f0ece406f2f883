from __future__ import annotations

from pathlib import Path

import numpy as np

TEXT_SUFFIXES = (".csv", ".txt")
NUMPY_SUFFIXES = (".npy",)


def load_feature_matrix(path: Path, *, frames_first: bool = False) -> np.ndarray:
    """Load a feature matrix stored as ``.npy`` or delimited text.

    Matrices are returned as (features, frames). Pass ``frames_first`` when the
    file stores one frame per row. A 1-D array is read as a single feature.
    """

    path = path.expanduser().resolve()
    if not path.exists():
        raise FileNotFoundError(f"Feature file not found: {path}")

    suffix = path.suffix.lower()
    if suffix in NUMPY_SUFFIXES:
        matrix = np.load(path, allow_pickle=False)
    elif suffix in TEXT_SUFFIXES:
        delimiter = "," if suffix == ".csv" else None
        matrix = np.loadtxt(path, delimiter=delimiter, dtype=np.float64, ndmin=1)
    else:
        raise ValueError(
            f"Unsupported feature file '{path.name}'; expected one of "
            f"{NUMPY_SUFFIXES + TEXT_SUFFIXES}"
        )

    matrix = np.asarray(matrix, dtype=np.float64)
    if matrix.ndim == 1:
        return matrix.reshape(1, -1)
    if matrix.ndim != 2:
        raise ValueError(f"Feature matrix must be 1-D or 2-D, got {matrix.ndim} dimensions")
    return matrix.T.copy() if frames_first else matrix
