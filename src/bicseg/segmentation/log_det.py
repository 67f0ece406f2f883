from __future__ import annotations

import numpy as np

VARIANCE_THRESHOLD = 1e-5
LOG_VARIANCE_FLOOR = -5.0


def log_determinant(window: np.ndarray) -> float:
    """Log-determinant of the diagonal covariance of ``window`` (features x frames).

    Off-diagonal terms are ignored, so the result is the sum of the per-feature
    log-variances. Variances at or below ``VARIANCE_THRESHOLD`` (constant
    features, or tiny negative values from rounding) contribute
    ``LOG_VARIANCE_FLOOR`` instead of ``log``. An empty window scores 0.
    """

    if window.size == 0:
        return 0.0
    n_frames = window.shape[1]
    z = 1.0 / n_frames
    sums = np.sum(window, axis=1)
    squares = np.sum(window * window, axis=1)
    variances = squares * z - sums * sums * (z * z)
    usable = variances > VARIANCE_THRESHOLD
    logs = np.log(np.where(usable, variances, 1.0))
    return float(np.sum(np.where(usable, logs, LOG_VARIANCE_FLOOR)))
