from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from typing import List

import numpy as np

from bicseg.segmentation.log_det import log_determinant
from bicseg.segmentation.matrix import frame_window

NO_CHANGE = 0
DMIN_SENTINEL = sys.float_info.max


@dataclass
class ChangeSearchResult:
    """Outcome of scanning one window for its best split.

    ``index`` is an absolute frame index, or ``NO_CHANGE`` when no split
    lowers the BIC. ``shift`` and ``step`` locate the numeric minimum inside
    the window and inside ``trace`` (``-1`` when nothing was scanned).
    A split after frame 0 of a window starting at frame 0 (only possible
    with ``inc=1``) has index 0 and so also reads as no change.
    """

    index: int
    dmin: float
    trace: List[float] = field(default_factory=list)
    shift: int = -1
    step: int = -1

    @property
    def found(self) -> bool:
        return self.index != NO_CHANGE


def complexity(n_features: int) -> int:
    return 2 * n_features


def bic_penalty(cpw: float, n_features: int, n_frames: int) -> float:
    return cpw * complexity(n_features) * math.log(n_frames)


def _split_differential(
    window: np.ndarray,
    n_first: int,
    whole: float,
    penalty: float,
) -> float:
    n_frames = window.shape[1]
    n_second = n_frames - n_first
    s1 = log_determinant(frame_window(window, 0, n_first - 1))
    s2 = log_determinant(frame_window(window, n_first, n_frames - 1))
    return 0.5 * (n_first * s1 + n_second * s2 - n_frames * whole + penalty)


def bic_change_search(
    window: np.ndarray,
    inc: int,
    current: int,
    cpw: float,
) -> ChangeSearchResult:
    """Scan ``window`` every ``inc`` frames for the split minimizing the BIC differential.

    Candidate splits leave at least ``inc`` frames on each side. The first
    minimum wins ties. ``current`` is the absolute index of the window's first
    frame and is added to the winning shift.
    """

    if inc < 1:
        raise ValueError("inc must be at least 1")
    n_features, n_frames = window.shape
    result = ChangeSearchResult(index=NO_CHANGE, dmin=DMIN_SENTINEL)
    if n_frames < 2 * inc:
        return result

    penalty = bic_penalty(cpw, n_features, n_frames)
    whole = log_determinant(window)

    shift = inc - 1
    while shift < n_frames - inc:
        value = _split_differential(window, shift + 1, whole, penalty)
        result.trace.append(value)
        if value < result.dmin:
            result.dmin = value
            result.shift = shift
            result.step = len(result.trace) - 1
        shift += inc

    if result.shift >= 0 and result.dmin <= 0:
        result.index = current + result.shift
    return result


def delta_bic(window: np.ndarray, split: int, cpw: float) -> float:
    """BIC differential of cutting ``window`` after its first ``split`` frames.

    A positive value means the two parts are better modeled together.
    """

    n_features, n_frames = window.shape
    if n_frames < 1:
        raise ValueError("Cannot score an empty window")
    split = int(split)
    if split < 0 or split > n_frames:
        raise ValueError(f"split must be within [0, {n_frames}], got {split}")
    penalty = bic_penalty(cpw, n_features, n_frames)
    return _split_differential(window, split, log_determinant(window), penalty)
