from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from bicseg.config import BicParams
from bicseg.segmentation.change_search import bic_change_search, delta_bic
from bicseg.segmentation.matrix import as_feature_matrix, frame_window
from bicseg.segmentation.planner import FrameSegment, build_segments
from bicseg.utils import get_logger

logger = get_logger(__name__)

Boundaries = Tuple[List[int], List[float]]


@dataclass
class SegmentationResult:
    boundaries: List[int] = field(default_factory=list)
    scores: List[float] = field(default_factory=list)
    bic_trace: List[float] = field(default_factory=list)
    n_frames: int = 0

    def segments(self) -> List[FrameSegment]:
        return build_segments(self.boundaries, n_frames=self.n_frames)


def coarse_segmentation(
    features: np.ndarray,
    params: BicParams,
) -> Tuple[List[int], List[float], List[float]]:
    """First pass: grow a window by ``size1`` frames until it holds a change.

    After a change at ``i`` the next window starts at ``i + inc1``. Returns
    boundaries, their BIC differentials and the concatenated search trace.
    """

    n_frames = features.shape[1]
    boundaries: List[int] = []
    scores: List[float] = []
    trace: List[float] = []

    current = 0
    end = -1
    while end < n_frames - 1:
        end = min(end + params.size1, n_frames - 1)
        window = frame_window(features, current, end)
        search = bic_change_search(window, params.inc1, current, params.cpw)
        logger.debug(
            "Coarse window searched",
            extra={"start": current, "end": end, "steps": len(search.trace)},
        )

        stored = 0
        if search.found:
            logger.debug("Coarse change found", extra={"frame": search.index})
            boundaries.append(search.index)
            scores.append(search.dmin)
            stored = search.step + 1
            trace.extend(search.trace[:stored])
            current = search.index + params.inc1
            end = current - 1

        if end == n_frames - 1:
            trace.extend(search.trace[stored:])

    return boundaries, scores, trace


def refine_segmentation(
    features: np.ndarray,
    boundaries: List[int],
    scores: List[float],
    params: BicParams,
) -> Boundaries:
    """Second pass: re-search a ``size2`` window centred on each boundary.

    A boundary moves when the local search lands strictly between its
    neighbours, and is dropped when it lands anywhere else.
    """

    n_frames = features.shape[1]
    refined = list(boundaries)
    refined_scores = list(scores)
    half_size = params.size2 // 2

    idx = 0
    while idx < len(refined):
        boundary = refined[idx]
        start = max(0, boundary - half_size)
        end = min(n_frames - 1, start + params.size2 - 1)
        search = bic_change_search(
            frame_window(features, start, end), params.inc2, start, params.cpw
        )
        if not search.found:
            idx += 1
            continue

        prev_boundary = refined[idx - 1] if idx > 0 else 0
        next_boundary = refined[idx + 1] if idx + 1 < len(refined) else n_frames - 1
        if prev_boundary < search.index < next_boundary:
            if search.index != boundary:
                logger.debug(
                    "Refined change", extra={"frame": boundary, "refined": search.index}
                )
                refined[idx] = search.index
                refined_scores[idx] = search.dmin
            idx += 1
            continue

        logger.debug("Dropped unsupported change", extra={"frame": boundary})
        del refined[idx]
        del refined_scores[idx]

    return refined, refined_scores


def validate_segmentation(
    features: np.ndarray,
    boundaries: List[int],
    scores: List[float],
    params: BicParams,
) -> Boundaries:
    """Third pass: merge neighbouring segments whose delta BIC is positive.

    The first and last boundaries are always kept. Sweeps repeat until one
    removes nothing, so running the pass again on its output is a no-op.
    """

    kept = list(boundaries)
    kept_scores = list(scores)
    if not kept:
        return kept, kept_scores

    while _validation_sweep(features, kept, kept_scores, params):
        pass
    return kept, kept_scores


def _validation_sweep(
    features: np.ndarray,
    kept: List[int],
    kept_scores: List[float],
    params: BicParams,
) -> bool:
    removed = False
    segment_start = 0
    idx = 1
    while idx < len(kept) - 1:
        window = frame_window(features, segment_start, kept[idx + 1])
        if delta_bic(window, kept[idx] - kept[idx - 1], params.cpw) > 0:
            logger.debug("Merged segments", extra={"frame": kept[idx]})
            del kept[idx]
            del kept_scores[idx]
            removed = True
            continue
        segment_start = kept[idx] + 1
        idx += 1
    return removed


def segment_features(
    features: np.ndarray,
    params: Optional[BicParams] = None,
) -> SegmentationResult:
    """Segment a (features x frames) matrix into statistically homogeneous spans.

    Raises ``InsufficientDataError`` when the matrix has fewer than two frames.
    """

    if params is None:
        params = BicParams()
    matrix = as_feature_matrix(features)
    n_features, n_frames = matrix.shape
    logger.info(
        "Segmenting features",
        extra={"features": n_features, "frames": n_frames, **params.to_dict()},
    )

    boundaries, scores, trace = coarse_segmentation(matrix, params)
    logger.info("Coarse segmentation done: %d change(s)", len(boundaries))

    boundaries, scores = refine_segmentation(matrix, boundaries, scores, params)
    logger.info("Fine segmentation done: %d change(s)", len(boundaries))

    boundaries, scores = validate_segmentation(matrix, boundaries, scores, params)
    logger.info("Segment validation done: %d change(s)", len(boundaries))

    return SegmentationResult(
        boundaries=boundaries,
        scores=scores,
        bic_trace=trace,
        n_frames=n_frames,
    )
