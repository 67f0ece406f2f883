"""BIC segmentation core."""

from .change_search import ChangeSearchResult, bic_change_search, bic_penalty, delta_bic
from .log_det import log_determinant
from .matrix import InsufficientDataError, as_feature_matrix, frame_window, sub_matrix
from .pipeline import (
    SegmentationResult,
    coarse_segmentation,
    refine_segmentation,
    segment_features,
    validate_segmentation,
)
from .planner import FrameSegment, build_segments

__all__ = [
    "ChangeSearchResult",
    "bic_change_search",
    "bic_penalty",
    "delta_bic",
    "log_determinant",
    "InsufficientDataError",
    "as_feature_matrix",
    "frame_window",
    "sub_matrix",
    "SegmentationResult",
    "coarse_segmentation",
    "refine_segmentation",
    "validate_segmentation",
    "segment_features",
    "FrameSegment",
    "build_segments",
]
