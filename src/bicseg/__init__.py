"""Bayesian Information Criterion segmentation of feature sequences."""

from bicseg.config import BicParams, load_bic_config
from bicseg.segmentation import InsufficientDataError, SegmentationResult, segment_features

__all__ = [
    "BicParams",
    "load_bic_config",
    "InsufficientDataError",
    "SegmentationResult",
    "segment_features",
]
