"""Evaluation harness exports."""

from .io import EvaluationExample, load_manifest, load_predicted_boundaries, load_reference_boundaries
from .matching import MatchCounts, match_boundaries
from .metrics import compute_precision_recall
from .runner import EvaluationRunner

__all__ = [
    "EvaluationExample",
    "load_manifest",
    "load_predicted_boundaries",
    "load_reference_boundaries",
    "MatchCounts",
    "match_boundaries",
    "compute_precision_recall",
    "EvaluationRunner",
]
