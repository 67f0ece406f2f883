from __future__ import annotations

from pathlib import Path
from typing import Dict

from bicseg.evaluation import io
from bicseg.evaluation.io import EvaluationExample
from bicseg.evaluation.matching import MatchCounts, match_boundaries
from bicseg.evaluation.metrics import compute_precision_recall


class EvaluationRunner:
    def __init__(self, tolerance_frames: int = 5) -> None:
        self.tolerance_frames = tolerance_frames

    def run(self, manifest_path: Path) -> Dict[str, float]:
        examples = io.load_manifest(manifest_path)
        counts = MatchCounts()
        for example in examples:
            counts.accumulate(self._evaluate_example(example))
        metrics = compute_precision_recall(counts.tp, counts.fp, counts.fn)
        metrics.update({"tp": counts.tp, "fp": counts.fp, "fn": counts.fn})
        return metrics

    def _evaluate_example(self, example: EvaluationExample) -> MatchCounts:
        references = io.load_reference_boundaries(example.annotation_path)
        predictions = io.load_predicted_boundaries(example.prediction_path)
        return match_boundaries(predictions, references, tolerance=self.tolerance_frames)
