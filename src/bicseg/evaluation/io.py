from __future__ import annotations

import csv
import json
from dataclasses import dataclass
from pathlib import Path
from typing import List


@dataclass
class EvaluationExample:
    prediction_path: Path
    annotation_path: Path


def load_manifest(manifest_path: Path) -> List[EvaluationExample]:
    rows = _read_csv(manifest_path)
    examples: List[EvaluationExample] = []
    for row in rows:
        prediction = row.get("prediction_path", "")
        annotation = row.get("annotation_path", "")
        if not prediction:
            raise ValueError("Manifest missing prediction_path column")
        if not annotation:
            raise ValueError("Manifest missing annotation_path column")
        examples.append(
            EvaluationExample(
                prediction_path=Path(prediction).expanduser(),
                annotation_path=Path(annotation).expanduser(),
            )
        )
    return examples


def load_reference_boundaries(annotation_path: Path) -> List[int]:
    rows = _read_csv(annotation_path)
    return sorted(int(float(row["frame"])) for row in rows)


def load_predicted_boundaries(prediction_path: Path) -> List[int]:
    payload = json.loads(prediction_path.read_text())
    return sorted(int(value) for value in payload.get("boundaries", []))


def _read_csv(path: Path) -> List[dict[str, str]]:
    with path.open() as handle:
        reader = csv.DictReader(handle)
        return list(reader)
