from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass
class MatchCounts:
    tp: int = 0
    fp: int = 0
    fn: int = 0

    def accumulate(self, other: "MatchCounts") -> "MatchCounts":
        self.tp += other.tp
        self.fp += other.fp
        self.fn += other.fn
        return self


def match_boundaries(
    predicted: Sequence[int],
    reference: Sequence[int],
    *,
    tolerance: int,
) -> MatchCounts:
    """Pair each predicted boundary with the closest unmatched reference within ``tolerance`` frames."""

    if tolerance < 0:
        raise ValueError("tolerance must be non-negative")
    ref_matched = [False] * len(reference)
    tp = 0

    for pred in sorted(predicted):
        match_index = _find_within_tolerance(pred, reference, ref_matched, tolerance)
        if match_index is not None:
            ref_matched[match_index] = True
            tp += 1

    fp = len(predicted) - tp
    fn = len(reference) - tp
    return MatchCounts(tp=tp, fp=fp, fn=fn)


def _find_within_tolerance(
    candidate: int,
    references: Sequence[int],
    matched: Sequence[bool],
    tolerance: int,
) -> int | None:
    best_idx: int | None = None
    best_delta = tolerance
    for idx, ref in enumerate(references):
        if matched[idx]:
            continue
        delta = abs(candidate - ref)
        if delta <= best_delta:
            best_idx = idx
            best_delta = delta
    return best_idx
