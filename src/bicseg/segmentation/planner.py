from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

TAIL_LABEL = "tail"
FULL_LABEL = "full"


@dataclass
class FrameSegment:
    start: int
    end: int
    label: str

    def length(self) -> int:
        return max(0, self.end - self.start + 1)


def build_segments(boundaries: Sequence[int], *, n_frames: int) -> List[FrameSegment]:
    """Turn change points into inclusive frame spans covering ``0..n_frames-1``.

    Each boundary is the last frame of its segment.
    """

    if n_frames < 1:
        raise ValueError("n_frames must be positive")

    usable = sorted({int(b) for b in boundaries if 0 <= b < n_frames - 1})
    if not usable:
        return [FrameSegment(0, n_frames - 1, FULL_LABEL)]

    segments: List[FrameSegment] = []
    start = 0
    for idx, boundary in enumerate(usable):
        segments.append(FrameSegment(start, boundary, f"segment_{idx}"))
        start = boundary + 1
    segments.append(FrameSegment(start, n_frames - 1, TAIL_LABEL))
    return segments
