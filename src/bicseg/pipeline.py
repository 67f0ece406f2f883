from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, List, Optional

from bicseg.config import BicParams, load_bic_config
from bicseg.features import load_feature_matrix
from bicseg.segmentation import SegmentationResult, segment_features
from bicseg.utils import get_logger

logger = get_logger(__name__)

MANIFEST_NAME = "segments.json"
TRACE_NAME = "bic_trace.json"


@dataclass
class PipelineConfig:
    config_path: Optional[Path] = None
    overrides: dict[str, Any] = field(default_factory=dict)
    frames_first: bool = False

    def resolve_params(self) -> BicParams:
        params = load_bic_config(self.config_path) if self.config_path else BicParams()
        return params.with_overrides(**self.overrides)


@dataclass
class PipelineResult:
    segmentation: SegmentationResult
    segments: List[dict[str, Any]] = field(default_factory=list)
    output_dir: Path = Path("out")
    manifest_path: Optional[Path] = None
    trace_path: Optional[Path] = None


class BicSegmentationPipeline:
    def __init__(self, config: PipelineConfig) -> None:
        self.config = config
        self.params = config.resolve_params()
        logger.debug("Initialized pipeline", extra=self.params.to_dict())

    def run(self, features_path: Path, output_dir: Path) -> PipelineResult:
        features = load_feature_matrix(features_path, frames_first=self.config.frames_first)
        segmentation = segment_features(features, self.params)
        segments = [asdict(segment) for segment in segmentation.segments()]

        output_dir.mkdir(parents=True, exist_ok=True)
        manifest_path = output_dir / MANIFEST_NAME
        trace_path = output_dir / TRACE_NAME
        manifest_path.write_text(
            json.dumps(
                {
                    "features": str(features_path),
                    "n_frames": segmentation.n_frames,
                    "params": self.params.to_dict(),
                    "boundaries": segmentation.boundaries,
                    "scores": segmentation.scores,
                    "segments": segments,
                },
                indent=2,
            )
        )
        trace_path.write_text(json.dumps({"bic_values": segmentation.bic_trace}))
        logger.info(
            "Segmentation written",
            extra={"features_path": str(features_path), "out": str(manifest_path)},
        )
        return PipelineResult(
            segmentation=segmentation,
            segments=segments,
            output_dir=output_dir,
            manifest_path=manifest_path,
            trace_path=trace_path,
        )
