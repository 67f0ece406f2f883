from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from bicseg.evaluation.runner import EvaluationRunner
from bicseg.pipeline import BicSegmentationPipeline, PipelineConfig
from bicseg.segmentation import InsufficientDataError
from bicseg.utils import set_verbosity

console = Console()
app = typer.Typer(help="BIC segmentation of feature-vector sequences")


@app.command()
def segment(
    features_path: Path = typer.Argument(..., exists=True, readable=True),
    out_dir: Path = typer.Option(Path("out"), "--out", "-o", help="Output directory"),
    config: Optional[Path] = typer.Option(None, help="YAML parameter file"),
    size1: Optional[int] = typer.Option(None, min=1, help="Coarse window size (frames)"),
    inc1: Optional[int] = typer.Option(None, min=1, help="Coarse search step (frames)"),
    size2: Optional[int] = typer.Option(None, min=1, help="Refinement window size (frames)"),
    inc2: Optional[int] = typer.Option(None, min=1, help="Refinement search step (frames)"),
    cpw: Optional[float] = typer.Option(None, min=0.0, help="Complexity penalty weight"),
    frames_first: bool = typer.Option(
        False, "--frames-first", help="Input stores one frame per row"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    set_verbosity(verbose)
    overrides = {"size1": size1, "inc1": inc1, "size2": size2, "inc2": inc2, "cpw": cpw}
    try:
        pipeline = BicSegmentationPipeline(
            config=PipelineConfig(
                config_path=config, overrides=overrides, frames_first=frames_first
            )
        )
        result = pipeline.run(features_path=features_path, output_dir=out_dir)
    except InsufficientDataError as exc:
        console.print(f"Insufficient data: {exc}", style="red")
        raise typer.Exit(code=1) from exc
    except ValueError as exc:
        console.print(f"Invalid input: {exc}", style="red")
        raise typer.Exit(code=1) from exc

    boundaries = result.segmentation.boundaries
    if boundaries:
        console.print(f"Found {len(boundaries)} change(s): {boundaries}", style="cyan")
    else:
        console.print("No changes found; input is a single segment", style="yellow")
    if result.manifest_path:
        console.print(f"Manifest written to {result.manifest_path}")
    if result.trace_path:
        console.print(f"BIC trace written to {result.trace_path}")


@app.command()
def eval(
    manifest: Path = typer.Argument(..., exists=True, readable=True),
    tolerance: int = typer.Option(5, min=0, help="Boundary matching tolerance in frames"),
) -> None:
    runner = EvaluationRunner(tolerance_frames=tolerance)
    metrics = runner.run(manifest)
    console.print_json(json.dumps(metrics))


def run() -> None:
    app()
