from __future__ import annotations

from pathlib import Path

import numpy as np
from typer.testing import CliRunner

from bicseg.cli import app

runner = CliRunner()
PATTERN = np.array([-1.5, -0.5, 0.5, 1.5, 0.0])


def test_cli_help() -> None:
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0


def test_cli_segment_writes_manifest(tmp_path: Path) -> None:
    features_path = tmp_path / "features.npy"
    cycle = np.tile(PATTERN, 20)
    np.save(features_path, np.concatenate([cycle, 10.0 + cycle]).reshape(1, -1))
    out_dir = tmp_path / "out"

    result = runner.invoke(
        app,
        [
            "segment",
            str(features_path),
            "--out",
            str(out_dir),
            "--size1",
            "50",
            "--inc1",
            "5",
            "--size2",
            "50",
            "--inc2",
            "5",
            "--cpw",
            "1.0",
        ],
    )

    assert result.exit_code == 0, result.output
    assert (out_dir / "segments.json").exists()
    assert (out_dir / "bic_trace.json").exists()


def test_cli_segment_rejects_single_frame(tmp_path: Path) -> None:
    features_path = tmp_path / "short.npy"
    np.save(features_path, np.zeros((2, 1)))

    result = runner.invoke(app, ["segment", str(features_path), "--out", str(tmp_path / "out")])

    assert result.exit_code == 1
    assert "Insufficient data" in result.output
