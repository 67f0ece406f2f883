from __future__ import annotations

from pathlib import Path

import pytest

from bicseg.config import BicParams, load_bic_config, params_from_mapping


def test_bic_params_defaults() -> None:
    params = BicParams()
    assert params.to_dict() == {"size1": 300, "inc1": 60, "size2": 200, "inc2": 20, "cpw": 1.5}


@pytest.mark.parametrize(
    "overrides",
    [{"size1": 0}, {"inc1": -1}, {"size2": 2.5}, {"inc2": True}, {"cpw": -0.1}, {"cpw": "high"}],
)
def test_bic_params_rejects_invalid_values(overrides) -> None:
    with pytest.raises(ValueError):
        BicParams(**overrides)


def test_with_overrides_skips_none() -> None:
    params = BicParams().with_overrides(size1=50, inc1=None, cpw=1.0)
    assert params.size1 == 50
    assert params.inc1 == 60
    assert params.cpw == 1.0


def test_load_bic_config_reads_section(tmp_path: Path) -> None:
    path = tmp_path / "sbic.yaml"
    path.write_text("sbic:\n  size1: 120\n  inc1: '10'\n  cpw: 2\n  unknown: 3\n")

    params = load_bic_config(path)

    assert params.size1 == 120
    assert params.inc1 == 10
    assert params.cpw == pytest.approx(2.0)
    assert params.size2 == 200


def test_load_bic_config_top_level_keys(tmp_path: Path) -> None:
    path = tmp_path / "flat.yaml"
    path.write_text("size2: 80\ninc2: 8\n")

    params = load_bic_config(path)

    assert params.size2 == 80
    assert params.inc2 == 8


def test_load_bic_config_missing_or_empty(tmp_path: Path) -> None:
    assert load_bic_config(tmp_path / "missing.yaml") == BicParams()
    empty = tmp_path / "empty.yaml"
    empty.write_text("")
    assert load_bic_config(empty) == BicParams()


def test_params_from_mapping_rejects_bad_values() -> None:
    with pytest.raises(ValueError):
        params_from_mapping({"size1": "many"})
    with pytest.raises(ValueError):
        params_from_mapping({"inc1": 2.5})
    with pytest.raises(ValueError):
        params_from_mapping({"sbic": [1, 2]})
