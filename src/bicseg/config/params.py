from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

CONFIG_SECTION = "sbic"
_INT_FIELDS = ("size1", "inc1", "size2", "inc2")


@dataclass(frozen=True)
class BicParams:
    """Window sizes and steps (in frames) plus the penalty weight.

    ``size1``/``inc1`` drive the coarse pass, ``size2``/``inc2`` the local
    refinement around each coarse boundary.
    """

    size1: int = 300
    inc1: int = 60
    size2: int = 200
    inc2: int = 20
    cpw: float = 1.5

    def __post_init__(self) -> None:
        for name in _INT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 1:
                raise ValueError(f"{name} must be at least 1, got {value}")
        if isinstance(self.cpw, bool) or not isinstance(self.cpw, (int, float)):
            raise ValueError(f"cpw must be a number, got {self.cpw!r}")
        if self.cpw < 0:
            raise ValueError(f"cpw must be non-negative, got {self.cpw}")

    def with_overrides(self, **overrides: Any) -> "BicParams":
        values = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **values)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def params_from_mapping(data: Mapping[str, Any] | None) -> BicParams:
    if not data:
        return BicParams()
    section = data.get(CONFIG_SECTION, data)
    if not isinstance(section, Mapping):
        raise ValueError(f"'{CONFIG_SECTION}' section must be a mapping")
    known = {field.name for field in fields(BicParams)}
    values: Dict[str, Any] = {}
    for key, value in section.items():
        if key not in known:
            continue
        values[key] = _coerce(key, value)
    return BicParams(**values)


def load_bic_config(path: Path | None) -> BicParams:
    data = yaml.safe_load(path.read_text()) if path and path.exists() else {}
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return params_from_mapping(data)


def _coerce(key: str, value: Any) -> Any:
    try:
        if key in _INT_FIELDS:
            as_float = float(value)
            if not as_float.is_integer():
                raise ValueError(f"{key} must be an integer, got {value!r}")
            return int(as_float)
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid value for {key}: {value!r}") from exc
