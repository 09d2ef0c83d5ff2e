from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FuzlerConfig:
    """Tunable thresholds for the similarity scorer."""

    hamming_window: int = 2
    short_string_band: int = 64
    chunk_min: int = 50
    chunk_max: int = 100
    chunk_query_multiplier: int = 3
    window_pad_ratio: float = 0.30
    window_max_query_tokens: int = 20
    window_max_tokens: int = 30
    token_weight: float = 0.7
    char_weight: float = 0.3
    round_precision: int = 2
    case_sensitive: bool = True

    def __post_init__(self) -> None:
        for spec in fields(self):
            value = getattr(self, spec.name)
            setattr(self, spec.name, _coerce_field(spec.name, spec.type, value))

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _coerce_field(name: str, annotation: Any, value: Any) -> Any:
    """Check a value against its field annotation; numeric thresholds must be non-negative."""
    kind = getattr(annotation, "__name__", annotation)
    if kind == "bool":
        if not isinstance(value, bool):
            raise TypeError(f"{name} must be a boolean, got {value!r}.")
        return value
    # bool is an int subclass, so reject it explicitly for numeric fields.
    if isinstance(value, bool):
        raise TypeError(f"{name} must be a number, got {value!r}.")
    if kind == "int":
        if not isinstance(value, int):
            raise TypeError(f"{name} must be an integer, got {value!r}.")
    elif kind == "float":
        if not isinstance(value, (int, float)):
            raise TypeError(f"{name} must be a number, got {value!r}.")
        value = float(value)
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value!r}.")
    return value


DEFAULT_CONFIG = FuzlerConfig()


def config_from_dict(data: Mapping[str, Any] | None) -> FuzlerConfig:
    """
    Build a validated FuzlerConfig from a mapping of threshold overrides.

    Unknown keys are logged and skipped; badly typed or negative values raise
    TypeError / ValueError.
    """
    if data is None:
        return FuzlerConfig()
    known = {spec.name for spec in fields(FuzlerConfig)}
    unknown = sorted(str(key) for key in data if key not in known)
    if unknown:
        logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
    return FuzlerConfig(**{key: data[key] for key in data if key in known})


def config_from_yaml(path: str | Path) -> FuzlerConfig:
    """Load threshold overrides from a YAML mapping, naming the file in any error."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError(f"{path}: configuration YAML must define a mapping.")
    try:
        return config_from_dict(parsed)
    except (TypeError, ValueError) as exc:
        raise type(exc)(f"{path}: {exc}") from exc


def load_config(path: str | Path | None = None) -> FuzlerConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return FuzlerConfig()
    return config_from_yaml(path)


def resolve_config(config: FuzlerConfig | None) -> FuzlerConfig:
    return DEFAULT_CONFIG if config is None else config
