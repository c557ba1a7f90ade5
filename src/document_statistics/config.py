from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml


@dataclass(slots=True)
class StatisticsConfig:
    """Configuration options for the document statistics engine."""

    sentence_finder: str = "unicode"
    # Selected paragraphs only count once a document pass has allocated their cache entry.
    selection_paragraphs_require_cache: bool = True
    log_level: str = "WARNING"

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def config_from_dict(data: Mapping[str, Any] | None) -> StatisticsConfig:
    """Build a StatisticsConfig from a dictionary-like input."""
    if data is None:
        return StatisticsConfig()
    allowed = {field.name for field in fields(StatisticsConfig)}
    return StatisticsConfig(**{key: data[key] for key in data if key in allowed})


def config_from_yaml(path: str | Path) -> StatisticsConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> StatisticsConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return StatisticsConfig()
    return config_from_yaml(path)
