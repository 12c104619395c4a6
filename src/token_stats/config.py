from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, List, Mapping, MutableMapping

import yaml


@dataclass(slots=True)
class SegmenterSettings:
    """Configuration block for the sentence-boundary capability."""

    name: str = "punkt"
    locale: str = "en_US"
    extra_abbreviations: List[str] = field(default_factory=list)


@dataclass(slots=True)
class TokenStatsConfig:
    """Configuration options for a token statistics run."""

    default_output_path: str = "output.txt"
    encoding: str = "utf-8"
    parallel: bool = False
    slash_exceptions: List[str] = field(default_factory=lambda: ["w"])
    segmenter: SegmenterSettings = field(default_factory=SegmenterSettings)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(TokenStatsConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "slash_exceptions" in kwargs:
        kwargs["slash_exceptions"] = [str(item) for item in kwargs["slash_exceptions"]]
    if "segmenter" in data:
        segmenter_value = data["segmenter"]
        if isinstance(segmenter_value, SegmenterSettings):
            kwargs["segmenter"] = segmenter_value
        elif isinstance(segmenter_value, Mapping):
            kwargs["segmenter"] = _build_segmenter_settings(segmenter_value)
        else:
            kwargs.pop("segmenter")
    return kwargs


def _build_segmenter_settings(data: Mapping[str, Any]) -> SegmenterSettings:
    segmenter_allowed = {field.name for field in fields(SegmenterSettings)}
    filtered = {key: data[key] for key in data if key in segmenter_allowed}
    return SegmenterSettings(**filtered)


def config_from_dict(data: Mapping[str, Any] | None) -> TokenStatsConfig:
    """Build a TokenStatsConfig from a dictionary-like input."""
    if data is None:
        return TokenStatsConfig()
    return TokenStatsConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> TokenStatsConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> TokenStatsConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return TokenStatsConfig()
    return config_from_yaml(path)
