"""Configuration helpers for newsbabble."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Optional, cast

from .utils.io import load_yaml_or_json, save_yaml_or_json


@dataclass
class TokenizerConfig:
    """Configuration for splitting raw text into tokens."""

    max_token_length: int = 256
    news_filter: bool = False


@dataclass
class IngestConfig:
    """Configuration for reading input sources."""

    filter_command: Optional[str] = None
    encoding: str = "utf-8"
    progress_interval: int = 1000


@dataclass
class GeneratorConfig:
    """Configuration for article generation."""

    count: int = 10
    seed: Optional[int] = None


@dataclass
class OutputConfig:
    """Configuration for the wrapped text output."""

    margin: int = 75
    separator: str = "\n\f\n"


@dataclass
class BabbleConfig:
    """Top-level configuration."""

    tokenizer: TokenizerConfig = field(default_factory=TokenizerConfig)
    ingest: IngestConfig = field(default_factory=IngestConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    verbose: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BabbleConfig:
        return cls(
            tokenizer=TokenizerConfig(**data.get("tokenizer", {})),
            ingest=IngestConfig(**data.get("ingest", {})),
            generator=GeneratorConfig(**data.get("generator", {})),
            output=OutputConfig(**data.get("output", {})),
            verbose=bool(data.get("verbose", False)),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def save(self, path: Path) -> None:
        save_yaml_or_json(Path(path), self.to_dict())


def _merge_dict(base: dict[str, Any], overrides: Iterable[dict[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = dict(base)
    for override in overrides:
        for key, value in override.items():
            existing = result.get(key)
            if isinstance(value, dict) and isinstance(existing, dict):
                nested = _merge_dict(cast(dict[str, Any], existing), [value])
                result[key] = nested
            else:
                result[key] = value
    return result


def load_config(
    path: Optional[Path] = None,
    overrides: Optional[Iterable[dict[str, Any]]] = None,
) -> BabbleConfig:
    """Load configuration from disk and merge overrides."""

    overrides = list(overrides or [])
    if path is None:
        base: dict[str, Any] = {}
    else:
        base = load_yaml_or_json(Path(path))

    merged = _merge_dict(base, overrides)
    return BabbleConfig.from_dict(merged)
