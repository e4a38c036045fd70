"""Configuration helpers for Zarathustrov."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Optional, cast

import yaml

from .errors import ConfigError

DEFAULT_MAX_LENGTH = 280


@dataclass
class CorpusConfig:
    """Where the corpus lives and which byte window of it to learn from."""

    path: Optional[Path] = None
    start: int = 0
    end: Optional[int] = None
    snapshot: Optional[Path] = None

    def __post_init__(self) -> None:
        if self.path is not None:
            self.path = Path(self.path)
        if self.snapshot is not None:
            self.snapshot = Path(self.snapshot)


@dataclass
class GeneratorConfig:
    """Configuration for the text generator."""

    max_length: int = DEFAULT_MAX_LENGTH
    capitalize: list[str] = field(default_factory=lambda: ["i"])
    max_attempts: int = 100

    def __post_init__(self) -> None:
        if self.max_length <= 0:
            raise ConfigError("generator.max_length must be positive")
        if self.max_attempts <= 0:
            raise ConfigError("generator.max_attempts must be positive")
        self.capitalize = [word.lower() for word in self.capitalize]


@dataclass
class PosterConfig:
    """Connection details handed to the posting collaborator."""

    base_url: Optional[str] = None
    access_token: Optional[str] = None
    timeout: float = 10.0
    dry_run: bool = True


@dataclass
class ScheduleConfig:
    interval_minutes: float = 60.0


@dataclass
class BotConfig:
    """Top-level configuration for the posting bot."""

    corpus: CorpusConfig = field(default_factory=CorpusConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    poster: PosterConfig = field(default_factory=PosterConfig)
    schedule: ScheduleConfig = field(default_factory=ScheduleConfig)
    seed: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BotConfig:
        known = {"corpus", "generator", "poster", "schedule", "seed"}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration sections: {', '.join(unknown)}")
        try:
            return cls(
                corpus=CorpusConfig(**data.get("corpus", {})),
                generator=GeneratorConfig(**data.get("generator", {})),
                poster=PosterConfig(**data.get("poster", {})),
                schedule=ScheduleConfig(**data.get("schedule", {})),
                seed=data.get("seed"),
            )
        except TypeError as exc:
            raise ConfigError(str(exc)) from exc

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        for key in ("path", "snapshot"):
            value = payload["corpus"][key]
            payload["corpus"][key] = str(value) if value is not None else None
        return payload

    def save(self, path: Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf8") as handle:
            if path.suffix.lower() in {".yaml", ".yml"}:
                yaml.safe_dump(self.to_dict(), handle, sort_keys=False)
            else:
                json.dump(self.to_dict(), handle, indent=2)


def _load_yaml_or_json(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf8") as handle:
        text = handle.read()
    if path.suffix.lower() in {".yaml", ".yml"}:
        try:
            loaded = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
        if isinstance(loaded, Mapping):
            return cast(dict[str, Any], dict(loaded))
        if loaded is None:
            return {}
        msg = "Expected mapping at root of YAML configuration"
        raise ConfigError(msg)
    try:
        loaded_json = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc
    if isinstance(loaded_json, dict):
        return cast(dict[str, Any], loaded_json)
    msg = "Expected mapping at root of JSON configuration"
    raise ConfigError(msg)


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
) -> BotConfig:
    """Load configuration from disk and merge overrides."""

    overrides = list(overrides or [])
    if path is None:
        base: dict[str, Any] = {}
    else:
        base = _load_yaml_or_json(Path(path))

    merged = _merge_dict(base, overrides)
    return BotConfig.from_dict(merged)
