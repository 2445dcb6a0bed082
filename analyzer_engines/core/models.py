"""Data models shared across analyzer_engines components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

import yaml

from .errors import ConfigError


@dataclass(frozen=True)
class EngineDescriptor:
    """Registry metadata describing how an engine is run."""

    image: str
    description: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def __getitem__(self, key: str) -> Any:
        if key == "image":
            return self.image
        if key == "description":
            return self.description
        return self.extra[key]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EngineDescriptor":
        if "image" not in data:
            raise ConfigError("Engine registry entry is missing an image")
        extra = {k: v for k, v in data.items() if k not in ("image", "description")}
        return cls(
            image=str(data["image"]),
            description=str(data.get("description", "")),
            extra=extra,
        )


@dataclass
class EngineSettings:
    """One block of the `engines` section, kept as written."""

    name: str
    raw: Dict[str, Any] = field(default_factory=dict)

    @property
    def enabled(self) -> bool:
        return self.raw.get("enabled", True) is not False

    @property
    def config(self) -> Optional[Any]:
        return self.raw.get("config")

    def as_dict(self) -> Dict[str, Any]:
        """Return a shallow copy of the raw block."""
        return dict(self.raw)


@dataclass
class AnalyzerConfig:
    """Parsed analysis configuration."""

    engines: Dict[str, EngineSettings] = field(default_factory=dict)
    exclude_paths: List[str] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)

    def iter_engines(self):
        """Iterate engine settings in declaration order."""
        return self.engines.values()

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "AnalyzerConfig":
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ConfigError("Configuration must be a mapping")

        raw_engines = data.get("engines") or {}
        if not isinstance(raw_engines, Mapping):
            raise ConfigError("The engines section must be a mapping")

        engines: Dict[str, EngineSettings] = {}
        for name, block in raw_engines.items():
            if block is None:
                block = {}
            if not isinstance(block, Mapping):
                raise ConfigError(f"Engine {name} must be configured with a mapping")
            engines[str(name)] = EngineSettings(name=str(name), raw=dict(block))

        exclude_paths = data.get("exclude_paths") or []
        if not isinstance(exclude_paths, list) or not all(
            isinstance(pattern, str) for pattern in exclude_paths
        ):
            raise ConfigError("exclude_paths must be a list of strings")

        extra = {k: v for k, v in data.items() if k not in ("engines", "exclude_paths")}
        return cls(engines=engines, exclude_paths=list(exclude_paths), extra=extra)


def parse_config(text: str) -> AnalyzerConfig:
    """Parse YAML configuration text."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML configuration: {exc}") from exc
    return AnalyzerConfig.from_dict(data)
