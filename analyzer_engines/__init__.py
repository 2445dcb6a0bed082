"""Build configured analysis engines from a registry and a YAML configuration."""

from .core import (
    AnalyzerConfig,
    AnalyzerError,
    ConfigError,
    Engine,
    EngineDescriptor,
    EngineSettings,
    Formatter,
    GitError,
    NullFormatter,
    parse_config,
)
from .engines import EngineRegistry
from .services import EnginesBuilder, IncludePathsBuilder

__all__ = [
    "AnalyzerConfig",
    "AnalyzerError",
    "ConfigError",
    "Engine",
    "EngineDescriptor",
    "EngineRegistry",
    "EngineSettings",
    "EnginesBuilder",
    "Formatter",
    "GitError",
    "IncludePathsBuilder",
    "NullFormatter",
    "parse_config",
]
