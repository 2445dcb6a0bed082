"""Core abstractions for analyzer_engines."""

from .engine import Engine, Formatter, NullFormatter
from .errors import AnalyzerError, ConfigError, GitError
from .models import AnalyzerConfig, EngineDescriptor, EngineSettings, parse_config

__all__ = [
    "AnalyzerConfig",
    "AnalyzerError",
    "ConfigError",
    "Engine",
    "EngineDescriptor",
    "EngineSettings",
    "Formatter",
    "GitError",
    "NullFormatter",
    "parse_config",
]
