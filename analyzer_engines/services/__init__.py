"""Services resolving engine configuration."""

from .engines_builder import EnginesBuilder
from .include_paths import IncludePathsBuilder

__all__ = ["EnginesBuilder", "IncludePathsBuilder"]
