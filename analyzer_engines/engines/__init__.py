"""Engine registry."""

from .registry import EngineRegistry

__all__ = ["EngineRegistry"]
