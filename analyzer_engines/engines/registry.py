"""Simple registry for available analysis engines."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterable, Iterator, Optional

from ..core.models import EngineDescriptor


class EngineRegistry(Mapping):
    """Holds named engine descriptors in registration order."""

    def __init__(self, engines: Optional[Dict[str, EngineDescriptor]] = None) -> None:
        self._engines: Dict[str, EngineDescriptor] = {}
        for name, descriptor in (engines or {}).items():
            self.register(name, descriptor)

    @classmethod
    def from_dict(cls, data: Mapping) -> "EngineRegistry":
        """Build a registry from ``{name: {"image": ..., ...}}``."""
        registry = cls()
        for name, entry in data.items():
            registry.register(name, EngineDescriptor.from_dict(entry))
        return registry

    def register(
        self, name: str, descriptor: EngineDescriptor, *, override: bool = False
    ) -> None:
        if name in self._engines and not override:
            raise ValueError(f"Engine {name} already registered")
        self._engines[name] = descriptor

    def get(self, name: str, default: Any = None) -> Optional[EngineDescriptor]:
        """Return the descriptor for `name`, or `default` when unregistered."""
        return self._engines.get(name, default)

    def names(self) -> Iterable[str]:
        return self._engines.keys()

    def __getitem__(self, name: str) -> EngineDescriptor:
        try:
            return self._engines[name]
        except KeyError as exc:
            raise KeyError(f"Engine {name} is not registered") from exc

    def __iter__(self) -> Iterator[str]:
        return iter(self._engines)

    def __len__(self) -> int:
        return len(self._engines)
