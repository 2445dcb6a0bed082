"""Engine definition for analyzer_engines."""

from __future__ import annotations

import json
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Mapping, Protocol, Union

from .models import EngineDescriptor

RegistryEntry = Union[EngineDescriptor, Mapping[str, Any]]


class Formatter(Protocol):
    """Sink receiving lifecycle and output events from engines."""

    def started(self) -> None: ...

    def write(self, data: str) -> None: ...

    def run(self) -> None: ...

    def finished(self) -> None: ...

    def close(self) -> None: ...

    def engine_running(self, engine: "Engine"):
        """Context manager wrapping a single engine run."""
        ...


class NullFormatter:
    """Formatter that discards every event."""

    def started(self) -> None:
        pass

    def write(self, data: str) -> None:
        pass

    def run(self) -> None:
        pass

    def finished(self) -> None:
        pass

    def close(self) -> None:
        pass

    @contextmanager
    def engine_running(self, engine: "Engine") -> Iterator[None]:
        yield


class Engine:
    """A configured analysis engine ready to be handed to a runner."""

    def __init__(
        self,
        name: str,
        metadata: RegistryEntry,
        code_path: str,
        config: Dict[str, Any],
        formatter: Formatter,
    ) -> None:
        self.name = name
        self.metadata = metadata
        self.code_path = code_path
        self.config = config
        self.formatter = formatter

    @property
    def image(self) -> str:
        if isinstance(self.metadata, EngineDescriptor):
            return self.metadata.image
        return self.metadata["image"]

    def config_json(self) -> str:
        """Serialize the engine configuration as the engine receives it."""
        return json.dumps(self.config, sort_keys=True)

    def __repr__(self) -> str:
        return f"Engine(name={self.name!r}, image={self.image!r})"
