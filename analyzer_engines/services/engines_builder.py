"""Turn a registry and an analysis configuration into configured engines."""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from ..core import file_utils
from ..core.engine import Engine, Formatter, NullFormatter, RegistryEntry
from ..core.models import AnalyzerConfig, EngineSettings
from .include_paths import IncludePathsBuilder

logger = logging.getLogger(__name__)

EngineClass = Callable[..., Any]


class EnginesBuilder:
    """Resolve per-engine configuration and construct one engine per entry.

    Engines missing from the registry are skipped, as are engines whose
    configuration sets ``enabled: false``. Path lists are recomputed on
    every call to `run`.
    """

    def __init__(
        self,
        *,
        registry: Mapping[str, RegistryEntry],
        config: Union[AnalyzerConfig, Mapping[str, Any], None],
        container_label: Optional[str],
        source_dir: str,
        requested_paths: Sequence[str] = (),
        root: Optional[str] = None,
    ) -> None:
        self.registry = registry
        if not isinstance(config, AnalyzerConfig):
            config = AnalyzerConfig.from_dict(config)
        self.config = config
        self.container_label = container_label
        self.source_dir = source_dir
        self.requested_paths = list(requested_paths)
        self._root = root

    @property
    def root(self) -> str:
        """Local directory scanned for files, ignore rules and permissions."""
        if self._root is not None:
            return self._root
        if os.path.isdir(self.source_dir):
            return self.source_dir
        return "."

    def run(
        self,
        engine_class: EngineClass = Engine,
        formatter: Optional[Formatter] = None,
    ) -> List[Any]:
        if formatter is None:
            formatter = NullFormatter()

        engines: List[Any] = []
        for settings in self._selected_engines():
            engine_config = self._engine_config(settings)
            engines.append(
                engine_class(
                    settings.name,
                    self.registry[settings.name],
                    self.source_dir,
                    engine_config,
                    formatter,
                )
            )
        return engines

    def _selected_engines(self) -> List[EngineSettings]:
        selected: List[EngineSettings] = []
        for settings in self.config.iter_engines():
            if settings.name not in self.registry:
                logger.warning("Engine %s is not in the registry, skipping", settings.name)
                continue
            if not settings.enabled:
                logger.debug("Engine %s is disabled, skipping", settings.name)
                continue
            selected.append(settings)
        return selected

    def _engine_config(self, settings: EngineSettings) -> Dict[str, Any]:
        config = settings.as_dict()
        # Engines read a config file reference as a plain string.
        nested = config.get("config")
        if isinstance(nested, Mapping) and list(nested.keys()) == ["file"]:
            config["config"] = nested["file"]

        for key in ("exclude_paths", "include_paths"):
            if key in config:
                logger.debug(
                    "Engine %s declares %s; the computed value replaces it",
                    settings.name,
                    key,
                )

        exclude_paths = self._exclude_paths()
        config["exclude_paths"] = exclude_paths
        config["include_paths"] = self._include_paths(exclude_paths)
        return config

    def _exclude_paths(self) -> List[str]:
        root = self.root
        paths: List[str] = []
        paths.extend(file_utils.expand_patterns(root, self.config.exclude_paths))
        paths.extend(file_utils.git_ignored_paths(root))

        excluded = {file_utils.normalize_path(path) for path in paths}
        paths.extend(file_utils.unreadable_files(root, excluded))
        return _unique(paths)

    def _include_paths(self, exclude_paths: List[str]) -> List[str]:
        builder = IncludePathsBuilder(
            list(exclude_paths), list(self.requested_paths), root=self.root
        )
        return list(builder.build())


def _unique(paths: Sequence[str]) -> List[str]:
    seen = set()
    results: List[str] = []
    for path in paths:
        if path not in seen:
            seen.add(path)
            results.append(path)
    return results
