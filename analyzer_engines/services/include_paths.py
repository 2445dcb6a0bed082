"""Resolve the paths an engine is allowed to analyze."""

from __future__ import annotations

import logging
import os
from typing import List, Sequence, Tuple

from ..core.file_utils import GIT_DIR, is_excluded, normalize_path

logger = logging.getLogger(__name__)

ROOT_MARKER = "./"


class IncludePathsBuilder:
    """Compute the minimal list of path prefixes covering every included file.

    A directory whose entries are all included collapses to ``"dir/"``; the
    root collapses to ``"./"``. Partially excluded directories are expanded
    into their included children.
    """

    def __init__(
        self,
        exclude_paths: Sequence[str],
        requested_paths: Sequence[str] = (),
        root: str = ".",
    ) -> None:
        self.exclude_paths = list(exclude_paths)
        self.requested_paths = list(requested_paths)
        self.root = root
        self._excluded = {normalize_path(path) for path in self.exclude_paths}

    def build(self) -> List[str]:
        if not self.requested_paths:
            paths, _ = self._directory_paths(".")
            return paths

        results: List[str] = []
        for requested in self.requested_paths:
            for path in self._requested_paths(normalize_path(requested)):
                if path not in results:
                    results.append(path)
        return results

    def _requested_paths(self, path: str) -> List[str]:
        if path == ".":
            paths, _ = self._directory_paths(".")
            return paths
        if path == GIT_DIR or path.startswith(GIT_DIR + "/"):
            return []
        if is_excluded(path, self._excluded):
            logger.debug("Requested path %s is excluded", path)
            return []

        full = os.path.join(self.root, path)
        if os.path.isdir(full) and not os.path.islink(full):
            paths, _ = self._directory_paths(path)
            return paths
        if os.path.lexists(full):
            return [path]

        logger.warning("Requested path %s does not exist", path)
        return []

    def _directory_paths(self, rel_dir: str) -> Tuple[List[str], bool]:
        full_dir = os.path.join(self.root, rel_dir)
        collected: List[str] = []
        fully_included = True

        for name in sorted(os.listdir(full_dir)):
            if name == GIT_DIR:
                continue
            child = name if rel_dir == "." else f"{rel_dir}/{name}"
            if is_excluded(child, self._excluded):
                fully_included = False
                continue

            full_child = os.path.join(full_dir, name)
            if os.path.isdir(full_child) and not os.path.islink(full_child):
                sub_paths, sub_complete = self._directory_paths(child)
                if not sub_complete:
                    fully_included = False
                collected.extend(sub_paths)
            else:
                collected.append(child)

        if fully_included:
            marker = ROOT_MARKER if rel_dir == "." else f"{rel_dir}/"
            return [marker], True
        return collected, False
