"""Filesystem and git helpers used while resolving engine paths."""

from __future__ import annotations

import glob
import logging
import os
import shutil
import stat
import subprocess
from typing import Iterable, List

from .errors import GitError

logger = logging.getLogger(__name__)

GIT_DIR = ".git"
GITIGNORE = ".gitignore"


def readable_by_all(path: str) -> bool:
    """Return True when the file is world readable."""
    return bool(os.stat(path).st_mode & stat.S_IROTH)


def relative_path(root: str, path: str) -> str:
    """Express `path` relative to `root` with forward slashes."""
    rel = os.path.relpath(path, root)
    return rel.replace(os.sep, "/")


def normalize_path(path: str) -> str:
    """Strip a leading ``./`` and any trailing slash."""
    while path.startswith("./"):
        path = path[2:]
    return path.rstrip("/") or "."


def is_git_work_tree(root: str) -> bool:
    if shutil.which("git") is None:
        logger.warning("git executable not found; ignore rules are not applied")
        return False
    result = subprocess.run(
        ["git", "rev-parse", "--is-inside-work-tree"],
        cwd=root,
        capture_output=True,
        text=True,
    )
    return result.returncode == 0 and result.stdout.strip() == "true"


def git_ignored_paths(root: str) -> List[str]:
    """List untracked files under `root` that the .gitignore rules ignore.

    Returns an empty list when `root` has no .gitignore or is not inside a
    git work tree. Paths are relative to `root`, in git's order.
    """
    if not os.path.isfile(os.path.join(root, GITIGNORE)):
        return []
    if not is_git_work_tree(root):
        return []

    result = subprocess.run(
        [
            "git",
            "ls-files",
            "-z",
            "--others",
            "--ignored",
            f"--exclude-per-directory={GITIGNORE}",
        ],
        cwd=root,
        capture_output=True,
    )
    if result.returncode != 0:
        stderr = result.stderr.decode(errors="replace").strip()
        raise GitError(f"git ls-files failed in {root}: {stderr}")
    # Decode the way os.listdir does so names compare equal.
    return [os.fsdecode(entry) for entry in result.stdout.split(b"\0") if entry]


def expand_patterns(root: str, patterns: Iterable[str]) -> List[str]:
    """Expand glob patterns relative to `root`.

    Directories come back with a trailing slash. Matches inside .git are
    dropped.
    """
    matches: List[str] = []
    seen = set()
    for pattern in patterns:
        pattern = normalize_path(pattern)
        for match in sorted(glob.glob(os.path.join(glob.escape(root), pattern), recursive=True)):
            rel = relative_path(root, match)
            if rel == "." or rel == GIT_DIR or rel.startswith(GIT_DIR + "/"):
                continue
            if os.path.isdir(match) and not os.path.islink(match):
                rel += "/"
            if rel not in seen:
                seen.add(rel)
                matches.append(rel)
    return matches


def is_excluded(path: str, excluded: "set[str]") -> bool:
    """True when `path` or one of its parent directories is in `excluded`.

    `excluded` must hold normalized paths (see `normalize_path`).
    """
    path = normalize_path(path)
    if path in excluded:
        return True
    parts = path.split("/")
    return any("/".join(parts[:index]) in excluded for index in range(1, len(parts)))


def unreadable_files(root: str, excluded: "set[str]") -> List[str]:
    """Walk `root` and list regular files that are not readable by all."""
    results: List[str] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
        rel_dir = relative_path(root, dirpath)
        dirnames[:] = sorted(
            name
            for name in dirnames
            if name != GIT_DIR
            and not is_excluded(_join(rel_dir, name), excluded)
        )
        for name in sorted(filenames):
            rel = _join(rel_dir, name)
            if is_excluded(rel, excluded):
                continue
            full = os.path.join(dirpath, name)
            if os.path.islink(full) or not os.path.isfile(full):
                continue
            if not readable_by_all(full):
                logger.warning("Excluding %s: file is not readable by all users", rel)
                results.append(rel)
    return results


def _join(rel_dir: str, name: str) -> str:
    return name if rel_dir == "." else f"{rel_dir}/{name}"


def _raise(error: OSError) -> None:
    raise error
