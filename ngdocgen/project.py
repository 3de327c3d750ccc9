"""Resolve a project's include patterns to an ordered list of source files."""

from __future__ import annotations

import glob
import os
from pathlib import Path
from typing import List

from .logging import get_logger
from .models import Project

SOURCE_SUFFIXES = (".ts", ".tsx", ".mts", ".cts")

_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    "node_modules",
}

logger = get_logger("project")


def resolve_source_files(project: Project) -> List[Path]:
    """Return the union of files matched by ``project.include``.

    Patterns are resolved relative to the project root in declaration order;
    matches of one pattern are sorted and a file keeps the position of the
    first pattern that matched it.
    """
    seen: set[Path] = set()
    files: List[Path] = []
    for pattern in project.include:
        matches = _expand_pattern(project.root, pattern)
        logger.debug("Pattern %s matched %d files", pattern, len(matches))
        for path in matches:
            if path in seen:
                continue
            seen.add(path)
            files.append(path)
    return files


def relative_to_root(root: Path, path: Path) -> Path:
    # Includes such as "../shared/**/*.ts" may leave the project root.
    return Path(os.path.relpath(path, root))


def _expand_pattern(root: Path, pattern: str) -> List[Path]:
    # Only the pattern is glob syntax; the root may contain "[", "*" or "?".
    if (root / pattern).is_dir():
        pattern = f"{pattern.rstrip('/')}/**/*"
    results: List[Path] = []
    for match in sorted(glob.glob(pattern, root_dir=root, recursive=True)):
        path = (root / match).resolve()
        if not path.is_file() or not path.name.endswith(SOURCE_SUFFIXES):
            continue
        if _is_excluded(relative_to_root(root, path)):
            continue
        results.append(path)
    return results


def _is_excluded(rel_path: Path) -> bool:
    return any(part in _EXCLUDED_DIRS for part in rel_path.parts[:-1])


__all__ = ["SOURCE_SUFFIXES", "relative_to_root", "resolve_source_files"]
