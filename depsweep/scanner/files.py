"""Collect JavaScript/TypeScript source files under a project root."""

from __future__ import annotations

import os
from pathlib import Path

import structlog

log = structlog.get_logger("depsweep.scanner")

SOURCE_EXTENSIONS = frozenset({".js", ".ts", ".jsx", ".tsx", ".mjs", ".cjs"})

# Matched as substrings of the full directory path, so ".git" also hides ".github".
_SKIP_MARKERS = ("node_modules", ".vscode", ".git")


def _skipped(path: str) -> bool:
    return any(marker in path for marker in _SKIP_MARKERS)


def collect_files(root: Path | str) -> list[Path]:
    """Walk *root* depth-first and return every source file found.

    Symbolic links are never followed, and each real directory is entered at
    most once, so link cycles and bind mounts cannot loop the walk. A
    directory that cannot be listed is logged and contributes no files.

    The order of the result is unspecified.
    """
    results: list[Path] = []
    visited: set[str] = set()
    stack: list[str] = [os.fspath(root)]

    while stack:
        directory = stack.pop()
        real = os.path.realpath(directory)
        if real in visited:
            continue
        visited.add(real)

        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            log.warning("files.read_dir_failed", path=directory, error=str(e))
            continue

        for entry in entries:
            path = os.path.join(directory, entry.name)
            try:
                if entry.is_symlink():
                    continue
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError as e:
                log.warning("files.stat_failed", path=path, error=str(e))
                continue

            if is_dir:
                if not _skipped(path):
                    stack.append(path)
            elif os.path.splitext(entry.name)[1] in SOURCE_EXTENSIONS:
                results.append(Path(path))

    log.debug("files.collected", root=os.fspath(root), count=len(results))
    return results
