"""Decide whether a dependency is referenced by source files or scripts.

Detection is plain substring search over file text, not import parsing. It can
report a dependency as used because of a comment or string literal, and it
misses non-literal specifiers, re-exports and deep imports such as
``require('lodash/fp')``. Output compatibility depends on these exact
patterns, so they are kept as they are.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Mapping

import structlog

from depsweep.config import DEFAULT_EXCLUSIONS

log = structlog.get_logger("depsweep.scanner")

TYPES_PREFIX = "@types/"


def import_patterns(dependency: str) -> tuple[str, ...]:
    """Literal snippets whose presence in a file counts as a reference."""
    return (
        f"require('{dependency}')",
        f"import '{dependency}'",
        f'import "{dependency}"',
        f"from '{dependency}'",
        f'from "{dependency}"',
        f"import('{dependency}')",
        f'import("{dependency}")',
    )


def is_presumed_used(dependency: str, exclusions: Iterable[str] = DEFAULT_EXCLUSIONS) -> bool:
    """Type packages and excluded tooling never appear in imports but are still needed."""
    return dependency in exclusions or dependency.startswith(TYPES_PREFIX)


def _read(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        log.warning("usage.read_failed", path=str(path), error=str(e))
        return None


def dependency_used(
    dependency: str,
    files: Iterable[Path],
    exclusions: Iterable[str] = DEFAULT_EXCLUSIONS,
) -> bool:
    """Return True if *dependency* is presumed used or referenced by any of *files*.

    Stops at the first file that matches.
    """
    if is_presumed_used(dependency, exclusions):
        return True

    patterns = import_patterns(dependency)
    for path in files:
        content = _read(path)
        if content is None:
            continue
        if any(p in content for p in patterns):
            log.debug("usage.reference_found", dependency=dependency, path=str(path))
            return True
    return False


def script_used(dependency: str, scripts: Mapping[str, str]) -> bool:
    """Return True if any package.json script mentions *dependency*."""
    return any(dependency in command for command in scripts.values())
