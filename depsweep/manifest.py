"""package.json loader."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from depsweep.exceptions import ManifestError


def _frozen(data: dict[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(data))


@dataclass(frozen=True)
class Manifest:
    """The parts of package.json that depsweep reads.

    Mappings keep the manifest's key order; nothing here is ever written back.
    """

    scripts: Mapping[str, str] = field(default_factory=lambda: _frozen({}))
    dependencies: Mapping[str, str] = field(default_factory=lambda: _frozen({}))
    dev_dependencies: Mapping[str, str] = field(default_factory=lambda: _frozen({}))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Manifest:
        if not isinstance(data, dict):
            raise ManifestError("package.json must contain a JSON object")
        return cls(
            scripts=_frozen(_section(data, "scripts")),
            dependencies=_frozen(_section(data, "dependencies")),
            dev_dependencies=_frozen(_section(data, "devDependencies")),
        )

    def candidates(self) -> list[str]:
        """Dependency names followed by devDependency names, duplicates kept."""
        return [*self.dependencies, *self.dev_dependencies]


def _section(data: dict[str, Any], key: str) -> dict[str, str]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ManifestError(f"'{key}' in package.json must be an object")
    return {str(k): str(v) for k, v in value.items()}


def load_manifest(path: Path) -> Manifest:
    """Read and parse *path* (a package.json file).

    Raises :class:`ManifestError` if the file is missing or is not valid JSON.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ManifestError(f"no package.json found at {path}") from None
    except OSError as e:
        raise ManifestError(f"cannot read {path}: {e}") from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ManifestError(f"invalid JSON in {path}: {e}") from e

    return Manifest.from_dict(data)
