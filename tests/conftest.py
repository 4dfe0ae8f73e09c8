"""Shared pytest fixtures for depsweep tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from depsweep.config import Settings


@pytest.fixture
def make_project(tmp_path: Path):
    """Build a project directory from a package.json dict and a {relpath: text} map."""

    def _make(package: dict | None = None, files: dict[str, str] | None = None) -> Path:
        root = tmp_path / "project"
        root.mkdir(exist_ok=True)
        if package is not None:
            (root / "package.json").write_text(json.dumps(package))
        for rel, text in (files or {}).items():
            target = root / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(text)
        return root

    return _make


@pytest.fixture
def settings_for():
    def _settings(root: Path, **overrides) -> Settings:
        params = {"project_root": root, "startup_delay": 0.0, "include_global": True}
        params.update(overrides)
        return Settings(**params)

    return _settings
