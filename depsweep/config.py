"""Runtime settings, read from DEPSWEEP_* environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path

# Tooling that is expected never to appear in an import statement.
DEFAULT_EXCLUSIONS: tuple[str, ...] = ("typescript",)

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    project_root: Path = field(default_factory=Path.cwd)
    npm_bin: str = "npm"
    startup_delay: float = 0.5
    exclusions: tuple[str, ...] = DEFAULT_EXCLUSIONS
    include_global: bool = True

    @property
    def manifest_path(self) -> Path:
        return self.project_root / "package.json"

    @classmethod
    def from_env(cls, **overrides) -> Settings:
        """Build settings from the environment, then apply non-None *overrides*.

        Supported variables:
            DEPSWEEP_NPM             — package manager binary (default: npm)
            DEPSWEEP_STARTUP_DELAY   — seconds to wait before scanning (default: 0.5)
            DEPSWEEP_EXCLUSIONS      — extra comma-separated names always treated as used
            DEPSWEEP_INCLUDE_GLOBAL  — list global packages too (default: true)
        """
        extra = os.environ.get("DEPSWEEP_EXCLUSIONS", "")
        exclusions = DEFAULT_EXCLUSIONS + tuple(
            name.strip() for name in extra.split(",") if name.strip()
        )
        raw_delay = os.environ.get("DEPSWEEP_STARTUP_DELAY", "0.5")
        try:
            delay = max(float(raw_delay), 0.0)
        except ValueError:
            delay = 0.5
        include_global = (
            os.environ.get("DEPSWEEP_INCLUDE_GLOBAL", "true").strip().lower() in _TRUTHY
        )

        settings = cls(
            npm_bin=os.environ.get("DEPSWEEP_NPM", "npm"),
            startup_delay=delay,
            exclusions=exclusions,
            include_global=include_global,
        )
        given = {k: v for k, v in overrides.items() if v is not None}
        if "project_root" in given:
            given["project_root"] = Path(given["project_root"]).resolve()
        if "exclusions" in given:
            given["exclusions"] = settings.exclusions + tuple(given["exclusions"])
        return replace(settings, **given)
