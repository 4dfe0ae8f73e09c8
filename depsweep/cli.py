"""CLI entry point: depsweep.

Usage:
    depsweep                      # scan the current directory
    depsweep path/to/project
    depsweep --no-global --exclude eslint --exclude prettier
"""

from __future__ import annotations

import asyncio
import sys

import click

from depsweep.config import Settings
from depsweep.core.logging import setup_logging
from depsweep.exceptions import ManifestError
from depsweep.orchestrator import run


def _prompt(question: str) -> str:
    return click.prompt(question, default="", show_default=False, prompt_suffix=": ")


@click.command()
@click.argument(
    "project_dir",
    required=False,
    type=click.Path(exists=True, file_okay=False),
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
@click.option(
    "--delay",
    type=float,
    default=None,
    help="Seconds to wait before scanning (env: DEPSWEEP_STARTUP_DELAY)",
)
@click.option("--npm", "npm_bin", default=None, help="npm executable (env: DEPSWEEP_NPM)")
@click.option(
    "--global/--no-global",
    "include_global",
    default=None,
    help="Also list globally installed packages (env: DEPSWEEP_INCLUDE_GLOBAL)",
)
@click.option(
    "--exclude",
    "exclusions",
    multiple=True,
    help="Dependency to always treat as used; repeatable",
)
def main(
    project_dir: str | None,
    verbose: bool,
    delay: float | None,
    npm_bin: str | None,
    include_global: bool | None,
    exclusions: tuple[str, ...],
) -> None:
    """Find unused dependencies in package.json and uninstall the ones you pick."""
    setup_logging("DEBUG" if verbose else None)

    settings = Settings.from_env(
        project_root=project_dir or ".",
        startup_delay=delay,
        npm_bin=npm_bin,
        include_global=include_global,
        exclusions=exclusions or None,
    )

    try:
        asyncio.run(run(settings, _prompt))
    except ManifestError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
