"""Compute unused dependencies, prompt for a selection, dispatch removal."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Callable

import click
import structlog

from depsweep import npm
from depsweep.config import Settings
from depsweep.manifest import Manifest, load_manifest
from depsweep.progress import RemovalSummary
from depsweep.remover import remove
from depsweep.scanner.files import collect_files
from depsweep.scanner.usage import dependency_used, script_used
from depsweep.selection import parse_selection

log = structlog.get_logger("depsweep.orchestrator")

PROMPT = (
    "\nEnter the numbers of the dependencies you want to remove "
    '(comma-separated), or type "all"'
)


@dataclass
class RunResult:
    """What one interactive run found and did."""

    unused: list[str] = field(default_factory=list)
    global_packages: list[str] = field(default_factory=list)
    local_removal: RemovalSummary | None = None
    global_removal: RemovalSummary | None = None
    invalid_input: bool = False


def find_unused(manifest: Manifest, settings: Settings) -> list[str]:
    """Declared dependencies referenced by neither source files nor scripts.

    Order follows the manifest: dependencies first, then devDependencies.
    """
    files = collect_files(settings.project_root)
    unused = [
        dep
        for dep in manifest.candidates()
        if not dependency_used(dep, files, settings.exclusions)
        and not script_used(dep, manifest.scripts)
    ]
    log.info(
        "orchestrator.scan_done",
        files=len(files),
        candidates=len(manifest.candidates()),
        unused=len(unused),
    )
    return unused


def print_listing(unused: list[str], global_packages: list[str]) -> None:
    click.echo("Unused dependencies found:")
    for i, dep in enumerate(unused, start=1):
        click.echo(f"{i}. {dep}")
    offset = len(unused)
    for i, dep in enumerate(global_packages, start=offset + 1):
        click.echo(f"{i}. {dep} (global)")


async def run(
    settings: Settings,
    prompt: Callable[[str], str],
    manifest: Manifest | None = None,
) -> RunResult:
    """The interactive flow behind the ``depsweep`` command.

    *prompt* receives the question and returns the user's answer. *manifest*
    is loaded from ``settings.manifest_path`` when not given, and
    :class:`~depsweep.exceptions.ManifestError` propagates to the caller.
    """
    if settings.startup_delay > 0:
        await asyncio.sleep(settings.startup_delay)

    if manifest is None:
        manifest = load_manifest(settings.manifest_path)

    result = RunResult()
    result.unused = find_unused(manifest, settings)
    if settings.include_global:
        result.global_packages = await npm.list_global(settings.npm_bin)

    if not result.unused and not result.global_packages:
        click.echo("No unused dependencies found.")
        return result

    print_listing(result.unused, result.global_packages)

    listing = result.unused + result.global_packages
    selection = parse_selection(prompt(PROMPT), len(listing))
    if selection is None:
        click.echo("Exiting because of invalid input.")
        result.invalid_input = True
        return result

    if selection.select_all:
        local, global_ = list(result.unused), list(result.global_packages)
    else:
        chosen = [listing[i] for i in selection.indices]
        global_ = [dep for dep in chosen if dep in result.global_packages]
        local = [dep for dep in chosen if dep not in result.global_packages]

    result.local_removal = await remove(local, npm_bin=settings.npm_bin)
    result.global_removal = await remove(global_, global_=True, npm_bin=settings.npm_bin)
    return result
