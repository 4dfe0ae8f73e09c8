"""Sequential uninstall of a list of packages."""

from __future__ import annotations

import click
import structlog

from depsweep import npm
from depsweep.exceptions import PackageManagerError
from depsweep.progress import RemovalSummary, RemovalTracker

log = structlog.get_logger("depsweep.remover")


async def remove(
    dependencies: list[str],
    global_: bool = False,
    npm_bin: str = "npm",
) -> RemovalSummary | None:
    """Uninstall *dependencies* one at a time, in order.

    A failed uninstall is logged and reported, and the batch moves on. Returns
    ``None`` without touching npm when *dependencies* is empty.
    """
    if not dependencies:
        return None

    tracker = RemovalTracker(len(dependencies), global_=global_)
    for dep in dependencies:
        tracker.start(dep)
        click.echo(f"Uninstalling {dep}...")
        try:
            await npm.uninstall(dep, global_=global_, npm_bin=npm_bin)
        except PackageManagerError as e:
            tracker.fail(dep, e.stderr)
            log.debug(
                "remover.uninstall_failed",
                dependency=dep,
                global_=global_,
                returncode=e.returncode,
            )
            click.echo(f"Error uninstalling {dep}: {e.stderr}", err=True)
            continue
        tracker.succeed(dep)
        click.echo(f"Uninstalled {dep} ✅")

    summary = tracker.summary()
    scope = "global " if global_ else ""
    click.echo(
        f"Processed {summary.requested} {scope}"
        f"{'dependency' if summary.requested == 1 else 'dependencies'} "
        f"in {summary.elapsed:.2f}s"
    )
    for p in tracker.packages:
        log.debug(
            "remover.package_done",
            dependency=p.name,
            status=p.status,
            duration=p.duration,
            error=p.error,
        )
    log.info(
        "remover.batch_done",
        requested=summary.requested,
        removed=len(summary.removed),
        failed=len(summary.failed),
        global_=global_,
    )
    return summary
