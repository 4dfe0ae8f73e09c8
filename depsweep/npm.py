"""npm subprocess helpers — global listing and uninstall."""

from __future__ import annotations

import asyncio
import json

import structlog

from depsweep.exceptions import PackageManagerError

log = structlog.get_logger("depsweep.npm")


async def run_npm(args: list[str], npm_bin: str = "npm") -> str:
    """Run ``npm <args>`` and return its decoded stdout.

    Raises :class:`PackageManagerError` if the binary cannot be started or
    exits non-zero. No timeout is applied.
    """
    cmd = [npm_bin, *args]
    log.debug("npm.exec", cmd=cmd)
    try:
        proc = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise PackageManagerError(cmd, None, str(e)) from e

    stdout, stderr = await proc.communicate()
    if proc.returncode != 0:
        raise PackageManagerError(
            cmd, proc.returncode, stderr.decode(errors="replace").strip()
        )
    return stdout.decode(errors="replace")


async def list_global(npm_bin: str = "npm") -> list[str]:
    """Names of globally installed top-level packages.

    Any failure is logged and yields an empty list.
    """
    try:
        output = await run_npm(["ls", "-g", "--depth=0", "--json"], npm_bin)
        data = json.loads(output)
        dependencies = data.get("dependencies") or {}
        if not isinstance(dependencies, dict):
            raise ValueError("'dependencies' is not an object")
    except (PackageManagerError, ValueError, AttributeError) as e:
        log.error("npm.list_global_failed", error=str(e))
        return []
    return list(dependencies)


async def uninstall(dependency: str, global_: bool = False, npm_bin: str = "npm") -> None:
    """Uninstall one package; raises :class:`PackageManagerError` on failure."""
    args = ["uninstall", dependency]
    if global_:
        args.append("-g")
    await run_npm(args, npm_bin)
