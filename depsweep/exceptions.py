"""Custom exceptions for depsweep."""


class DepsweepError(Exception):
    """Base exception for all depsweep errors."""


class ManifestError(DepsweepError):
    """Raised when package.json is missing, unreadable or malformed."""


class PackageManagerError(DepsweepError):
    """Raised when a package-manager command cannot be spawned or exits non-zero."""

    def __init__(self, cmd: list[str], returncode: int | None, stderr: str):
        self.cmd = cmd
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(
            f"{' '.join(cmd)} failed (exit {returncode}): {stderr}"
        )
