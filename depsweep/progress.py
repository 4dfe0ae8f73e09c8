"""Progress tracking for a batch of uninstalls."""

from __future__ import annotations

import time
from dataclasses import dataclass, field


@dataclass
class PackageProgress:
    name: str
    status: str = "running"  # "running" | "removed" | "failed"
    start_time: float | None = None
    end_time: float | None = None
    error: str | None = None

    @property
    def duration(self) -> float | None:
        if self.start_time is not None and self.end_time is not None:
            return round(self.end_time - self.start_time, 2)
        return None


@dataclass
class RemovalSummary:
    """Outcome of one remove() call."""

    requested: int
    removed: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    elapsed: float = 0.0
    global_: bool = False


class RemovalTracker:
    """Track per-package status and total wall-clock time of a removal batch."""

    def __init__(self, requested: int, global_: bool = False) -> None:
        self.requested = requested
        self.global_ = global_
        self.packages: list[PackageProgress] = []
        self._by_name: dict[str, PackageProgress] = {}
        self._started = time.monotonic()

    def start(self, name: str) -> None:
        p = PackageProgress(name=name, start_time=time.monotonic())
        self.packages.append(p)
        self._by_name[name] = p

    def succeed(self, name: str) -> None:
        p = self._by_name.get(name)
        if p:
            p.status = "removed"
            p.end_time = time.monotonic()

    def fail(self, name: str, error: str) -> None:
        p = self._by_name.get(name)
        if p:
            p.status = "failed"
            p.end_time = time.monotonic()
            p.error = error

    @property
    def elapsed(self) -> float:
        return time.monotonic() - self._started

    def summary(self) -> RemovalSummary:
        return RemovalSummary(
            requested=self.requested,
            removed=[p.name for p in self.packages if p.status == "removed"],
            failed=[p.name for p in self.packages if p.status == "failed"],
            elapsed=self.elapsed,
            global_=self.global_,
        )
