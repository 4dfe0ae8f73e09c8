"""Tests for RemovalTracker."""

from __future__ import annotations

import time

from depsweep.progress import RemovalTracker


class TestRemovalTracker:
    def test_basic_flow(self):
        tracker = RemovalTracker(2)
        tracker.start("a")
        tracker.succeed("a")
        tracker.start("b")
        tracker.fail("b", "EACCES")

        summary = tracker.summary()
        assert summary.requested == 2
        assert summary.removed == ["a"]
        assert summary.failed == ["b"]
        assert tracker.packages[1].error == "EACCES"

    def test_duration(self):
        tracker = RemovalTracker(1)
        tracker.start("a")
        time.sleep(0.01)
        tracker.succeed("a")

        p = tracker.packages[0]
        assert p.duration is not None
        assert p.duration >= 0.01

    def test_running_has_no_duration(self):
        tracker = RemovalTracker(1)
        tracker.start("a")
        assert tracker.packages[0].status == "running"
        assert tracker.packages[0].duration is None

    def test_unknown_name_ignored(self):
        tracker = RemovalTracker(1)
        tracker.succeed("ghost")
        tracker.fail("ghost", "x")
        assert tracker.packages == []

    def test_elapsed_non_negative(self):
        tracker = RemovalTracker(0, global_=True)
        summary = tracker.summary()
        assert summary.elapsed >= 0
        assert summary.global_ is True
