"""Tests for source file collection."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from depsweep.scanner import files as files_mod
from depsweep.scanner.files import SOURCE_EXTENSIONS, collect_files


def _names(paths: list[Path], root: Path) -> set[str]:
    return {p.relative_to(root).as_posix() for p in paths}


class TestExtensions:
    def test_all_source_extensions_collected(self, make_project):
        root = make_project(files={f"src/a{ext}": "" for ext in SOURCE_EXTENSIONS})
        found = _names(collect_files(root), root)
        assert found == {f"src/a{ext}" for ext in SOURCE_EXTENSIONS}

    def test_other_files_ignored(self, make_project):
        root = make_project(
            files={
                "README.md": "",
                "style.css": "",
                "src/index.js": "",
                "src/data.json": "",
                "src/types.d.ts": "",
            }
        )
        assert _names(collect_files(root), root) == {"src/index.js", "src/types.d.ts"}

    def test_returns_paths_under_root(self, make_project):
        root = make_project(files={"deep/er/still/x.tsx": ""})
        (found,) = collect_files(root)
        assert isinstance(found, Path)
        assert str(found).startswith(str(root))

    def test_accepts_str_root(self, make_project):
        root = make_project(files={"a.js": ""})
        assert _names(collect_files(str(root)), root) == {"a.js"}


class TestSkippedDirectories:
    @pytest.mark.parametrize("skip", ["node_modules", ".vscode", ".git"])
    def test_skip_marker_directory(self, make_project, skip):
        root = make_project(files={f"{skip}/pkg/index.js": "", "index.js": ""})
        assert _names(collect_files(root), root) == {"index.js"}

    def test_marker_as_substring_of_path(self, make_project):
        root = make_project(
            files={
                ".github/workflows/check.js": "",
                "old_node_modules_backup/lib.js": "",
                "src/ok.js": "",
            }
        )
        assert _names(collect_files(root), root) == {"src/ok.js"}

    def test_nested_dependency_dir_skipped(self, make_project):
        root = make_project(files={"packages/a/node_modules/dep/index.js": "", "packages/a/index.js": ""})
        assert _names(collect_files(root), root) == {"packages/a/index.js"}

    def test_files_with_marker_in_name_are_kept(self, make_project):
        # Only directories are filtered by marker.
        root = make_project(files={"src/.gitkeep.js": ""})
        assert _names(collect_files(root), root) == {"src/.gitkeep.js"}


class TestSymlinks:
    def test_symlink_cycle_terminates(self, make_project):
        root = make_project(files={"src/a.js": ""})
        os.symlink(root, root / "src" / "loop")
        os.symlink(root / "src", root / "src" / "self")
        assert _names(collect_files(root), root) == {"src/a.js"}

    def test_symlinked_file_skipped(self, make_project, tmp_path):
        root = make_project(files={"src/real.js": ""})
        outside = tmp_path / "outside.js"
        outside.write_text("")
        os.symlink(outside, root / "src" / "linked.js")
        assert _names(collect_files(root), root) == {"src/real.js"}

    def test_symlinked_directory_not_followed(self, make_project, tmp_path):
        root = make_project(files={"index.js": ""})
        other = tmp_path / "elsewhere"
        other.mkdir()
        (other / "hidden.js").write_text("")
        os.symlink(other, root / "vendor")
        assert _names(collect_files(root), root) == {"index.js"}

    def test_root_visited_once(self, make_project):
        root = make_project(files={"a.js": ""})
        assert len(collect_files(root)) == 1


class TestReadErrors:
    def test_unreadable_directory_is_skipped(self, make_project, monkeypatch):
        root = make_project(files={"ok/a.js": "", "locked/b.js": ""})
        real_scandir = os.scandir

        def fake_scandir(path):
            if os.fspath(path).endswith("locked"):
                raise PermissionError(13, "Permission denied", os.fspath(path))
            return real_scandir(path)

        monkeypatch.setattr(files_mod.os, "scandir", fake_scandir)
        assert _names(collect_files(root), root) == {"ok/a.js"}

    def test_missing_root_yields_nothing(self, tmp_path):
        assert collect_files(tmp_path / "does-not-exist") == []
