"""Tests for the folder scanner."""

from __future__ import annotations

import errno
import os
from pathlib import Path

import pytest

from prunedirs.core.scanner import normalize_names, scan
from prunedirs.errors import InvalidArguments, RootInaccessible, RootNotFound


class TestNormalizeNames:
    def test_keeps_order_and_drops_duplicates(self):
        assert normalize_names(["obj", "bin", "obj"]) == ("obj", "bin")

    def test_empty_list(self):
        with pytest.raises(InvalidArguments):
            normalize_names([])

    @pytest.mark.parametrize("name", ["", ".", "..", "a/b"])
    def test_rejects_non_folder_names(self, name):
        with pytest.raises(InvalidArguments):
            normalize_names([name])


class TestScan:
    def test_finds_exact_matches(self, project_tree):
        result = scan(project_tree, ["bin", "obj"])

        assert result.matches == (
            project_tree / "proj" / "bin",
            project_tree / "proj" / "obj",
        )
        assert all(p.is_absolute() for p in result.matches)

    def test_no_partial_matches(self, project_tree):
        (project_tree / "binaries").mkdir()
        (project_tree / "mybin").mkdir()
        (project_tree / "bin.old").mkdir()

        result = scan(project_tree, ["bin"])

        assert [p.name for p in result.matches] == ["bin"]

    def test_ignores_files_with_matching_name(self, tmp_path):
        (tmp_path / "bin").write_text("not a folder")
        assert not scan(tmp_path, ["bin"])

    def test_traversal_order_is_depth_first_sorted(self, tmp_path):
        for rel in ("b/x/bin", "a/bin", "a/z/deep/bin", "c/bin"):
            (tmp_path / rel).mkdir(parents=True)

        result = scan(tmp_path, ["bin"])

        assert [p.relative_to(tmp_path).as_posix() for p in result.matches] == [
            "a/bin",
            "a/z/deep/bin",
            "b/x/bin",
            "c/bin",
        ]

    def test_does_not_descend_into_matches(self, tmp_path):
        (tmp_path / "bin" / "obj").mkdir(parents=True)
        (tmp_path / "bin" / "bin").mkdir()

        result = scan(tmp_path, ["bin", "obj"])

        assert result.matches == (tmp_path / "bin",)

    def test_root_matching_a_name_is_the_only_match(self, tmp_path):
        root = tmp_path / "bin"
        (root / "src" / "bin").mkdir(parents=True)

        result = scan(root, ["bin"])

        assert result.matches == (root,)

    def test_root_stat_denied(self, tmp_path, monkeypatch):
        locked = tmp_path / "locked"
        (locked / "inner").mkdir(parents=True)
        real_stat = os.stat

        def fake_stat(path, *args, **kwargs):
            if str(path).startswith(str(locked)):
                raise PermissionError(errno.EACCES, "Permission denied", str(path))
            return real_stat(path, *args, **kwargs)

        monkeypatch.setattr("os.stat", fake_stat)
        with pytest.raises(RootInaccessible):
            scan(locked / "inner", ["bin"])

    def test_empty_root(self):
        with pytest.raises(InvalidArguments):
            scan("", ["bin"])

    def test_hidden_dirs_are_included(self, tmp_path):
        (tmp_path / ".cache" / "bin").mkdir(parents=True)
        result = scan(tmp_path, ["bin"])
        assert result.matches == (tmp_path / ".cache" / "bin",)

    def test_does_not_follow_symlinks(self, tmp_path):
        outside = tmp_path / "outside"
        (outside / "bin").mkdir(parents=True)
        root = tmp_path / "root"
        root.mkdir()
        (root / "link").symlink_to(outside, target_is_directory=True)
        (root / "bin").symlink_to(outside / "bin", target_is_directory=True)

        assert not scan(root, ["bin"])

    @pytest.mark.skipif(os.path.normcase("A") == "a", reason="case-insensitive path convention")
    def test_case_sensitive_on_posix(self, tmp_path):
        (tmp_path / "Bin").mkdir()
        assert not scan(tmp_path, ["bin"])

    def test_records_names_and_root(self, project_tree):
        result = scan(project_tree, ["obj", "obj"])
        assert result.names == ("obj",)
        assert result.root == project_tree

    def test_default_root_is_cwd(self, project_tree, monkeypatch):
        monkeypatch.chdir(project_tree / "proj")
        result = scan(None, ["obj"])
        assert result.matches == (Path.cwd() / "obj",)

    def test_missing_root(self, tmp_path):
        with pytest.raises(RootNotFound):
            scan(tmp_path / "nope", ["bin"])

    def test_root_is_a_file(self, tmp_path):
        target = tmp_path / "file.txt"
        target.write_text("x")
        with pytest.raises(RootNotFound, match="not a directory"):
            scan(target, ["bin"])

    def test_unreadable_root(self, tmp_path, monkeypatch):
        def fake_scandir(path):
            raise PermissionError(13, "Permission denied", path)

        monkeypatch.setattr("os.scandir", fake_scandir)
        with pytest.raises(RootInaccessible):
            scan(tmp_path, ["bin"])

    def test_unreadable_subdir_is_skipped(self, tmp_path, monkeypatch):
        (tmp_path / "locked" / "bin").mkdir(parents=True)
        (tmp_path / "open" / "bin").mkdir(parents=True)
        real_scandir = os.scandir

        def fake_scandir(path):
            if os.path.basename(path) == "locked":
                raise PermissionError(13, "Permission denied", path)
            return real_scandir(path)

        monkeypatch.setattr("os.scandir", fake_scandir)
        result = scan(tmp_path, ["bin"])

        assert result.matches == (tmp_path / "open" / "bin",)
        assert result.skipped_dirs == 1
