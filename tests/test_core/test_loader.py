"""Tests for simdiff.core.loader."""

from __future__ import annotations

import logging
from dataclasses import FrozenInstanceError
from typing import TYPE_CHECKING

import pytest

from simdiff.core.loader import ContentLoader, FilterConfig

if TYPE_CHECKING:
    from pathlib import Path


class TestFilterConfig:
    """Defaults load everything."""

    def test_defaults(self) -> None:
        config = FilterConfig()
        assert config.respect_gitignore is False
        assert config.include_hidden is True
        assert config.include_patterns == ()
        assert config.exclude_patterns == ()

    def test_frozen(self) -> None:
        config = FilterConfig()
        with pytest.raises(FrozenInstanceError):
            config.include_hidden = False  # type: ignore[misc]


class TestScan:
    """Recursive enumeration and filter layers."""

    def test_lists_all_files_sorted(self, sample_dirs: tuple[Path, Path]) -> None:
        left, _ = sample_dirs
        assert ContentLoader().scan(left) == (
            ".hidden",
            "half.txt",
            "left_only.bin",
            "same.txt",
            "shuffled.txt",
            "sub/nested.txt",
        )

    def test_directories_are_not_listed(self, tmp_path: Path) -> None:
        (tmp_path / "empty_dir").mkdir()
        (tmp_path / "file.txt").write_text("x")
        assert ContentLoader().scan(tmp_path) == ("file.txt",)

    def test_skip_hidden(self, sample_dirs: tuple[Path, Path]) -> None:
        left, _ = sample_dirs
        paths = ContentLoader(FilterConfig(include_hidden=False)).scan(left)
        assert ".hidden" not in paths
        assert "same.txt" in paths

    def test_skip_hidden_prunes_directories(self, tmp_path: Path) -> None:
        (tmp_path / ".git").mkdir()
        (tmp_path / ".git" / "HEAD").write_text("ref")
        (tmp_path / "a.txt").write_text("a")
        assert ContentLoader(FilterConfig(include_hidden=False)).scan(tmp_path) == ("a.txt",)

    def test_gitignore_ignored_by_default(self, sample_gitignore: Path) -> None:
        paths = ContentLoader().scan(sample_gitignore)
        assert "ignore.pyc" in paths
        assert "build/out.txt" in paths

    def test_gitignore_respected(self, sample_gitignore: Path) -> None:
        paths = ContentLoader(FilterConfig(respect_gitignore=True)).scan(sample_gitignore)
        assert paths == (".gitignore", "keep.py")

    def test_nested_gitignore_applies_to_its_directory(self, tmp_path: Path) -> None:
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / ".gitignore").write_text("*.log\n")
        (tmp_path / "sub" / "drop.log").write_text("x")
        (tmp_path / "keep.log").write_text("x")

        paths = ContentLoader(FilterConfig(respect_gitignore=True)).scan(tmp_path)

        assert "keep.log" in paths
        assert "sub/drop.log" not in paths

    def test_include_patterns(self, sample_dirs: tuple[Path, Path]) -> None:
        left, _ = sample_dirs
        paths = ContentLoader(FilterConfig(include_patterns=("*.bin",))).scan(left)
        assert paths == ("left_only.bin",)

    def test_exclude_patterns(self, sample_dirs: tuple[Path, Path]) -> None:
        left, _ = sample_dirs
        paths = ContentLoader(FilterConfig(exclude_patterns=("*.txt",))).scan(left)
        assert paths == (".hidden", "left_only.bin")

    def test_missing_root_raises(self, tmp_path: Path) -> None:
        with pytest.raises(NotADirectoryError):
            ContentLoader().scan(tmp_path / "missing")

    def test_file_root_raises(self, tmp_path: Path) -> None:
        target = tmp_path / "file.txt"
        target.write_text("x")
        with pytest.raises(NotADirectoryError):
            ContentLoader().scan(target)


class TestLoad:
    """Records carry root-joined paths and full contents."""

    def test_record_paths_and_contents(self, sample_dirs: tuple[Path, Path]) -> None:
        left, _ = sample_dirs
        records = ContentLoader().load(left)

        by_path = {r.path: r.contents for r in records}
        assert by_path[str(left / "same.txt")] == b"hello world\n"
        assert by_path[str(left / "sub" / "nested.txt")] == b"nested\n"
        assert by_path[str(left / "left_only.bin")] == b"\x00\x01"
        assert len(records) == 6

    def test_empty_file_loads(self, tmp_path: Path) -> None:
        (tmp_path / "empty").write_bytes(b"")
        (record,) = ContentLoader().load(tmp_path)
        assert record.contents == b""
        assert record.size == 0

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert ContentLoader().load(tmp_path) == ()


class TestReadFailures:
    """Listing or reading failures abort the load."""

    def test_unlistable_subdirectory_raises(self, unlistable_dir: Path) -> None:
        with pytest.raises(PermissionError):
            ContentLoader().scan(unlistable_dir.parent)

    def test_unreadable_file_raises(self, unreadable_file: Path) -> None:
        with pytest.raises(PermissionError):
            ContentLoader().load(unreadable_file.parent)

    def test_non_utf8_gitignore(self, tmp_path: Path) -> None:
        (tmp_path / ".gitignore").write_bytes(b"*.log\n# caf\xe9\n")
        (tmp_path / "drop.log").write_text("x")
        (tmp_path / "keep.txt").write_text("x")

        paths = ContentLoader(FilterConfig(respect_gitignore=True)).scan(tmp_path)

        assert paths == (".gitignore", "keep.txt")


class TestSymlinks:
    """Linked directories are skipped, linked files are read."""

    def test_linked_directory_is_skipped(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        target = tmp_path / "target"
        target.mkdir()
        (target / "inside.txt").write_text("x")
        root = tmp_path / "root"
        root.mkdir()
        (root / "real.txt").write_text("y")
        (root / "link").symlink_to(target, target_is_directory=True)

        with caplog.at_level(logging.WARNING, logger="simdiff"):
            paths = ContentLoader().scan(root)

        assert paths == ("real.txt",)
        assert "Skipping symlinked directory" in caplog.text

    def test_linked_file_is_read(self, tmp_path: Path) -> None:
        (tmp_path / "real.txt").write_text("data")
        (tmp_path / "alias.txt").symlink_to(tmp_path / "real.txt")

        records = ContentLoader().load(tmp_path)

        assert {r.path: r.contents for r in records} == {
            str(tmp_path / "alias.txt"): b"data",
            str(tmp_path / "real.txt"): b"data",
        }
