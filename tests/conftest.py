"""Shared test fixtures for simdiff."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def sample_dirs(tmp_path: Path) -> tuple[Path, Path]:
    """Create two directory trees with known matches.

    Only the listed pairs overlap in byte values, so at a 50% threshold:

        left/same.txt        == right/copy.txt        identical
        left/sub/nested.txt  == right/sub/nested.txt  identical
        left/.hidden         == right/.hidden         identical
        left/shuffled.txt    ~  right/dcba.txt        100% (same bytes, reordered)
        left/half.txt        ~  right/xxyy.txt        50%
        left/left_only.bin                            only in left
        right/right_only.log                          only in right
    """
    left = tmp_path / "left"
    right = tmp_path / "right"
    (left / "sub").mkdir(parents=True)
    (right / "sub").mkdir(parents=True)

    (left / "same.txt").write_text("hello world\n")
    (right / "copy.txt").write_text("hello world\n")

    (left / "shuffled.txt").write_text("abcd")
    (right / "dcba.txt").write_text("dcba")

    (left / "half.txt").write_text("xxxx")
    (right / "xxyy.txt").write_text("xxyy")

    (left / "left_only.bin").write_bytes(b"\x00\x01")
    (right / "right_only.log").write_text("zzzzzzzzzz")

    (left / "sub" / "nested.txt").write_text("nested\n")
    (right / "sub" / "nested.txt").write_text("nested\n")

    (left / ".hidden").write_text("HIDDEN")
    (right / ".hidden").write_text("HIDDEN")

    return left, right


@pytest.fixture
def sample_gitignore(tmp_path: Path) -> Path:
    """Create a directory with a .gitignore file and ignored content."""
    root = tmp_path / "repo"
    (root / "build").mkdir(parents=True)
    (root / ".gitignore").write_text("*.pyc\nbuild/\n")
    (root / "keep.py").write_text("keep\n")
    (root / "ignore.pyc").write_text("ignore\n")
    (root / "build" / "out.txt").write_text("built\n")
    return root


@pytest.fixture
def unlistable_dir(sample_dirs: tuple[Path, Path], monkeypatch: pytest.MonkeyPatch) -> Path:
    """Add left/locked/secret.txt and make listing left/locked fail."""
    left, _ = sample_dirs
    locked = left / "locked"
    locked.mkdir()
    (locked / "secret.txt").write_text("secret")

    real_scandir = os.scandir

    def scandir(path: str = ".") -> Iterator[os.DirEntry[str]]:
        if Path(path) == locked:
            raise PermissionError(13, "Permission denied", str(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", scandir)
    return locked


@pytest.fixture
def unreadable_file(sample_dirs: tuple[Path, Path], monkeypatch: pytest.MonkeyPatch) -> Path:
    """Make reading left/same.txt fail."""
    left, _ = sample_dirs
    target = left / "same.txt"
    real_read_bytes = Path.read_bytes

    def read_bytes(self: Path) -> bytes:
        if self == target:
            raise PermissionError(13, "Permission denied", str(self))
        return real_read_bytes(self)

    monkeypatch.setattr(Path, "read_bytes", read_bytes)
    return target
