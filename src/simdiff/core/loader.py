"""Content loader: walks a directory tree and reads file records."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from fnmatch import fnmatch
from pathlib import Path, PurePosixPath
from typing import NoReturn

from pathspec import GitIgnoreSpec

from simdiff.core.models import FileRecord

logger = logging.getLogger(__name__)

GITIGNORE_FILENAME = ".gitignore"


@dataclass(frozen=True)
class FilterConfig:
    """Immutable rules deciding which files of a tree are loaded.

    The defaults load every regular file. Rules apply in order:
    hidden -> gitignore -> include -> exclude.

    Symbolic links to directories are not followed; they are skipped with
    a warning. Symbolic links to files are read through.
    """

    respect_gitignore: bool = False
    include_hidden: bool = True
    include_patterns: tuple[str, ...] = ()
    exclude_patterns: tuple[str, ...] = ()


class _IgnoreRules:
    """``.gitignore`` specs collected while walking, keyed by directory."""

    def __init__(self) -> None:
        self._specs: dict[PurePosixPath, GitIgnoreSpec] = {}

    def collect(self, directory: Path, rel_dir: PurePosixPath) -> None:
        gitignore = directory / GITIGNORE_FILENAME
        if gitignore.is_file():
            text = gitignore.read_text(encoding="utf-8", errors="replace")
            self._specs[rel_dir] = GitIgnoreSpec.from_lines(text.splitlines())

    def ignores(self, rel_path: PurePosixPath, *, is_dir: bool) -> bool:
        """Check the path against the spec of every enclosing directory."""
        suffix = "/" if is_dir else ""
        for base, spec in self._specs.items():
            if base == PurePosixPath("."):
                local = rel_path
            elif base in rel_path.parents:
                local = rel_path.relative_to(base)
            else:
                continue
            if spec.match_file(local.as_posix() + suffix):
                return True
        return False


class ContentLoader:
    """Enumerates and reads the regular files under a root directory."""

    def __init__(self, config: FilterConfig | None = None) -> None:
        """Initialize with an optional filter configuration.

        Args:
            config: Filtering rules. Defaults to FilterConfig() if None.
        """
        self._config = config or FilterConfig()

    def scan(self, root: Path) -> tuple[str, ...]:
        """List files under ``root`` that pass the filter rules.

        Returns:
            Sorted tuple of POSIX-style paths relative to ``root``.

        Raises:
            NotADirectoryError: If root does not exist or is not a directory.
            OSError: If a directory under root cannot be listed.
        """
        if not root.is_dir():
            msg = f"Not a directory: {root}"
            raise NotADirectoryError(msg)

        rules = _IgnoreRules()
        found: list[str] = []

        for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
            rel_dir = PurePosixPath(Path(dirpath).relative_to(root).as_posix())
            if self._config.respect_gitignore:
                rules.collect(Path(dirpath), rel_dir)

            dirnames[:] = sorted(
                d
                for d in dirnames
                if not _is_linked_dir(Path(dirpath, d))
                and self._keep(rel_dir / d, rules, is_dir=True)
            )
            found.extend(
                (rel_dir / name).as_posix()
                for name in filenames
                if self._keep(rel_dir / name, rules, is_dir=False)
            )

        found.sort()
        return tuple(found)

    def load(self, root: Path) -> tuple[FileRecord, ...]:
        """Read every scanned file under ``root`` into a FileRecord.

        Record paths are ``root`` joined with the relative path.

        Raises:
            NotADirectoryError: If root does not exist or is not a directory.
            OSError: If any file cannot be read.
        """
        records: list[FileRecord] = []
        for rel_path in self.scan(root):
            full_path = root / rel_path
            logger.debug("Reading %s", full_path)
            records.append(FileRecord(path=str(full_path), contents=full_path.read_bytes()))
        logger.info("Loaded %d files from %s", len(records), root)
        return tuple(records)

    def _keep(self, rel_path: PurePosixPath, rules: _IgnoreRules, *, is_dir: bool) -> bool:
        """Decide whether a directory is descended into or a file is kept."""
        config = self._config
        if not config.include_hidden and rel_path.name.startswith("."):
            return False
        if config.respect_gitignore and rules.ignores(rel_path, is_dir=is_dir):
            return False
        if is_dir:
            return True

        posix = rel_path.as_posix()
        if config.include_patterns and not any(fnmatch(posix, p) for p in config.include_patterns):
            return False
        return not any(fnmatch(posix, p) for p in config.exclude_patterns)


def _raise(exc: OSError) -> NoReturn:
    raise exc


def _is_linked_dir(path: Path) -> bool:
    if path.is_symlink():
        logger.warning("Skipping symlinked directory %s", path)
        return True
    return False
