"""Comparison orchestrator: load both trees, classify, summarize."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from simdiff.core.engine import Classifier
from simdiff.core.hashing import DEFAULT_HASH_ALGO
from simdiff.core.loader import ContentLoader, FilterConfig
from simdiff.core.models import MatchReport, PartitionStats

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class Comparator:
    """Runs the full pipeline for two directory trees.

    Chains: ContentLoader (left) -> ContentLoader (right) -> Classifier.
    Any loader failure aborts the run before classification starts, so no
    partial report is ever produced.
    """

    def __init__(
        self,
        threshold: float,
        *,
        filter_config: FilterConfig | None = None,
        hash_algo: str = DEFAULT_HASH_ALGO,
        workers: int = 1,
    ) -> None:
        """Initialize the comparator.

        Args:
            threshold: Minimum similarity percentage for a similar pair.
            filter_config: Filtering rules. Defaults to FilterConfig() if None.
            hash_algo: Hash algorithm for exact-match detection.
            workers: Parallel workers used for classification.

        Raises:
            ValueError: If ``hash_algo`` is unknown or ``workers < 1``.
        """
        self._loader = ContentLoader(filter_config or FilterConfig())
        self._classifier = Classifier(threshold, hash_algo=hash_algo, workers=workers)

    def compare(self, left: Path, right: Path) -> MatchReport:
        """Compare two directory trees.

        Args:
            left: Root of the left tree (set A).
            right: Root of the right tree (set B).

        Returns:
            MatchReport with the partition and summary stats.

        Raises:
            FileNotFoundError: If left or right does not exist.
            NotADirectoryError: If left or right is not a directory.
            OSError: If a file cannot be read.
        """
        self._validate_dirs(left, right)

        left_records = self._loader.load(left)
        right_records = self._loader.load(right)
        partition = self._classifier.classify(left_records, right_records)
        stats = PartitionStats.from_partition(
            partition,
            total_left=len(left_records),
            total_right=len(right_records),
        )
        logger.info("Compared %s and %s", left, right)

        return MatchReport(
            left_root=left,
            right_root=right,
            partition=partition,
            stats=stats,
        )

    @staticmethod
    def _validate_dirs(left: Path, right: Path) -> None:
        """Validate that both paths exist and are directories."""
        for label, path in (("Left", left), ("Right", right)):
            if not path.exists():
                msg = f"{label} path does not exist: {path}"
                raise FileNotFoundError(msg)
            if not path.is_dir():
                msg = f"{label} path is not a directory: {path}"
                raise NotADirectoryError(msg)
