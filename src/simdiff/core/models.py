"""Data models for simdiff classification results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


class OutputMode(StrEnum):
    """Output format for rendering results."""

    rich = "rich"
    plain = "plain"
    json = "json"
    tui = "tui"


class MatchKind(StrEnum):
    """Classification tag for a matched (left, right) pair."""

    identical = "identical"
    similar = "similar"


class Section(StrEnum):
    """Report section a path or pair is listed under."""

    identical = "identical"
    similar = "similar"
    only_in_a = "only_in_a"
    only_in_b = "only_in_b"


@dataclass(frozen=True)
class FileRecord:
    """A file's path identifier and its full byte content."""

    path: str
    contents: bytes = field(repr=False)

    @property
    def size(self) -> int:
        """Length of the content in bytes."""
        return len(self.contents)


@dataclass(frozen=True)
class ComparisonResult:
    """Match between one left record and one right record.

    ``similarity`` is ``None`` for identical pairs and the percentage
    score (0-100) for similar pairs.
    """

    left_path: str
    right_path: str
    kind: MatchKind
    similarity: float | None = None


@dataclass(frozen=True)
class PartitionResult:
    """Three-way partition of two record sets for a given threshold.

    ``identical_pairs`` keeps one right path per left path: when a left
    file is byte-identical to several right files, the last one in right
    order is kept. ``similar_pairs`` keeps every match.
    """

    threshold: float
    identical_pairs: dict[str, str]
    similar_pairs: dict[str, dict[str, float]]
    only_in_a: tuple[str, ...]
    only_in_b: tuple[str, ...]

    @property
    def matched_a(self) -> frozenset[str]:
        """Left paths with at least one identical or similar match."""
        return frozenset(self.identical_pairs) | frozenset(self.similar_pairs)

    @property
    def matched_b(self) -> frozenset[str]:
        """Right paths with at least one identical or similar match."""
        similar = {b for matches in self.similar_pairs.values() for b in matches}
        return frozenset(self.identical_pairs.values()) | similar

    def iter_similar(self) -> Iterator[tuple[str, str, float]]:
        """Yield ``(left, right, score)`` for every similar pair."""
        for left, matches in self.similar_pairs.items():
            for right, score in matches.items():
                yield left, right, score


@dataclass(frozen=True)
class ReportEntry:
    """A single line of a report, tagged with its section."""

    section: Section
    left_path: str | None
    right_path: str | None
    similarity: float | None = None


@dataclass(frozen=True)
class PartitionStats:
    """Summary counts for a classification run."""

    total_left: int
    total_right: int
    identical: int
    similar: int
    only_in_a: int
    only_in_b: int

    @classmethod
    def from_partition(
        cls,
        partition: PartitionResult,
        *,
        total_left: int,
        total_right: int,
    ) -> PartitionStats:
        """Compute stats by counting the partition's groups."""
        return cls(
            total_left=total_left,
            total_right=total_right,
            identical=len(partition.identical_pairs),
            similar=sum(len(m) for m in partition.similar_pairs.values()),
            only_in_a=len(partition.only_in_a),
            only_in_b=len(partition.only_in_b),
        )


@dataclass(frozen=True)
class MatchReport:
    """Top-level result of comparing two directory trees."""

    left_root: Path
    right_root: Path
    partition: PartitionResult
    stats: PartitionStats

    def entries(self) -> Iterator[ReportEntry]:
        """Yield report lines in section order.

        Order: identical, similar, only in left, only in right.
        """
        for left, right in self.partition.identical_pairs.items():
            yield ReportEntry(Section.identical, left, right)
        for left, right, score in self.partition.iter_similar():
            yield ReportEntry(Section.similar, left, right, score)
        for left in self.partition.only_in_a:
            yield ReportEntry(Section.only_in_a, left, None)
        for right in self.partition.only_in_b:
            yield ReportEntry(Section.only_in_b, None, right)
