"""Classification engine: pairwise comparison and partition aggregation."""

from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor
from dataclasses import dataclass
from itertools import repeat
from typing import TYPE_CHECKING

from simdiff.core.hashing import DEFAULT_HASH_ALGO, content_digest, validate_hash_algo
from simdiff.core.models import ComparisonResult, MatchKind, PartitionResult
from simdiff.core.similarity import Histogram, byte_histogram, histogram_similarity

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

    from simdiff.core.models import FileRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Fingerprint:
    """Per-record digest and histogram, computed once before pairing."""

    path: str
    digest: str
    histogram: Histogram
    size: int


class PartitionAccumulator:
    """Collects comparison results for one unit of work.

    An accumulator is owned by a single worker. Partial accumulators are
    combined with :meth:`merge` in left-record order, which keeps the
    last-wins rule for identical matches intact.
    """

    def __init__(self) -> None:
        self.identical: dict[str, str] = {}
        self.similar: dict[str, dict[str, float]] = {}
        self.matched_left: set[str] = set()
        self.matched_right: set[str] = set()

    def add(self, result: ComparisonResult) -> None:
        """Record a single match."""
        if result.kind == MatchKind.identical:
            self.identical[result.left_path] = result.right_path
        elif result.similarity is not None:
            self.similar.setdefault(result.left_path, {})[result.right_path] = result.similarity
        self.matched_left.add(result.left_path)
        self.matched_right.add(result.right_path)

    def merge(self, other: PartitionAccumulator) -> None:
        """Fold another accumulator into this one."""
        self.identical.update(other.identical)
        for left, matches in other.similar.items():
            self.similar.setdefault(left, {}).update(matches)
        self.matched_left |= other.matched_left
        self.matched_right |= other.matched_right

    def build(
        self,
        threshold: float,
        left_paths: Iterable[str],
        right_paths: Iterable[str],
    ) -> PartitionResult:
        """Freeze the accumulated matches into a PartitionResult."""
        return PartitionResult(
            threshold=threshold,
            identical_pairs=dict(self.identical),
            similar_pairs={left: dict(m) for left, m in self.similar.items()},
            only_in_a=tuple(p for p in left_paths if p not in self.matched_left),
            only_in_b=tuple(p for p in right_paths if p not in self.matched_right),
        )


class Classifier:
    """Classifies every (left, right) record pair against a threshold.

    A pair is identical when the content digests match. Otherwise the
    byte-histogram similarity is computed and the pair is similar when
    the score is at least ``threshold``. The threshold is a percentage and
    is not range-checked: negative values make every pair match and values
    above 100 leave only identical pairs.
    """

    def __init__(
        self,
        threshold: float,
        *,
        hash_algo: str = DEFAULT_HASH_ALGO,
        workers: int = 1,
    ) -> None:
        """Initialize the classifier.

        Args:
            threshold: Minimum similarity percentage for a similar pair.
            hash_algo: Hash algorithm for exact-match detection.
            workers: Number of threads computing fingerprints and of
                processes sharing the pairwise loop.

        Raises:
            ValueError: If ``hash_algo`` is unknown or ``workers < 1``.
        """
        if workers < 1:
            msg = f"workers must be at least 1, got {workers}"
            raise ValueError(msg)
        self._threshold = threshold
        self._hash_algo = validate_hash_algo(hash_algo)
        self._workers = workers

    @property
    def threshold(self) -> float:
        return self._threshold

    def compare_pair(self, left: FileRecord, right: FileRecord) -> ComparisonResult | None:
        """Classify a single pair of records.

        Returns:
            A ComparisonResult, or None when the pair is neither identical
            nor similar enough.
        """
        return _match(self._fingerprint(left), self._fingerprint(right), self._threshold)

    def iter_matches(
        self,
        left_records: Sequence[FileRecord],
        right_records: Sequence[FileRecord],
    ) -> Iterator[ComparisonResult]:
        """Yield every match in left-major, right-minor order."""
        left_prints = [self._fingerprint(r) for r in left_records]
        right_prints = [self._fingerprint(r) for r in right_records]
        yield from _iter_matches(left_prints, right_prints, self._threshold)

    def classify(
        self,
        left_records: Sequence[FileRecord],
        right_records: Sequence[FileRecord],
    ) -> PartitionResult:
        """Partition both record sets into identical, similar and unique groups.

        With more than one worker, fingerprints are computed on a thread
        pool and the pairwise loop runs in a process pool, one contiguous
        chunk of left records per task.

        Args:
            left_records: Records of set A, in traversal order.
            right_records: Records of set B, in traversal order.

        Returns:
            The PartitionResult for this classifier's threshold.
        """
        left_prints = self._fingerprint_all(left_records)
        right_prints = self._fingerprint_all(right_records)
        logger.info(
            "Classifying %d x %d pairs (threshold=%s, workers=%d)",
            len(left_prints),
            len(right_prints),
            self._threshold,
            self._workers,
        )

        chunks = self._split(left_prints)
        if len(chunks) <= 1:
            accumulator = _classify_chunk(left_prints, right_prints, self._threshold)
        else:
            accumulator = PartitionAccumulator()
            with ProcessPoolExecutor(max_workers=len(chunks)) as executor:
                partials = executor.map(
                    _classify_chunk,
                    chunks,
                    repeat(right_prints),
                    repeat(self._threshold),
                )
                for partial in partials:
                    accumulator.merge(partial)

        partition = accumulator.build(
            self._threshold,
            (r.path for r in left_records),
            (r.path for r in right_records),
        )
        logger.info(
            "Found %d identical, %d similar, %d left-only, %d right-only",
            len(partition.identical_pairs),
            sum(len(m) for m in partition.similar_pairs.values()),
            len(partition.only_in_a),
            len(partition.only_in_b),
        )
        return partition

    def _fingerprint_all(self, records: Sequence[FileRecord]) -> list[_Fingerprint]:
        """Fingerprint records in order, threaded when workers > 1."""
        if self._workers == 1 or len(records) < 2:
            return [self._fingerprint(r) for r in records]
        with ThreadPoolExecutor(max_workers=self._workers) as executor:
            return list(executor.map(self._fingerprint, records))

    def _split(self, prints: list[_Fingerprint]) -> list[list[_Fingerprint]]:
        """Split left fingerprints into contiguous chunks, one per worker."""
        if self._workers == 1 or len(prints) < 2:
            return [prints]
        size = -(-len(prints) // self._workers)
        chunks = [prints[i : i + size] for i in range(0, len(prints), size)]
        logger.debug("Split %d left records into %d chunks", len(prints), len(chunks))
        return chunks

    def _fingerprint(self, record: FileRecord) -> _Fingerprint:
        return _Fingerprint(
            path=record.path,
            digest=content_digest(record.contents, self._hash_algo),
            histogram=byte_histogram(record.contents),
            size=record.size,
        )


# Module-level so process pool workers can unpickle them.
def _match(left: _Fingerprint, right: _Fingerprint, threshold: float) -> ComparisonResult | None:
    """Apply the identical-then-similar rule to one pair."""
    if left.digest == right.digest:
        return ComparisonResult(left.path, right.path, MatchKind.identical)

    score = histogram_similarity(left.histogram, left.size, right.histogram, right.size)
    if score >= threshold:
        return ComparisonResult(left.path, right.path, MatchKind.similar, score)
    return None


def _iter_matches(
    left_prints: Iterable[_Fingerprint],
    right_prints: Sequence[_Fingerprint],
    threshold: float,
) -> Iterator[ComparisonResult]:
    """Yield matches in left-major, right-minor order."""
    for left in left_prints:
        for right in right_prints:
            result = _match(left, right, threshold)
            if result is not None:
                yield result


def _classify_chunk(
    left_prints: Sequence[_Fingerprint],
    right_prints: Sequence[_Fingerprint],
    threshold: float,
) -> PartitionAccumulator:
    """Compare a slice of left fingerprints against all right ones."""
    accumulator = PartitionAccumulator()
    for result in _iter_matches(left_prints, right_prints, threshold):
        accumulator.add(result)
    return accumulator
