"""Byte-histogram similarity metric."""

from __future__ import annotations

from collections import Counter

BYTE_VALUES = 256

Histogram = tuple[int, ...]


def byte_histogram(contents: bytes) -> Histogram:
    """Count occurrences of each byte value.

    Returns:
        A 256-tuple where index ``v`` holds the number of ``v`` bytes.
    """
    counts = Counter(contents)
    return tuple(counts.get(value, 0) for value in range(BYTE_VALUES))


def histogram_similarity(
    left: Histogram,
    left_size: int,
    right: Histogram,
    right_size: int,
) -> float:
    """Score the byte-multiset overlap of two histograms as a percentage.

    The score is the sum over all byte values of the smaller count,
    divided by the longer of the two sizes, times 100. Byte order does not
    matter: any permutation of a sequence scores 100 against it.

    Args:
        left: Histogram of the left content.
        left_size: Length of the left content in bytes.
        right: Histogram of the right content.
        right_size: Length of the right content in bytes.

    Returns:
        Similarity in the range ``[0.0, 100.0]``. Two empty inputs score
        ``0.0``.
    """
    max_size = max(left_size, right_size)
    if max_size == 0:
        return 0.0
    common = sum(map(min, left, right))
    return (common / max_size) * 100.0


def byte_similarity(left: bytes, right: bytes) -> float:
    """Score two byte sequences with :func:`histogram_similarity`."""
    return histogram_similarity(
        byte_histogram(left),
        len(left),
        byte_histogram(right),
        len(right),
    )
