"""Tests for simdiff.core.similarity."""

from __future__ import annotations

import pytest

from simdiff.core.similarity import (
    BYTE_VALUES,
    byte_histogram,
    byte_similarity,
    histogram_similarity,
)

_SAMPLES: tuple[bytes, ...] = (
    b"",
    b"a",
    b"aaaa",
    b"aabb",
    b"hello world\n",
    b"\x00\xff\x00\xff\x10",
    bytes(range(256)),
    b"the quick brown fox jumps over the lazy dog",
)


class TestByteHistogram:
    """Verify the fixed 256-bucket histogram."""

    def test_has_one_bucket_per_byte_value(self) -> None:
        assert len(byte_histogram(b"abc")) == BYTE_VALUES

    def test_empty_input_is_all_zero(self) -> None:
        assert byte_histogram(b"") == (0,) * BYTE_VALUES

    def test_counts_by_byte_value(self) -> None:
        hist = byte_histogram(b"aab\x00")
        assert hist[ord("a")] == 2
        assert hist[ord("b")] == 1
        assert hist[0] == 1
        assert sum(hist) == 4

    def test_high_byte_values(self) -> None:
        hist = byte_histogram(b"\xff\xff\x80")
        assert hist[255] == 2
        assert hist[128] == 1


class TestSimilarityValues:
    """Verify concrete scores."""

    def test_half_overlap(self) -> None:
        assert byte_similarity(b"aaaa", b"aabb") == 50.0

    def test_no_overlap(self) -> None:
        assert byte_similarity(b"aaaa", b"bbbb") == 0.0

    def test_permutation_scores_full(self) -> None:
        assert byte_similarity(b"abcd", b"dcba") == 100.0

    def test_different_lengths_divide_by_longer(self) -> None:
        # common = 2 ("ab"), longest = 8
        assert byte_similarity(b"ab", b"abxxxxxx") == 25.0

    def test_empty_against_non_empty(self) -> None:
        assert byte_similarity(b"", b"abc") == 0.0

    def test_both_empty_is_zero(self) -> None:
        assert byte_similarity(b"", b"") == 0.0

    def test_histogram_similarity_zero_sizes(self) -> None:
        empty = byte_histogram(b"")
        assert histogram_similarity(empty, 0, empty, 0) == 0.0


class TestSimilarityProperties:
    """Symmetry, identity and range hold for every sample pair."""

    @pytest.mark.parametrize("left", _SAMPLES)
    @pytest.mark.parametrize("right", _SAMPLES)
    def test_symmetric(self, left: bytes, right: bytes) -> None:
        assert byte_similarity(left, right) == byte_similarity(right, left)

    @pytest.mark.parametrize("left", _SAMPLES)
    @pytest.mark.parametrize("right", _SAMPLES)
    def test_within_range(self, left: bytes, right: bytes) -> None:
        assert 0.0 <= byte_similarity(left, right) <= 100.0

    @pytest.mark.parametrize("data", [s for s in _SAMPLES if s])
    def test_identity(self, data: bytes) -> None:
        assert byte_similarity(data, data) == 100.0
