"""Public API for simdiff.core."""

from __future__ import annotations

from simdiff.core.comparator import Comparator
from simdiff.core.engine import Classifier, PartitionAccumulator
from simdiff.core.hashing import content_digest, is_identical
from simdiff.core.loader import ContentLoader, FilterConfig
from simdiff.core.models import (
    ComparisonResult,
    FileRecord,
    MatchKind,
    MatchReport,
    OutputMode,
    PartitionResult,
    PartitionStats,
    ReportEntry,
    Section,
)
from simdiff.core.similarity import byte_histogram, byte_similarity

__all__ = [
    "Classifier",
    "Comparator",
    "ComparisonResult",
    "ContentLoader",
    "FileRecord",
    "FilterConfig",
    "MatchKind",
    "MatchReport",
    "OutputMode",
    "PartitionAccumulator",
    "PartitionResult",
    "PartitionStats",
    "ReportEntry",
    "Section",
    "byte_histogram",
    "byte_similarity",
    "content_digest",
    "is_identical",
]
