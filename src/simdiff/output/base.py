"""Renderer protocol for classification output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from simdiff.core.models import MatchReport, PartitionStats


@runtime_checkable
class Renderer(Protocol):
    """Protocol for rendering a match report.

    Implementations write the report to their destination (console,
    stream, file) in one call.
    """

    def render(self, report: MatchReport) -> None:
        """Render the full report."""
        ...

    def render_stats(self, stats: PartitionStats) -> None:
        """Render summary counts only."""
        ...
