"""JSON export renderer."""

from __future__ import annotations

import dataclasses
import json
import sys
from pathlib import PurePath
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import TextIO

    from simdiff.core.models import MatchReport, PartitionStats


class _ReportEncoder(json.JSONEncoder):
    """JSON encoder that writes Path objects as strings."""

    def default(self, o: object) -> object:
        """Encode Path objects as their string representation."""
        if isinstance(o, PurePath):
            return str(o)
        return super().default(o)


class JsonRenderer:
    """Renders a match report as JSON to a text stream.

    The document has the keys ``left_root``, ``right_root``,
    ``threshold``, ``identical_pairs``, ``similar_pairs``, ``only_in_a``,
    ``only_in_b`` and ``stats``.
    """

    def __init__(self, output: TextIO | None = None, *, indent: int = 2) -> None:
        """Initialize with an optional output stream.

        Args:
            output: Text stream for JSON output. Defaults to sys.stdout.
            indent: JSON indentation level. Defaults to 2.
        """
        self._output = output or sys.stdout
        self._indent = indent

    def render(self, report: MatchReport) -> None:
        """Serialize the full report as JSON."""
        partition = dataclasses.asdict(report.partition)
        data = {
            "left_root": report.left_root,
            "right_root": report.right_root,
            **partition,
            "stats": dataclasses.asdict(report.stats),
        }
        self._dump(data)

    def render_stats(self, stats: PartitionStats) -> None:
        """Serialize summary statistics as JSON."""
        self._dump(dataclasses.asdict(stats))

    def _dump(self, data: dict[str, object]) -> None:
        json.dump(data, self._output, cls=_ReportEncoder, indent=self._indent)
        self._output.write("\n")
