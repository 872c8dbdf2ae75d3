"""Plain-text renderer in the classic four-section layout."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import TextIO

    from simdiff.core.models import MatchReport, PartitionStats

EMPTY_SECTION = "have 0 files"


class PlainRenderer:
    """Renders a report as uncolored text, one line per pair or path.

    Sections, in order: identical files, similar files, files only in the
    left tree, files only in the right tree. Empty sections print
    ``have 0 files``.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize with an optional output stream.

        Args:
            output: Text stream for the report. Defaults to sys.stdout.
        """
        self._output = output or sys.stdout

    def render(self, report: MatchReport) -> None:
        """Write the four report sections."""
        partition = report.partition
        left, right = report.left_root, report.right_root

        self._section(
            "Identical files:",
            [f"{a} - {b}" for a, b in partition.identical_pairs.items()],
        )
        self._output.write("\n")
        self._section(
            "Similar files:",
            [f"{a} - {b} - {score:.2f}% similarity" for a, b, score in partition.iter_similar()],
        )
        self._output.write("\n")
        self._section(f"Files present in {left} but not in {right} :", partition.only_in_a)
        self._output.write("\n")
        self._section(f"Files present in {right} but not in {left} :", partition.only_in_b)

    def render_stats(self, stats: PartitionStats) -> None:
        """Write a one-line summary."""
        self._output.write(
            f"{stats.total_left} + {stats.total_right} files compared: "
            f"{stats.identical} identical, {stats.similar} similar, "
            f"{stats.only_in_a} only left, {stats.only_in_b} only right\n"
        )

    def _section(self, title: str, lines: list[str] | tuple[str, ...]) -> None:
        self._output.write(title + "\n")
        for line in lines or (EMPTY_SECTION,):
            self._output.write(line + "\n")
