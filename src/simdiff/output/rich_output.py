"""Rich console renderer (default output mode)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from simdiff.core.models import Section

if TYPE_CHECKING:
    from simdiff.core.models import MatchReport, PartitionStats

_SECTION_STYLES: dict[Section, tuple[str, str]] = {
    Section.identical: ("dim", "="),
    Section.similar: ("yellow", "~"),
    Section.only_in_a: ("red", "-"),
    Section.only_in_b: ("green", "+"),
}


class RichRenderer:
    """Renders a match report as one Rich table per section.

    Section indicators:
    - Identical: dim with '=' prefix
    - Similar: yellow with '~' prefix, score with two decimals
    - Only in left: red with '-' prefix
    - Only in right: green with '+' prefix

    Empty sections show ``have 0 files``.
    """

    def __init__(self, console: Console | None = None) -> None:
        """Initialize with an optional Rich console.

        Args:
            console: Rich Console instance. Defaults to Console() if None.
        """
        self._console = console or Console()

    def render(self, report: MatchReport) -> None:
        """Render all four sections."""
        partition = report.partition
        left_name = report.left_root.name or str(report.left_root)
        right_name = report.right_root.name or str(report.right_root)

        identical = self._new_table("Identical files", Section.identical, ("Left", "Right"))
        for left, right in partition.identical_pairs.items():
            self._add_row(identical, Section.identical, left, right)
        self._print(identical)

        similar = self._new_table(
            f"Similar files (>= {partition.threshold:g}%)",
            Section.similar,
            ("Left", "Right", "Similarity"),
        )
        for left, right, score in partition.iter_similar():
            self._add_row(similar, Section.similar, left, right, f"{score:.2f}%")
        self._print(similar)

        only_left = self._new_table(
            f"Only in {escape(left_name)}",
            Section.only_in_a,
            ("Path",),
        )
        for path in partition.only_in_a:
            self._add_row(only_left, Section.only_in_a, path)
        self._print(only_left)

        only_right = self._new_table(
            f"Only in {escape(right_name)}",
            Section.only_in_b,
            ("Path",),
        )
        for path in partition.only_in_b:
            self._add_row(only_right, Section.only_in_b, path)
        self._print(only_right)

    def render_stats(self, stats: PartitionStats) -> None:
        """Render summary statistics."""
        self._console.print(
            f"[bold]{stats.total_left}[/bold] + [bold]{stats.total_right}[/bold] "
            "files compared: "
            f"[dim]{stats.identical} identical[/dim], "
            f"[yellow]{stats.similar} similar[/yellow], "
            f"[red]{stats.only_in_a} only left[/red], "
            f"[green]{stats.only_in_b} only right[/green]"
        )

    @staticmethod
    def _new_table(title: str, section: Section, columns: tuple[str, ...]) -> Table:
        style, _ = _SECTION_STYLES[section]
        table = Table(title=title, title_style=f"bold {style}", title_justify="left")
        for column in columns:
            table.add_column(column, overflow="fold")
        return table

    @staticmethod
    def _add_row(table: Table, section: Section, *cells: str) -> None:
        style, prefix = _SECTION_STYLES[section]
        first, *rest = cells
        table.add_row(f"{prefix} {escape(first)}", *(escape(c) for c in rest), style=style)

    def _print(self, table: Table) -> None:
        """Print a section table, or the empty marker under its title."""
        if table.row_count == 0:
            self._console.print(table.title, style=table.title_style)
            self._console.print("have 0 files", style="dim")
        else:
            self._console.print(table)
        self._console.print()
