"""Status bar widget showing partition summary counts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.widgets import Static

if TYPE_CHECKING:
    from simdiff.core.models import PartitionStats


class StatusBar(Static):
    """Bottom bar displaying file totals, group counts and threshold."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: 1;
        background: $boost;
        color: $text;
        padding: 0 1;
    }
    """

    def __init__(self, stats: PartitionStats, threshold: float) -> None:
        content = (
            f"{stats.total_left} + {stats.total_right} files | "
            f"[dim]{stats.identical} identical[/dim] "
            f"[yellow]{stats.similar} similar[/yellow] "
            f"[red]{stats.only_in_a} only left[/red] "
            f"[green]{stats.only_in_b} only right[/green] "
            f"| threshold: {threshold:g}%"
        )
        super().__init__(content)
