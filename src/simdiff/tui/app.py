"""Textual TUI application for browsing match reports."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from textual.app import App, ComposeResult
from textual.binding import Binding, BindingType
from textual.containers import Horizontal
from textual.widgets import Footer, Header, Static

from simdiff.tui.widgets.match_panel import MatchPanel
from simdiff.tui.widgets.match_tree import MatchTree
from simdiff.tui.widgets.status_bar import StatusBar

if TYPE_CHECKING:
    from simdiff.core.models import MatchReport, ReportEntry


class _StatsDisplay(Static):
    """Centered stats display for --stat mode."""

    DEFAULT_CSS = """
    _StatsDisplay {
        width: 100%;
        height: 1fr;
        content-align: center middle;
        text-align: center;
    }
    """

    def __init__(self, report: MatchReport) -> None:
        stats = report.stats
        content = (
            f"[bold]{stats.total_left} + {stats.total_right}[/bold] files compared"
            f" (threshold: {report.partition.threshold:g}%)\n\n"
            f"[dim]{stats.identical} identical[/dim]  "
            f"[yellow]{stats.similar} similar[/yellow]  "
            f"[red]{stats.only_in_a} only left[/red]  "
            f"[green]{stats.only_in_b} only right[/green]"
        )
        super().__init__(content)


class SimDiffApp(App[None]):
    """Interactive TUI for browsing a match report."""

    CSS_PATH = "styles/app.tcss"

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("q", "quit", "Quit"),
        Binding("s", "toggle_view", "Toggle View"),
        Binding("n", "next_diff", "Next Difference"),
        Binding("p", "prev_diff", "Prev Difference"),
    ]

    def __init__(self, report: MatchReport, *, stat_only: bool = False) -> None:
        super().__init__()
        self._report = report
        self._stat_only = stat_only

    def compose(self) -> ComposeResult:
        yield Header()
        if self._stat_only:
            yield _StatsDisplay(self._report)
        else:
            with Horizontal(id="main-container"):
                yield MatchTree(self._report)
                yield MatchPanel()
            yield StatusBar(self._report.stats, self._report.partition.threshold)
        yield Footer()

    def on_tree_node_selected(self, event: MatchTree.NodeSelected[ReportEntry]) -> None:
        """When an entry node is selected, show its detail in the panel."""
        if event.node.data is None:
            return
        self.query_one(MatchPanel).update_entry(event.node.data)
        container = self.query_one("#main-container")
        if not container.has_class("split-view"):
            container.add_class("split-view")

    def action_toggle_view(self) -> None:
        """Toggle between full-tree and split tree+detail view."""
        if self._stat_only:
            return
        self.query_one("#main-container").toggle_class("split-view")

    def action_next_diff(self) -> None:
        """Move to the next similar or unique entry."""
        if self._stat_only:
            return
        self.query_one(MatchTree).select_next_diff()

    def action_prev_diff(self) -> None:
        """Move to the previous similar or unique entry."""
        if self._stat_only:
            return
        self.query_one(MatchTree).select_prev_diff()
