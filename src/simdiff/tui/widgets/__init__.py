"""TUI widgets for match report display."""

from simdiff.tui.widgets.match_panel import MatchPanel
from simdiff.tui.widgets.match_tree import MatchTree
from simdiff.tui.widgets.status_bar import StatusBar

__all__ = ["MatchPanel", "MatchTree", "StatusBar"]
