"""Detail panel widget showing the selected report entry."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text
from textual.widgets import Static

from simdiff.tui.widgets._styles import SECTION_STYLES, SECTION_TITLES

if TYPE_CHECKING:
    from simdiff.core.models import ReportEntry


class MatchPanel(Static):
    """Panel that shows paths and score for the selected entry."""

    DEFAULT_CSS = """
    MatchPanel {
        width: 2fr;
        display: none;
        overflow-y: auto;
        padding: 1 2;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self.last_content: str = ""

    def update_entry(self, entry: ReportEntry) -> None:
        """Render detail for a report entry."""
        rendered = self._render_entry(entry)
        self.last_content = rendered.plain
        self.update(rendered)

    @staticmethod
    def _render_entry(entry: ReportEntry) -> Text:
        style, prefix = SECTION_STYLES[entry.section]
        text = Text()
        text.append(f"{prefix} {SECTION_TITLES[entry.section]}\n\n", style=f"bold {style}")
        text.append(f"Left:  {entry.left_path or '(none)'}\n")
        text.append(f"Right: {entry.right_path or '(none)'}\n")
        if entry.similarity is not None:
            text.append(f"Similarity: {entry.similarity:.2f}%\n", style=style)
        return text
