"""Tree widget listing report entries grouped by section."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from textual.widgets import Tree

from simdiff.core.models import ReportEntry, Section
from simdiff.tui.widgets._styles import SECTION_STYLES, SECTION_TITLES

if TYPE_CHECKING:
    from textual.widgets._tree import TreeNode

    from simdiff.core.models import MatchReport


def entry_label(entry: ReportEntry) -> str:
    """Build the markup label for a leaf node."""
    style, prefix = SECTION_STYLES[entry.section]
    if entry.section == Section.identical:
        text = f"{entry.left_path} - {entry.right_path}"
    elif entry.section == Section.similar:
        text = f"{entry.left_path} - {entry.right_path} ({entry.similarity:.2f}%)"
    else:
        text = entry.left_path or entry.right_path or ""
    return f"[{style}]{prefix} {escape(text)}[/{style}]"


class MatchTree(Tree[ReportEntry]):
    """Tree with one branch per section and one leaf per report entry."""

    DEFAULT_CSS = """
    MatchTree {
        width: 1fr;
        min-width: 20;
        border-right: solid $accent;
    }
    """

    def __init__(self, report: MatchReport) -> None:
        left = report.left_root.name or str(report.left_root)
        right = report.right_root.name or str(report.right_root)
        super().__init__(escape(f"{left} vs {right}"))
        self._report = report
        self._diff_nodes: list[TreeNode[ReportEntry]] = []
        self._current_diff_index: int = -1

    def on_mount(self) -> None:
        """Populate the tree from the report entries."""
        self._build_tree()
        self.root.expand_all()

    def _build_tree(self) -> None:
        grouped: dict[Section, list[ReportEntry]] = {section: [] for section in Section}
        for entry in self._report.entries():
            grouped[entry.section].append(entry)

        for section, entries in grouped.items():
            style, _ = SECTION_STYLES[section]
            branch = self.root.add(
                f"[bold {style}]{SECTION_TITLES[section]}[/bold {style}] ({len(entries)})"
            )
            if not entries:
                branch.add_leaf("[dim]have 0 files[/dim]")
                continue
            for entry in entries:
                node = branch.add_leaf(entry_label(entry), data=entry)
                if section != Section.identical:
                    self._diff_nodes.append(node)

    def select_next_diff(self) -> None:
        """Move cursor to the next non-identical entry."""
        if not self._diff_nodes:
            return
        self._current_diff_index = (self._current_diff_index + 1) % len(self._diff_nodes)
        self._jump_to(self._diff_nodes[self._current_diff_index])

    def select_prev_diff(self) -> None:
        """Move cursor to the previous non-identical entry."""
        if not self._diff_nodes:
            return
        current = max(self._current_diff_index, 0)
        self._current_diff_index = (current - 1) % len(self._diff_nodes)
        self._jump_to(self._diff_nodes[self._current_diff_index])

    def _jump_to(self, node: TreeNode[ReportEntry]) -> None:
        self.select_node(node)
        self.scroll_to_node(node)
