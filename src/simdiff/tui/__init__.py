"""Interactive Textual viewer for match reports."""

from simdiff.tui.app import SimDiffApp

__all__ = ["SimDiffApp"]
