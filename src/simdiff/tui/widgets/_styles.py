"""Shared section styles and labels for TUI widgets."""

from __future__ import annotations

from simdiff.core.models import Section

SECTION_STYLES: dict[Section, tuple[str, str]] = {
    Section.identical: ("dim", "="),
    Section.similar: ("yellow", "~"),
    Section.only_in_a: ("red", "-"),
    Section.only_in_b: ("green", "+"),
}

SECTION_TITLES: dict[Section, str] = {
    Section.identical: "Identical files",
    Section.similar: "Similar files",
    Section.only_in_a: "Only in left",
    Section.only_in_b: "Only in right",
}
