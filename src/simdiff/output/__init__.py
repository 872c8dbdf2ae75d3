"""Public API for simdiff.output."""

from __future__ import annotations

from simdiff.output.base import Renderer
from simdiff.output.json_output import JsonRenderer
from simdiff.output.plain_output import PlainRenderer
from simdiff.output.rich_output import RichRenderer

__all__ = [
    "JsonRenderer",
    "PlainRenderer",
    "Renderer",
    "RichRenderer",
]
