"""simdiff: classify files of two directory trees as identical, similar, or unique."""

__version__ = "0.1.0"
