"""Command-line interface for simdiff."""
