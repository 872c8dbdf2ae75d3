"""CLI entry point for simdiff."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer

from simdiff.core.comparator import Comparator
from simdiff.core.loader import FilterConfig
from simdiff.core.models import OutputMode
from simdiff.output.rich_output import RichRenderer

if TYPE_CHECKING:
    from simdiff.output.base import Renderer

app = typer.Typer(
    name="simdiff",
    help="Find identical, similar and unique files across two directory trees.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from simdiff import __version__

        typer.echo(f"simdiff {__version__}")
        raise typer.Exit()


def _parse_output_mode(value: str) -> OutputMode:
    """Parse output string to OutputMode enum."""
    try:
        return OutputMode(value)
    except ValueError:
        valid = ", ".join(o.value for o in OutputMode)
        msg = f"Invalid output mode '{value}'. Choose from: {valid}"
        raise typer.BadParameter(msg) from None


def _configure_logging(level: str | None) -> None:
    """Send log records to stderr when a level was requested."""
    if level is None:
        return
    name = level.upper()
    if name not in _LOG_LEVELS:
        msg = f"Invalid log level '{level}'. Choose from: {', '.join(_LOG_LEVELS)}"
        raise typer.BadParameter(msg)
    logging.basicConfig(level=getattr(logging, name), format=_LOG_FORMAT)


def _build_filter_config(
    *,
    gitignore: bool,
    skip_hidden: bool,
    include: list[str] | None,
    exclude: list[str] | None,
) -> FilterConfig:
    """Build FilterConfig from CLI flags."""
    return FilterConfig(
        respect_gitignore=gitignore,
        include_hidden=not skip_hidden,
        include_patterns=tuple(include) if include else (),
        exclude_patterns=tuple(exclude) if exclude else (),
    )


def _get_renderer(output_mode: OutputMode) -> Renderer:
    """Get the renderer for a non-interactive output mode.

    Raises:
        NotImplementedError: If the output mode has no renderer.
    """
    if output_mode == OutputMode.rich:
        return RichRenderer()
    if output_mode == OutputMode.plain:
        from simdiff.output.plain_output import PlainRenderer

        return PlainRenderer()
    if output_mode == OutputMode.json:
        from simdiff.output.json_output import JsonRenderer

        return JsonRenderer()

    msg = f"Output mode '{output_mode}' has no renderer"
    raise NotImplementedError(msg)


@app.command()
def main(
    left: Annotated[
        Path,
        typer.Argument(help="First directory (set A)."),
    ],
    right: Annotated[
        Path,
        typer.Argument(help="Second directory (set B)."),
    ],
    similarity: Annotated[
        float,
        typer.Option(
            "--similarity",
            "-s",
            help="Minimum byte-histogram similarity percentage for similar files.",
        ),
    ],
    output: Annotated[
        str,
        typer.Option("--output", "-o", help="Output mode: rich, plain, json, or tui."),
    ] = "rich",
    stat: Annotated[
        bool,
        typer.Option("--stat", help="Show only summary statistics."),
    ] = False,
    hash_algo: Annotated[
        str,
        typer.Option("--hash", help="Hash algorithm for exact-match detection."),
    ] = "sha256",
    workers: Annotated[
        int,
        typer.Option("--workers", "-j", help="Parallel workers for hashing and pairwise comparison."),
    ] = 1,
    gitignore: Annotated[
        bool,
        typer.Option("--gitignore", help="Skip files matched by .gitignore rules."),
    ] = False,
    skip_hidden: Annotated[
        bool,
        typer.Option("--skip-hidden", help="Skip hidden files and directories."),
    ] = False,
    include: Annotated[
        list[str] | None,
        typer.Option("--include", "-I", help="Glob pattern(s) for files to include."),
    ] = None,
    exclude: Annotated[
        list[str] | None,
        typer.Option("--exclude", "-E", help="Glob pattern(s) for files to exclude."),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Log to stderr at DEBUG, INFO, WARNING or ERROR."),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Classify files of two directories as identical, similar, or unique.

    Identical files share a content digest. Similar files overlap in byte
    frequencies by at least --similarity percent.
    """
    try:
        _configure_logging(log_level)
        output_mode = _parse_output_mode(output)
        filter_config = _build_filter_config(
            gitignore=gitignore,
            skip_hidden=skip_hidden,
            include=include,
            exclude=exclude,
        )

        comparator = Comparator(
            similarity,
            filter_config=filter_config,
            hash_algo=hash_algo,
            workers=workers,
        )
        report = comparator.compare(left, right)

        # TUI runs its own event loop
        if output_mode == OutputMode.tui:
            from simdiff.tui import SimDiffApp

            SimDiffApp(report, stat_only=stat).run()
            return

        renderer = _get_renderer(output_mode)

        if stat:
            renderer.render_stats(report.stats)
        else:
            renderer.render(report)

    except (FileNotFoundError, NotADirectoryError, ValueError, OSError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2) from None
