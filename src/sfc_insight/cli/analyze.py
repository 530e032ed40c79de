"""Main scan command."""

from pathlib import Path
from typing import Optional

import typer

from ..analysis import scan
from ..exceptions import SfcInsightError
from ..formatters import get_formatter
from ..logging_config import setup_logging
from . import app
from ._common import console, err_console, resolve_config


@app.callback(invoke_without_command=True, no_args_is_help=False)
def main(
    ctx: typer.Context,
    folder: Optional[Path] = typer.Option(
        None,
        "--folder",
        help="Root directory to scan (default: current directory)",
    ),
    blacklist: Optional[str] = typer.Option(
        None,
        "--blacklist",
        help="Comma-separated directory names to skip (node_modules is always skipped)",
    ),
    complexity: bool = typer.Option(
        False,
        "--complexity",
        help="Score Options API components and report complexity tiers",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors (hides unclassified diagnostics)",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Count Options API, Composition API, template-only and unclassified SFCs.

    Unclassified components are reported on stderr with their script
    content so the detection heuristics can be refined.

    [bold cyan]Examples:[/bold cyan]

      sfc-insight

      sfc-insight --folder=src --complexity

      sfc-insight --folder=src --blacklist=dist,legacy --json
    """
    if ctx.invoked_subcommand is not None:
        return

    from .. import __version__

    if version:
        console.print(f"[bold cyan]SFC Insight[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    try:
        settings = resolve_config(
            config=config,
            folder=folder,
            blacklist=blacklist,
            complexity=complexity,
            verbose=verbose,
            quiet=quiet,
        )
        setup_logging(
            verbose=settings.verbosity == "verbose", quiet=settings.verbosity == "quiet"
        )

        result = scan(
            Path(settings.folder),
            blacklist=settings.blacklist,
            enable_complexity=settings.complexity,
            extension=settings.extension,
            scoring=settings.scoring,
        )
    except SfcInsightError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    get_formatter("json" if json_output else "text").render(result)
