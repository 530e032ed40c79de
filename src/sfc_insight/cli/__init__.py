"""CLI entry point: registers the scan callback and subcommands."""

import typer

app = typer.Typer(
    name="sfc-insight",
    help="SFC Insight - Vue single-file component paradigm census",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .analyze import main as _main_callback  # noqa: F401, E402
from .explain import explain as _explain  # noqa: F401, E402
