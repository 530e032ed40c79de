"""Explain how a single component is classified and scored."""

from pathlib import Path

import typer
from rich.markup import escape

from ..analysis import explain as explain_classification
from ..analysis import extract_script, score_complexity
from ..config import load_config
from ..exceptions import SfcInsightError
from ..models import Classification
from ..scanning import read_source_unit
from . import app
from ._common import console, err_console


@app.command()
def explain(
    file: Path = typer.Argument(
        ...,
        help="Component file to inspect",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
):
    """
    Show the classification, every matching signal and, for Options API
    components, the complexity score of FILE.
    """
    try:
        settings = load_config()
        unit = read_source_unit(file)
    except SfcInsightError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    trace = explain_classification(unit.content)
    label = trace.classification.value if trace.classification else "none"

    console.print(f"[bold]{escape(unit.path)}[/bold]")
    console.print(f"Classification: [cyan]{label}[/cyan]")
    console.print(f"Template region: {'yes' if trace.has_template else 'no'}")
    console.print(f"Script region: {'yes' if trace.has_script else 'no'}")
    console.print(f"Composition signals: {', '.join(trace.composition_signals) or '-'}")
    console.print(f"Options signals: {', '.join(trace.options_signals) or '-'}")

    if trace.classification is Classification.OPTIONS:
        record = score_complexity(unit.path, unit.content, settings.scoring)
        console.print()
        console.print(f"Module: {escape(record.module_name)}")
        console.print(f"Score: {record.score} ({record.tier.value})")
        console.print(f" - Lifecycle Hooks: {record.lifecycle_hook_count}")
        console.print(f" - Computed Properties: {record.computed_count}")
        console.print(f" - Methods: {record.methods_count}")
        console.print(f" - Mixins: {'yes' if record.has_mixins else 'no'}")
        console.print(f" - Filters: {'yes' if record.has_filters else 'no'}")
        console.print(f" - Watchers: {'yes' if record.has_watchers else 'no'}")
        console.print(f" - Props: {'yes' if record.has_props else 'no'}")
        console.print(f" - Data: {'yes' if record.has_data else 'no'}")
    elif trace.classification is Classification.UNCLASSIFIED:
        console.print()
        console.print("Script content:")
        console.print(extract_script(unit.content), markup=False)
