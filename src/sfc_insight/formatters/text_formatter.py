"""Console report for SFC Insight, rendered with rich."""

import io
from typing import Optional

from rich.console import Console
from rich.markup import escape

from ..models import TIERS, AnalysisResult, ComplexityBreakdown, ComplexityRecord, Tier
from .base import BaseFormatter

TIER_STYLES = {
    Tier.LOW: "green",
    Tier.MEDIUM: "yellow",
    Tier.HIGH: "red",
}


def percentage(part: int, whole: int) -> str:
    """Two-decimal percentage; an empty denominator reads as 0.00%."""
    if whole == 0:
        return "0.00%"
    return f"{part / whole * 100:.2f}%"


def group_by_module(records: tuple[ComplexityRecord, ...]) -> dict[str, list[ComplexityRecord]]:
    """Group records by module, keeping first-seen module order."""
    groups: dict[str, list[ComplexityRecord]] = {}
    for record in records:
        groups.setdefault(record.module_name, []).append(record)
    return groups


class TextFormatter(BaseFormatter):
    """Plain-text summary, plus the complexity section when it was computed."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False, soft_wrap=True)

    def render(self, result: AnalysisResult) -> None:
        self._print(self.console, result)

    def format(self, result: AnalysisResult) -> str:
        console = Console(
            file=io.StringIO(), record=True, width=200, color_system=None, highlight=False
        )
        self._print(console, result)
        return console.export_text()

    def _print(self, console: Console, result: AnalysisResult) -> None:
        self._print_basic(console, result)
        if result.complexity is not None:
            self._print_complexity(console, result, result.complexity)

    def _print_basic(self, console: Console, result: AnalysisResult) -> None:
        total = result.total
        console.print()
        console.print("[bold cyan]SFC Analysis[/bold cyan]")
        console.print("============")
        console.print(f"Total SFCs: {total}")
        rows = (
            ("Options API SFCs", result.options_count),
            ("Composition API SFCs", result.composition_count),
            ("Template-only SFCs", result.template_only_count),
            ("Unclassified SFCs", result.unclassified_count),
        )
        for label, count in rows:
            console.print(f"{label}: {count} ({percentage(count, total)})")
        if result.unclassified_count > 0:
            console.print(f"Example unclassified SFC: {escape(result.unclassified_example)}")

    def _print_complexity(
        self, console: Console, result: AnalysisResult, complexity: ComplexityBreakdown
    ) -> None:
        console.print()
        console.print("[bold cyan]Complexity Analysis[/bold cyan]")
        console.print("==================")
        console.print()
        console.print("Breakdown:")

        for tier in TIERS:
            tier_total = complexity.tier_total(tier)
            style = TIER_STYLES[tier]
            console.print()
            console.print(
                f"[{style}]{tier.value.capitalize()} Complexity[/{style}]: "
                f"{tier_total} ({percentage(tier_total, result.options_count)})"
            )
            for module, count in complexity.modules[tier].items():
                console.print(f"    {escape(module)}: {count} ({percentage(count, tier_total)})")

        console.print()
        console.print("[bold cyan]Detailed Component List[/bold cyan]")
        console.print("=====================")

        for tier in TIERS:
            console.print()
            console.print(f"[bold]{tier.value.upper()} Complexity Components:[/bold]")
            console.print("=" * 25)
            for module, records in group_by_module(complexity.details[tier]).items():
                console.print()
                console.print(f"Module: {escape(module)}")
                for record in records:
                    self._print_record(console, record, show_factors=tier is Tier.HIGH)

    def _print_record(self, console: Console, record: ComplexityRecord, show_factors: bool) -> None:
        console.print()
        console.print(f"File: {escape(record.file_name)}")
        console.print(f"Path: {escape(record.path)}")
        console.print(f"Score: {record.score}")
        if not show_factors:
            return
        console.print("Complexity Factors:")
        console.print(f" - Lifecycle Hooks: {record.lifecycle_hook_count}")
        console.print(f" - Computed Properties: {record.computed_count}")
        console.print(f" - Methods: {record.methods_count}")
        if record.has_mixins:
            console.print(" - Uses mixins")
        if record.has_filters:
            console.print(" - Uses filters")
        if record.has_watchers:
            console.print(" - Has watchers")
