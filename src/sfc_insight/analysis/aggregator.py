"""Scan driver: classify every component and accumulate the result.

The Aggregator only sees SourceUnit values; where they come from is up to
the caller. ``scan`` wires it to the filesystem walker.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Optional

from ..config import COMPONENT_EXTENSION, DEFAULT_SCORING, ScoringConfig
from ..exceptions import FileAccessError
from ..logging_config import get_logger
from ..models import (
    TIERS,
    AnalysisResult,
    Classification,
    ComplexityBreakdown,
    ComplexityRecord,
    SourceUnit,
)
from ..scanning import read_source_unit, walk_component_files
from .classifier import classify, extract_script
from .complexity import score_complexity

logger = get_logger(__name__)
diagnostics = get_logger("sfc_insight.diagnostics")


class Aggregator:
    """Running totals for one scan.

    Feed units with ``add`` in traversal order, then call ``result`` for an
    immutable snapshot of the counts.
    """

    def __init__(
        self, enable_complexity: bool = False, scoring: ScoringConfig = DEFAULT_SCORING
    ):
        self.enable_complexity = enable_complexity
        self.scoring = scoring
        self.total = 0
        self.counts = {classification: 0 for classification in Classification}
        self.unclassified_example = ""
        self.modules: dict = {tier: {} for tier in TIERS}
        self.details: dict = {tier: [] for tier in TIERS}

    def add(self, unit: SourceUnit) -> Optional[Classification]:
        """Classify one unit and fold it into the totals.

        Returns:
            The unit's classification, or None if it fell into no category
        """
        self.total += 1
        classification = classify(unit.content)
        if classification is None:
            logger.debug(f"No category: {unit.path}")
            return None

        self.counts[classification] += 1

        if classification is Classification.OPTIONS and self.enable_complexity:
            self._add_complexity(score_complexity(unit.path, unit.content, self.scoring))
        elif classification is Classification.UNCLASSIFIED:
            if not self.unclassified_example:
                self.unclassified_example = unit.path
            diagnostics.warning(
                f"Unclassified SFC ({unit.path}):\nScript content: {extract_script(unit.content)}"
            )
        return classification

    def _add_complexity(self, record: ComplexityRecord) -> None:
        modules = self.modules[record.tier]
        modules[record.module_name] = modules.get(record.module_name, 0) + 1
        self.details[record.tier].append(record)

    def result(self) -> AnalysisResult:
        complexity = None
        if self.enable_complexity:
            complexity = ComplexityBreakdown(
                modules={tier: dict(self.modules[tier]) for tier in TIERS},
                details={tier: tuple(self.details[tier]) for tier in TIERS},
            )
        return AnalysisResult(
            total=self.total,
            options_count=self.counts[Classification.OPTIONS],
            composition_count=self.counts[Classification.COMPOSITION],
            template_only_count=self.counts[Classification.TEMPLATE_ONLY],
            unclassified_count=self.counts[Classification.UNCLASSIFIED],
            unclassified_example=self.unclassified_example,
            complexity=complexity,
        )


def analyze_units(
    units: Iterable[SourceUnit],
    enable_complexity: bool = False,
    scoring: ScoringConfig = DEFAULT_SCORING,
) -> AnalysisResult:
    """Classify a stream of already-read units."""
    aggregator = Aggregator(enable_complexity, scoring)
    for unit in units:
        aggregator.add(unit)
    return aggregator.result()


def scan(
    root: Path,
    blacklist: Iterable[str] = (),
    enable_complexity: bool = False,
    extension: str = COMPONENT_EXTENSION,
    scoring: ScoringConfig = DEFAULT_SCORING,
) -> AnalysisResult:
    """Walk ``root`` and classify every component file found.

    Files that cannot be read are logged and skipped; they do not count
    toward the total.

    Args:
        root: Directory to scan
        blacklist: Extra directory basenames to skip; ``node_modules`` is
            always skipped
        enable_complexity: Score Options components
        extension: Component file suffix
        scoring: Complexity weights and tier boundaries

    Raises:
        RootInaccessibleError: If ``root`` cannot be listed
    """
    aggregator = Aggregator(enable_complexity, scoring)
    files_errored = 0

    for filepath in walk_component_files(Path(root), blacklist, extension):
        try:
            unit = read_source_unit(filepath)
        except FileAccessError as e:
            files_errored += 1
            logger.error(f"Error reading file {filepath}: {e.reason}")
            continue
        aggregator.add(unit)

    result = aggregator.result()
    logger.info(f"Scan complete: {result.total} analyzed, {files_errored} errors")
    return result
