"""Classification and complexity scoring engine."""

from .aggregator import Aggregator, analyze_units, scan
from .classifier import (
    CLASSIFICATION_RULES,
    COMPOSITION_SIGNALS,
    OPTIONS_SIGNALS,
    ClassificationTrace,
    Signal,
    classify,
    explain,
    extract_script,
)
from .complexity import LIFECYCLE_HOOKS, module_name_for, score_complexity, tier_for
from .counting import approximate_entry_count

__all__ = [
    "Aggregator",
    "analyze_units",
    "scan",
    "CLASSIFICATION_RULES",
    "COMPOSITION_SIGNALS",
    "OPTIONS_SIGNALS",
    "ClassificationTrace",
    "Signal",
    "classify",
    "explain",
    "extract_script",
    "LIFECYCLE_HOOKS",
    "module_name_for",
    "score_complexity",
    "tier_for",
    "approximate_entry_count",
]
