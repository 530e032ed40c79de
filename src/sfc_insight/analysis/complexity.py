"""Complexity scoring for Options components.

The score is additive over independent textual signals (see ScoringConfig
for the weights), then bucketed into a Tier. Every file also gets a module
name derived from its path so results can be grouped by feature area.
"""

from __future__ import annotations

import re
from pathlib import PurePath

from ..config import DEFAULT_SCORING, ScoringConfig
from ..logging_config import get_logger
from ..models import ComplexityRecord, Tier
from .counting import approximate_entry_count, approximate_entry_count_all

logger = get_logger(__name__)

_I = re.IGNORECASE

LIFECYCLE_HOOKS: tuple[str, ...] = (
    "created",
    "mounted",
    "beforeMount",
    "beforeCreate",
    "updated",
    "beforeUpdate",
    "destroyed",
    "beforeDestroy",
)

MIXINS = re.compile(r"mixins\s*:\s*\[", _I)
FILTERS = re.compile(r"filters\s*:\s*\{", _I)
WATCH_IMMEDIATE = re.compile(r"watch\s*:\s*\{[^}]*immediate\s*:\s*true", _I)
WATCH_DEEP = re.compile(r"watch\s*:\s*\{[^}]*deep\s*:\s*true", _I)

# The counted signals below are case-sensitive.
LIFECYCLE_CALL = re.compile(r"\b(?:" + "|".join(LIFECYCLE_HOOKS) + r")\s*\(")
COMPUTED_BLOCK = re.compile(r"computed\s*:\s*\{[^}]*\}")
METHODS_BLOCK = re.compile(r"methods\s*:\s*\{[^}]*\}")
WATCH_BLOCK = re.compile(r"watch\s*:\s*\{[^}]*\}")

PROPS = (re.compile(r"props\s*:\s*\{", _I), re.compile(r"props\s*:\s*\[", _I))
DATA = (
    re.compile(r"data\s*\(\s*\)\s*\{", _I),
    re.compile(r"data\s*:\s*\(", _I),
    re.compile(r"data\s*:\s*\{", _I),
)

OTHER_MODULE = "other"
VIEWS_MODULE = "views"


def module_name_for(path: str) -> str:
    """Derive the grouping module of a component from its path.

    ``.../components/<name>/...`` groups under ``<name>`` (the segment right
    after the first ``components``), anything under a ``views`` directory
    groups under ``views``, the rest under ``other``.
    """
    parts = PurePath(path).parts
    if "components" in parts:
        index = parts.index("components")
        if index + 1 < len(parts):
            return parts[index + 1]
        return OTHER_MODULE
    if VIEWS_MODULE in parts:
        return VIEWS_MODULE
    return OTHER_MODULE


def tier_for(score: int, scoring: ScoringConfig = DEFAULT_SCORING) -> Tier:
    if score >= scoring.high_threshold:
        return Tier.HIGH
    if score >= scoring.medium_threshold:
        return Tier.MEDIUM
    return Tier.LOW


def score_complexity(
    path: str, content: str, scoring: ScoringConfig = DEFAULT_SCORING
) -> ComplexityRecord:
    """Score one Options component.

    Args:
        path: Component path, used for the file and module names
        content: Full component source
        scoring: Weights and tier boundaries

    Returns:
        ComplexityRecord with the score, tier and contributing signals
    """
    score = 0

    has_mixins = MIXINS.search(content) is not None
    if has_mixins:
        score += scoring.mixins_weight
    if WATCH_IMMEDIATE.search(content):
        score += scoring.watch_immediate_weight
    if WATCH_DEEP.search(content):
        score += scoring.watch_deep_weight
    has_filters = FILTERS.search(content) is not None
    if has_filters:
        score += scoring.filters_weight

    lifecycle_hooks = len(LIFECYCLE_CALL.findall(content))
    score += lifecycle_hooks * scoring.lifecycle_hook_weight

    computed_count = approximate_entry_count_all(
        match.group(0) for match in COMPUTED_BLOCK.finditer(content)
    )
    score += computed_count * scoring.computed_entry_weight

    methods_match = METHODS_BLOCK.search(content)
    methods_count = approximate_entry_count(methods_match.group(0) if methods_match else "")
    score += methods_count * scoring.method_entry_weight

    simple_watchers = len(WATCH_BLOCK.findall(content))
    score += simple_watchers * scoring.simple_watch_weight

    record = ComplexityRecord(
        file_name=PurePath(path).name,
        path=path,
        module_name=module_name_for(path),
        score=score,
        tier=tier_for(score, scoring),
        lifecycle_hook_count=lifecycle_hooks,
        computed_count=computed_count,
        methods_count=methods_count,
        has_watchers=simple_watchers > 0,
        has_mixins=has_mixins,
        has_filters=has_filters,
        has_props=any(pattern.search(content) for pattern in PROPS),
        has_data=any(pattern.search(content) for pattern in DATA),
    )
    logger.debug(f"Scored {path}: {score} ({record.tier.value})")
    return record
