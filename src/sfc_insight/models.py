"""Data models for SFC Insight.

A scan turns a stream of SourceUnit values into one AnalysisResult. Options
components additionally produce a ComplexityRecord each.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Optional


class Classification(Enum):
    """Authoring style of a single-file component."""

    TEMPLATE_ONLY = "template_only"
    COMPOSITION = "composition"
    OPTIONS = "options"
    UNCLASSIFIED = "unclassified"


class Tier(Enum):
    """Bucketed complexity label."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# Report order for tiers
TIERS: tuple[Tier, ...] = (Tier.LOW, Tier.MEDIUM, Tier.HIGH)


@dataclass(frozen=True)
class SourceUnit:
    """One discovered component file: its path and full text."""

    path: str
    content: str


@dataclass(frozen=True)
class ComplexityRecord:
    """Complexity score and contributing signals for one Options component."""

    file_name: str
    path: str
    module_name: str
    score: int
    tier: Tier
    lifecycle_hook_count: int = 0
    computed_count: int = 0
    methods_count: int = 0
    has_watchers: bool = False
    has_mixins: bool = False
    has_filters: bool = False
    has_props: bool = False
    has_data: bool = False

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["tier"] = self.tier.value
        return data


@dataclass(frozen=True)
class ComplexityBreakdown:
    """Per-tier module counts and per-tier component details.

    Module keys keep first-seen order; detail tuples keep traversal order.
    """

    modules: dict[Tier, dict[str, int]] = field(
        default_factory=lambda: {tier: {} for tier in TIERS}
    )
    details: dict[Tier, tuple[ComplexityRecord, ...]] = field(
        default_factory=lambda: {tier: () for tier in TIERS}
    )

    def tier_total(self, tier: Tier) -> int:
        return sum(self.modules[tier].values())

    def to_dict(self) -> dict[str, Any]:
        return {
            "modules": {tier.value: dict(self.modules[tier]) for tier in TIERS},
            "details": {
                tier.value: [record.to_dict() for record in self.details[tier]]
                for tier in TIERS
            },
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Aggregate outcome of one scan."""

    total: int = 0
    options_count: int = 0
    composition_count: int = 0
    template_only_count: int = 0
    unclassified_count: int = 0
    unclassified_example: str = ""
    complexity: Optional[ComplexityBreakdown] = None

    @property
    def classified_count(self) -> int:
        return (
            self.options_count
            + self.composition_count
            + self.template_only_count
            + self.unclassified_count
        )

    @property
    def dropped_count(self) -> int:
        """Files counted in the total that fell into no category."""
        return self.total - self.classified_count

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "options_count": self.options_count,
            "composition_count": self.composition_count,
            "template_only_count": self.template_only_count,
            "unclassified_count": self.unclassified_count,
            "unclassified_example": self.unclassified_example,
            "dropped_count": self.dropped_count,
            "complexity": self.complexity.to_dict() if self.complexity else None,
        }
