"""
SFC Insight - Vue single-file component paradigm census

Classifies every component in a source tree as Options API, Composition API,
template-only or unclassified, and scores how hard each Options component
would be to migrate.
"""

__version__ = "0.1.0"

from .analysis import analyze_units, classify, scan, score_complexity
from .models import AnalysisResult, Classification, ComplexityRecord, SourceUnit, Tier

__all__ = [
    "scan",  # Main entry point
    "analyze_units",
    "classify",
    "score_complexity",
    "AnalysisResult",
    "Classification",
    "ComplexityRecord",
    "SourceUnit",
    "Tier",
]
