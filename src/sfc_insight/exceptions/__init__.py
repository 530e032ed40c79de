"""Exception hierarchy for SFC Insight."""

from .analysis import (
    AnalysisError,
    FileAccessError,
    RootInaccessibleError,
)
from .base import SfcInsightError
from .config import (
    ConfigurationError,
    InvalidConfigError,
)

__all__ = [
    "SfcInsightError",
    "AnalysisError",
    "FileAccessError",
    "RootInaccessibleError",
    "ConfigurationError",
    "InvalidConfigError",
]
