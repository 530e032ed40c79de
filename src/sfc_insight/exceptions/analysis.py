"""Analysis-related exceptions: file and directory access."""

from pathlib import Path

from .base import SfcInsightError


class AnalysisError(SfcInsightError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a component file cannot be read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class RootInaccessibleError(AnalysisError):
    """Raised when the scan root cannot be listed. Always fatal."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Cannot list scan root: {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason
