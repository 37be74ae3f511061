"""Analysis-related exceptions: file access and saved reports."""

from pathlib import Path

from .base import UIAdoptionError


class AnalysisError(UIAdoptionError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a source file cannot be read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ReportNotFoundError(AnalysisError):
    """Raised when a saved report is requested but does not exist."""

    def __init__(self, path: Path):
        super().__init__(
            f"Report not found: {path}",
            details={"path": str(path)},
            hint="Run `ui-adoption sprint` to generate it.",
        )
        self.path = path


class ReportFormatError(AnalysisError):
    """Raised when a saved report cannot be decoded."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Malformed report: {path}",
            details={"path": str(path), "reason": reason},
            hint="Delete the file and regenerate the report.",
        )
        self.path = path
        self.reason = reason
