"""Exception hierarchy for UI Adoption Tracker."""

from .analysis import (
    AnalysisError,
    FileAccessError,
    ReportFormatError,
    ReportNotFoundError,
)
from .base import UIAdoptionError
from .config import (
    ConfigNotFoundError,
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
    MissingManifestError,
)

__all__ = [
    "UIAdoptionError",
    "AnalysisError",
    "FileAccessError",
    "ReportNotFoundError",
    "ReportFormatError",
    "ConfigurationError",
    "ConfigNotFoundError",
    "InvalidConfigError",
    "InvalidPathError",
    "MissingManifestError",
]
