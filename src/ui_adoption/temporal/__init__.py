"""Git change-set extraction for sprint analysis."""

from .changeset import collect_changed_files
from .git_extractor import GitExtractor
from .models import ChangedFile, Commit, GitHistory

__all__ = [
    "ChangedFile",
    "Commit",
    "GitExtractor",
    "GitHistory",
    "collect_changed_files",
]
