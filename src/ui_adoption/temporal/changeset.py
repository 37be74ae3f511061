"""Change-set enumerator: candidate files touched within a sprint window."""

from __future__ import annotations

from typing import Optional

from ..logging_config import get_logger
from ..scanning.filters import FileFilter
from .models import ChangedFile, GitHistory

logger = get_logger(__name__)


def collect_changed_files(
    history: Optional[GitHistory], file_filter: FileFilter
) -> list[ChangedFile]:
    """Deduplicate candidate paths from a newest-first commit list.

    Each path keeps the author of the most recent commit that touched it.
    Output order is the order of first appearance in the log. A missing
    history (git failure) yields no files.
    """
    if history is None:
        return []

    authors: dict[str, str] = {}
    for commit in history.commits:
        for path in commit.files:
            if path in authors or not file_filter.accepts(path):
                continue
            authors[path] = commit.author

    logger.info(
        "%d candidate files changed across %d commits", len(authors), history.total_commits
    )
    return [ChangedFile(path=p, author=a) for p, a in authors.items()]
