"""Directory-walk enumerator for full-tree analysis."""

from __future__ import annotations

import os
from pathlib import Path

from ..logging_config import get_logger
from .filters import FileFilter

logger = get_logger(__name__)


def walk_target_directories(root: Path, file_filter: FileFilter) -> list[str]:
    """Enumerate every candidate UI file under the configured subtrees.

    Traversal is sorted so repeated runs yield the same order. Symlinked
    directories are not followed.

    Returns:
        Repo-relative POSIX paths.
    """
    found: list[str] = []

    for directory in file_filter.target_directories:
        base = root / directory
        if not base.is_dir():
            logger.warning("Directory not found: %s", base)
            continue

        for dirpath, dirnames, filenames in os.walk(base):
            dirnames.sort()
            for name in sorted(filenames):
                full = Path(dirpath) / name
                if not full.is_file() or not file_filter.is_ui_file(name):
                    continue
                rel = full.relative_to(root).as_posix()
                if file_filter.in_target_directory(rel):
                    found.append(rel)

    logger.info("Found %d UI files under %s", len(found), root)
    return found
