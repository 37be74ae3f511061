"""Candidate-file filtering shared by the tree walker and the change-set lister."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Tuple

from ..config import TrackerConfig


@dataclass(frozen=True)
class FileFilter:
    """Decide whether a repo-relative path is a UI file worth classifying.

    A path qualifies when its file name matches a UI pattern, matches no
    ignore pattern, and it lies under one of the target directories.
    """

    ui_patterns: Tuple[re.Pattern, ...]
    ignored_patterns: Tuple[re.Pattern, ...]
    target_directories: Tuple[str, ...]

    @classmethod
    def from_config(cls, config: TrackerConfig) -> "FileFilter":
        return cls(
            ui_patterns=tuple(re.compile(p) for p in config.ui_file_patterns),
            ignored_patterns=tuple(re.compile(p) for p in config.ignored_file_patterns),
            target_directories=tuple(d.strip("/") for d in config.target_directories),
        )

    def is_ui_file(self, filename: str) -> bool:
        return any(p.search(filename) for p in self.ui_patterns) and not any(
            p.search(filename) for p in self.ignored_patterns
        )

    def in_target_directory(self, rel_path: str) -> bool:
        parts = PurePosixPath(rel_path).parts
        for directory in self.target_directories:
            prefix = PurePosixPath(directory).parts
            if parts[: len(prefix)] == prefix and len(parts) > len(prefix):
                return True
        return False

    def accepts(self, rel_path: str) -> bool:
        return self.is_ui_file(PurePosixPath(rel_path).name) and self.in_target_directory(rel_path)
