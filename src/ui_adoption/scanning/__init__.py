"""Scanning layer: enumerate candidate files, extract imports, classify."""

from .classifier import (
    FileClassifier,
    classify,
    extract_legacy_dependencies,
    extract_target_dependencies,
)
from .filters import FileFilter
from .imports import ImportExtractor, RegexImportExtractor, extract_import_targets
from .reader import read_source
from .walker import walk_target_directories

__all__ = [
    "FileClassifier",
    "FileFilter",
    "ImportExtractor",
    "RegexImportExtractor",
    "classify",
    "extract_import_targets",
    "extract_legacy_dependencies",
    "extract_target_dependencies",
    "read_source",
    "walk_target_directories",
]
