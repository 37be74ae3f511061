"""File classification: import targets -> Category.

Matching is by substring: an import target matches a library when any of
the library's identifiers occurs inside it, so ``@mui/material/Button``
matches ``@mui/material``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Sequence

from ..aggregation import module_for_path
from ..config import TrackerConfig
from ..exceptions import FileAccessError
from ..logging_config import get_logger
from ..models import Category, FileRecord
from .imports import DEFAULT_EXTRACTOR, ImportExtractor
from .reader import SourceReader, read_source

logger = get_logger(__name__)


def _matching(import_targets: Iterable[str], library_ids: Sequence[str]) -> list[str]:
    return [imp for imp in import_targets if any(lib in imp for lib in library_ids)]


def extract_legacy_dependencies(
    import_targets: Sequence[str], legacy_ids: Sequence[str]
) -> list[str]:
    """Import targets matching any legacy id, in order, duplicates kept."""
    return _matching(import_targets, legacy_ids)


def extract_target_dependencies(
    import_targets: Sequence[str], target_ids: Sequence[str]
) -> list[str]:
    """Import targets matching any target-library id, in order, duplicates kept."""
    return _matching(import_targets, target_ids)


def classify(
    import_targets: Sequence[str],
    target_ids: Sequence[str],
    legacy_ids: Sequence[str],
) -> Category:
    """Categorize a file from its import targets.

    ========  ========  ========
    target    legacy    category
    ========  ========  ========
    yes       no        TARGET
    no        yes       LEGACY
    yes       yes       MIXED
    no        no        NO_UI
    ========  ========  ========
    """
    has_target = bool(_matching(import_targets, target_ids))
    has_legacy = bool(_matching(import_targets, legacy_ids))

    if has_target and has_legacy:
        return Category.MIXED
    if has_target:
        return Category.TARGET
    if has_legacy:
        return Category.LEGACY
    return Category.NO_UI


class FileClassifier:
    """Read, extract and classify files of one source repository."""

    def __init__(
        self,
        config: TrackerConfig,
        extractor: Optional[ImportExtractor] = None,
        reader: SourceReader = read_source,
    ):
        self.config = config
        self.root = config.root
        self.extractor = extractor or DEFAULT_EXTRACTOR
        self.reader = reader

    def classify_text(self, rel_path: str, text: str, author: Optional[str] = None) -> FileRecord:
        """Build a FileRecord for ``rel_path`` from already-read content."""
        imports = self.extractor.extract(text)
        category = classify(imports, self.config.target_libraries, self.config.legacy_libraries)
        return FileRecord(
            path=rel_path,
            category=category,
            module=module_for_path(rel_path, self.config.packages_root),
            legacy_dependencies=tuple(
                extract_legacy_dependencies(imports, self.config.legacy_libraries)
            ),
            target_dependencies=tuple(
                extract_target_dependencies(imports, self.config.target_libraries)
            ),
            author=author,
        )

    def classify_file(self, rel_path: str, author: Optional[str] = None) -> FileRecord:
        """Read and classify one repo-relative file.

        A file that cannot be read is classified as empty text (NO_UI).
        """
        return self.classify_text(rel_path, self._read(self.root / rel_path), author)

    def _read(self, filepath: Path) -> str:
        try:
            return self.reader(filepath)
        except (FileAccessError, OSError, UnicodeDecodeError) as e:
            logger.warning("Treating unreadable file as empty: %s", e)
            return ""
