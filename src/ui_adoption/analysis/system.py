"""System-wide analysis: classify every UI file under the target subtrees."""

from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from ..aggregation import build_system_report
from ..config import TrackerConfig
from ..logging_config import get_logger
from ..models import SystemReport
from ..scanning.classifier import FileClassifier
from ..scanning.filters import FileFilter
from ..scanning.walker import walk_target_directories

logger = get_logger(__name__)

# (processed, total) after each file
ProgressCallback = Callable[[int, int], None]


class SystemAnalyzer:
    """Build a SystemReport from a full walk of the source tree."""

    def __init__(self, config: TrackerConfig, classifier: Optional[FileClassifier] = None):
        self.config = config
        self.classifier = classifier or FileClassifier(config)
        self.file_filter = FileFilter.from_config(config)

    def run(
        self,
        today: Optional[date] = None,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> SystemReport:
        today = today or date.today()
        paths = walk_target_directories(self.config.root, self.file_filter)
        total = len(paths)

        records = []
        for i, path in enumerate(paths, start=1):
            records.append(self.classifier.classify_file(path))
            if progress_callback:
                progress_callback(i, total)

        if total > self.config.max_report_records:
            logger.info(
                "Embedding first %d of %d records in the report",
                self.config.max_report_records,
                total,
            )

        return build_system_report(
            records,
            analysis_date=today.isoformat(),
            record_cap=self.config.max_report_records,
        )
