"""Sprint analysis: classify files changed within the last completed sprint."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from ..aggregation import build_sprint_report
from ..config import TrackerConfig
from ..logging_config import get_logger
from ..models import SprintReport, SprintWindow
from ..scanning.classifier import FileClassifier
from ..scanning.filters import FileFilter
from ..temporal.changeset import collect_changed_files
from ..temporal.git_extractor import GitExtractor
from ..temporal.models import GitHistory

logger = get_logger(__name__)


def sprint_window(config: TrackerConfig, today: date) -> SprintWindow:
    """The last completed sprint relative to ``today``.

    The sprint ended ``days_since_sprint_end`` days ago and lasted
    ``sprint_length_days`` days.
    """
    end = today - timedelta(days=config.days_since_sprint_end)
    start = end - timedelta(days=config.sprint_length_days)
    return SprintWindow(start=start, end=end)


class SprintAnalyzer:
    """Build a SprintReport from git history and the files it touched."""

    def __init__(self, config: TrackerConfig, classifier: Optional[FileClassifier] = None):
        self.config = config
        self.classifier = classifier or FileClassifier(config)
        self.file_filter = FileFilter.from_config(config)

    def fetch_history(self, window: SprintWindow) -> Optional[GitHistory]:
        extractor = GitExtractor(
            str(self.config.root),
            since=f"{window.start.isoformat()} 00:00:00",
            until=f"{window.end.isoformat()} 23:59:59",
            timeout_seconds=self.config.git_timeout_seconds,
        )
        return extractor.extract()

    def run(
        self, today: Optional[date] = None, history: Optional[GitHistory] = None
    ) -> SprintReport:
        """Analyze the last completed sprint.

        Args:
            today: Reference date (defaults to the current date)
            history: Pre-fetched history; fetched from git when omitted

        Returns:
            The sprint report. A git failure yields an empty report.
        """
        today = today or date.today()
        window = sprint_window(self.config, today)
        logger.info("Analyzing sprint %s (%s)", window.sprint_id, window.descriptor)

        if history is None:
            history = self.fetch_history(window)
            if history is None:
                logger.warning("No git history available; treating sprint as having no changes")

        changed = collect_changed_files(history, self.file_filter)
        records = [self.classifier.classify_file(c.path, author=c.author) for c in changed]

        return build_sprint_report(records, window, generated_date=today.isoformat())
