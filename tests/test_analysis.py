"""Tests for the sprint and system analysis pipelines."""

from datetime import date

from ui_adoption.analysis import SprintAnalyzer, SystemAnalyzer, sprint_window
from ui_adoption.config import TrackerConfig
from ui_adoption.exceptions import FileAccessError
from ui_adoption.models import Category
from ui_adoption.scanning.classifier import FileClassifier
from ui_adoption.scanning.reader import read_source
from ui_adoption.temporal.models import Commit, GitHistory

TODAY = date(2024, 1, 17)


def make_history(*commits):
    return GitHistory(
        commits=list(commits), since="2024-01-01 00:00:00", until="2024-01-15 23:59:59"
    )


def make_commit(sha, timestamp, author, files):
    return Commit(hash=sha * 40, timestamp=timestamp, author=author, files=list(files))


class TestSprintWindow:
    def test_window_from_config(self, config):
        window = sprint_window(config, TODAY)

        assert window.end == date(2024, 1, 15)
        assert window.start == date(2024, 1, 1)
        assert window.sprint_id == "Sprint-20240101-20240115"


class TestSprintAnalyzer:
    """Test SprintAnalyzer with injected git history."""

    def test_classifies_changed_files(self, config):
        history = make_history(
            make_commit(
                "c",
                3000,
                "carol",
                ["packages/components/src/Save.tsx", "packages/components/src/Save.test.tsx"],
            ),
            make_commit("b", 2000, "bob", ["packages/components/src/OldModal.jsx"]),
            make_commit("a", 1000, "alice", ["packages/components/src/Save.tsx"]),
        )

        report = SprintAnalyzer(config).run(today=TODAY, history=history)

        assert report.sprint_id == "Sprint-20240101-20240115"
        assert report.generated_date == "2024-01-17"
        assert report.summary.total_files == 2
        assert report.summary.target_count == 1
        assert report.summary.legacy_count == 1
        assert report.summary.adoption_rate_percent == 50

        assert [(p.name, p.conversion_count, p.rank) for p in report.performers] == [
            ("carol", 1, 1)
        ]
        assert len(report.offenses) == 1
        offense = report.offenses[0]
        assert offense.component == "OldModal.jsx"
        assert offense.engineer == "bob"
        assert offense.legacy_library == "react-bootstrap"
        assert report.legacy_breakdown == {"react-bootstrap": 1, "react-select": 1}

    def test_mixed_file_is_not_an_offense(self, config):
        history = make_history(make_commit("a", 1000, "alice", ["packages/modules/src/Mixed.js"]))

        report = SprintAnalyzer(config).run(today=TODAY, history=history)

        assert report.summary.mixed_count == 1
        assert report.offenses == ()
        assert report.performers == ()
        assert report.legacy_breakdown == {"legacy-lib/Modal": 1}

    def test_deleted_file_is_no_ui(self, config):
        history = make_history(
            make_commit("a", 1000, "alice", ["packages/components/src/Removed.tsx"])
        )

        report = SprintAnalyzer(config).run(today=TODAY, history=history)

        assert report.summary.no_ui_count == 1
        assert report.all_records[0].author == "alice"

    def test_empty_history(self, config):
        report = SprintAnalyzer(config).run(today=TODAY, history=make_history())

        assert report.summary.total_files == 0
        assert report.summary.adoption_rate_percent == 0
        assert not report.has_offenders

    def test_without_git_repository(self, config):
        """A source tree that is not a git repository yields an empty report."""
        report = SprintAnalyzer(config).run(today=TODAY)

        assert report.summary.total_files == 0
        assert report.all_records == ()


class TestSystemAnalyzer:
    """Test SystemAnalyzer on the fixture tree."""

    def test_scans_every_candidate(self, config):
        report = SystemAnalyzer(config).run(today=TODAY)

        assert report.analysis_date == "2024-01-17"
        summary = report.summary
        assert summary.total_files == 4
        assert (
            summary.target_count,
            summary.legacy_count,
            summary.mixed_count,
            summary.no_ui_count,
        ) == (1, 1, 1, 1)
        assert summary.adoption_rate_percent == 33
        assert report.module_breakdown == {"modules": 2, "components": 2}
        assert report.legacy_breakdown == {
            "legacy-lib/Modal": 1,
            "react-bootstrap": 1,
            "react-select": 1,
        }
        assert report.target_library_breakdown == {
            "@mui/material/Dialog": 1,
            "@mui/material/Button": 1,
        }

    def test_records_have_no_author(self, config):
        report = SystemAnalyzer(config).run(today=TODAY)
        assert all(r.author is None for r in report.all_records)

    def test_progress_callback(self, config):
        calls = []

        SystemAnalyzer(config).run(today=TODAY, progress_callback=lambda d, t: calls.append((d, t)))

        assert calls == [(1, 4), (2, 4), (3, 4), (4, 4)]

    def test_unreadable_file_counted_as_no_ui(self, config):
        def flaky_reader(path):
            if path.name == "Save.tsx":
                raise FileAccessError(path, "permission denied")
            return read_source(path)

        analyzer = SystemAnalyzer(config, classifier=FileClassifier(config, reader=flaky_reader))
        report = analyzer.run(today=TODAY)

        assert report.summary.total_files == 4
        assert report.summary.target_count == 0
        assert report.summary.no_ui_count == 2
        save = [r for r in report.all_records if r.component == "Save.tsx"][0]
        assert save.category is Category.NO_UI

    def test_record_cap(self, frontend_repo, config):
        capped = TrackerConfig(
            source_repo_path=str(frontend_repo),
            legacy_libraries=config.legacy_libraries,
            max_report_records=2,
        )

        report = SystemAnalyzer(capped).run(today=TODAY)

        assert report.summary.total_files == 4
        assert len(report.all_records) == 2
        assert report.records_truncated
