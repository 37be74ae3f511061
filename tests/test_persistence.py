"""Tests for report persistence."""

import json
from datetime import date

import pytest

from ui_adoption.aggregation import build_sprint_report, build_system_report
from ui_adoption.exceptions import ReportFormatError, ReportNotFoundError
from ui_adoption.models import Category, SprintReport, SprintWindow, SystemReport
from ui_adoption.persistence import (
    load_report,
    load_sprint_report,
    load_system_report,
    save_report,
)


@pytest.fixture
def sprint_report(sample_records):
    window = SprintWindow(start=date(2024, 1, 1), end=date(2024, 1, 15))
    return build_sprint_report(sample_records, window, generated_date="2024-01-17")


@pytest.fixture
def system_report(sample_records):
    return build_system_report(sample_records, analysis_date="2024-01-17")


class TestSaveAndLoad:
    def test_sprint_report_survives_save_and_load(self, tmp_path, sprint_report):
        path = save_report(sprint_report, tmp_path / "sprint-report.json")

        loaded = load_sprint_report(path)

        assert loaded == sprint_report
        assert loaded.performers[0].rank == 1
        assert loaded.offenses[0].legacy_library == "react-bootstrap"

    def test_system_report_survives_save_and_load(self, tmp_path, system_report):
        path = save_report(system_report, tmp_path / "system-report.json")

        assert load_system_report(path) == system_report

    def test_load_report_dispatches_on_kind(self, tmp_path, sprint_report, system_report):
        sprint_path = save_report(sprint_report, tmp_path / "a.json")
        system_path = save_report(system_report, tmp_path / "b.json")

        assert isinstance(load_report(sprint_path), SprintReport)
        assert isinstance(load_report(system_path), SystemReport)

    def test_saved_document_is_readable_json(self, tmp_path, sprint_report):
        path = save_report(sprint_report, tmp_path / "nested" / "report.json")

        data = json.loads(path.read_text(encoding="utf-8"))

        assert data["kind"] == "sprint"
        assert data["sprint_id"] == "Sprint-20240101-20240115"
        assert data["summary"]["adoption_rate_percent"] == 50
        assert data["all_records"][1]["category"] == "Legacy"
        assert data["all_records"][1]["component"] == "B.tsx"

    def test_non_ascii_text_preserved(self, tmp_path, make_record):
        report = build_system_report(
            [make_record("packages/modules/src/Übersicht.tsx", Category.TARGET, author="José")],
            analysis_date="2024-01-17",
        )
        path = save_report(report, tmp_path / "r.json")

        assert "Übersicht.tsx" in path.read_text(encoding="utf-8")
        assert load_system_report(path).all_records[0].author == "José"


class TestLoadErrors:
    def test_missing_file(self, tmp_path):
        with pytest.raises(ReportNotFoundError) as exc_info:
            load_report(tmp_path / "missing.json")
        assert exc_info.value.hint

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ReportFormatError):
            load_report(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[]", encoding="utf-8")

        with pytest.raises(ReportFormatError):
            load_report(path)

    def test_unknown_kind(self, tmp_path):
        path = tmp_path / "kind.json"
        path.write_text('{"kind": "weekly"}', encoding="utf-8")

        with pytest.raises(ReportFormatError):
            load_report(path)

    def test_missing_field(self, tmp_path):
        path = tmp_path / "partial.json"
        path.write_text('{"kind": "sprint", "sprint_id": "x"}', encoding="utf-8")

        with pytest.raises(ReportFormatError):
            load_report(path)

    def test_wrong_report_kind(self, tmp_path, system_report):
        path = save_report(system_report, tmp_path / "system.json")

        with pytest.raises(ReportFormatError):
            load_sprint_report(path)
