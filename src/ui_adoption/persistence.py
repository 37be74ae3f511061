"""Save and load adoption reports as JSON documents."""

import json
from pathlib import Path
from typing import Union

from .exceptions import ReportFormatError, ReportNotFoundError
from .logging_config import get_logger
from .models import SprintReport, SystemReport

logger = get_logger(__name__)

Report = Union[SprintReport, SystemReport]

_REPORT_TYPES = {
    "sprint": SprintReport,
    "system": SystemReport,
}


def save_report(report: Report, path: Path) -> Path:
    """Write ``report`` as indented JSON and return the resolved path."""
    data = report.to_dict()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

    logger.info(f"Saved {data['kind']} report with {len(report.all_records)} records to {path}")
    return path.resolve()


def load_report(path: Path) -> Report:
    """Load either report form, dispatching on the document's ``kind``.

    Raises:
        ReportNotFoundError: If ``path`` does not exist
        ReportFormatError: If the document is not a valid report
    """
    if not path.exists():
        raise ReportNotFoundError(path)

    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ReportFormatError(path, str(e))

    if not isinstance(raw, dict):
        raise ReportFormatError(path, "expected a JSON object")

    report_type = _REPORT_TYPES.get(raw.get("kind"))
    if report_type is None:
        raise ReportFormatError(path, f"unknown report kind: {raw.get('kind')!r}")

    try:
        return report_type.from_dict(raw)
    except (KeyError, TypeError, ValueError) as e:
        raise ReportFormatError(path, f"missing or invalid field: {e}")


def load_sprint_report(path: Path) -> SprintReport:
    report = load_report(path)
    if not isinstance(report, SprintReport):
        raise ReportFormatError(path, "expected a sprint report")
    return report


def load_system_report(path: Path) -> SystemReport:
    report = load_report(path)
    if not isinstance(report, SystemReport):
        raise ReportFormatError(path, "expected a system report")
    return report
