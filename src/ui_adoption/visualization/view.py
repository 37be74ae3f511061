"""Escaped view models for the dashboards.

Every string that originates from a report (file paths, author names,
library identifiers, dates) is HTML-escaped exactly once, here. The
templates in ``dashboard.py`` interpolate these values without further
processing, so they must only ever receive a view model.
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Dict, Tuple

from ..aggregation import sorted_breakdown
from ..models import Category, SprintReport, SystemReport

TOP_CONVERTERS = 10
COMPONENTS_PER_CONVERTER = 3


def escape(value: object) -> str:
    """Escape ``<``, ``>``, ``&`` and both quote characters."""
    return html.escape(str(value), quote=True)


@dataclass(frozen=True)
class ConverterRow:
    rank: int
    name: str
    conversions: int
    components: str


@dataclass(frozen=True)
class OffenceRow:
    component: str
    engineer: str
    legacy_library: str
    file_path: str


@dataclass(frozen=True)
class BarRow:
    name: str
    count: int
    percent: int  # bar width, 0-100


@dataclass(frozen=True)
class FileRow:
    path: str
    module: str
    category: str
    libraries: str


@dataclass(frozen=True)
class SprintView:
    sprint_id: str
    generated_date: str
    window: str
    total_offences: int
    total_conversions: int
    adoption_rate: int
    converters: Tuple[ConverterRow, ...]
    offences: Tuple[OffenceRow, ...]


@dataclass(frozen=True)
class SystemView:
    analysis_date: str
    total_files: int
    target_count: int
    legacy_count: int
    mixed_count: int
    no_ui_count: int
    adoption_rate: int
    legacy_bars: Tuple[BarRow, ...]
    target_bars: Tuple[BarRow, ...]
    module_bars: Tuple[BarRow, ...]
    legacy_files: Tuple[FileRow, ...]
    records_shown: int


def sprint_view(report: SprintReport) -> SprintView:
    converters = tuple(
        ConverterRow(
            rank=p.rank,
            name=escape(p.name),
            conversions=p.conversion_count,
            components=escape(", ".join(p.components[:COMPONENTS_PER_CONVERTER])),
        )
        for p in report.performers[:TOP_CONVERTERS]
    )
    offences = tuple(
        OffenceRow(
            component=escape(o.component),
            engineer=escape(o.engineer),
            legacy_library=escape(o.legacy_library),
            file_path=escape(o.file_path),
        )
        for o in report.offenses
    )
    return SprintView(
        sprint_id=escape(report.sprint_id),
        generated_date=escape(report.generated_date),
        window=escape(report.window_descriptor),
        total_offences=len(report.offenses),
        total_conversions=report.total_conversions,
        adoption_rate=report.summary.adoption_rate_percent,
        converters=converters,
        offences=offences,
    )


def _bars(breakdown: Dict[str, int], total: int) -> Tuple[BarRow, ...]:
    rows = []
    for name, count in sorted_breakdown(breakdown):
        percent = min(100, (200 * count + total) // (2 * total)) if total else 0
        rows.append(BarRow(name=escape(name), count=count, percent=percent))
    return tuple(rows)


def system_view(report: SystemReport) -> SystemView:
    total = report.summary.total_files
    legacy_files = tuple(
        FileRow(
            path=escape(r.path),
            module=escape(r.module),
            category=escape(r.category.value),
            libraries=escape(", ".join(r.legacy_dependencies)),
        )
        for r in report.all_records
        if r.category in (Category.LEGACY, Category.MIXED)
    )
    return SystemView(
        analysis_date=escape(report.analysis_date),
        total_files=total,
        target_count=report.summary.target_count,
        legacy_count=report.summary.legacy_count,
        mixed_count=report.summary.mixed_count,
        no_ui_count=report.summary.no_ui_count,
        adoption_rate=report.summary.adoption_rate_percent,
        legacy_bars=_bars(report.legacy_breakdown, total),
        target_bars=_bars(report.target_library_breakdown, total),
        module_bars=_bars(report.module_breakdown, total),
        legacy_files=legacy_files,
        records_shown=len(report.all_records),
    )
