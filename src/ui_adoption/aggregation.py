"""Fold classified FileRecords into summaries, rankings and breakdowns.

Every function here is pure: it takes an immutable sequence of records and
returns a new value. Records are folded in the order given, which is what
makes performer tie-breaks deterministic.
"""

from __future__ import annotations

from collections import Counter
from itertools import chain
from pathlib import PurePosixPath
from typing import Dict, Sequence, Tuple

from .models import (
    Category,
    FileRecord,
    Offense,
    Performer,
    SprintReport,
    SprintWindow,
    Summary,
    SystemReport,
)

UNKNOWN_MODULE = "unknown"
UNKNOWN_AUTHOR = "Unknown"
UNKNOWN_LIBRARY = "Unknown"


def module_for_path(path: str, packages_root: str = "packages") -> str:
    """Name of the package a path belongs to.

    ``packages/modules/src/Foo.tsx`` -> ``modules``. Paths without a segment
    after ``packages_root`` map to ``"unknown"``.
    """
    parts = PurePosixPath(path).parts
    for i, part in enumerate(parts[:-1]):
        if part == packages_root and i + 1 < len(parts) - 1:
            return parts[i + 1]
    return UNKNOWN_MODULE


def adoption_rate(target_count: int, legacy_count: int, mixed_count: int) -> int:
    """Percentage of UI-bearing files that are purely target, rounded half up."""
    denominator = target_count + legacy_count + mixed_count
    if denominator == 0:
        return 0
    # integer form of floor(target / denominator * 100 + 0.5)
    return (200 * target_count + denominator) // (2 * denominator)


def build_summary(records: Sequence[FileRecord]) -> Summary:
    counts = Counter(r.category for r in records)
    target = counts[Category.TARGET]
    legacy = counts[Category.LEGACY]
    mixed = counts[Category.MIXED]
    return Summary(
        total_files=len(records),
        target_count=target,
        legacy_count=legacy,
        mixed_count=mixed,
        no_ui_count=counts[Category.NO_UI],
        adoption_rate_percent=adoption_rate(target, legacy, mixed),
    )


def rank_performers(records: Sequence[FileRecord]) -> Tuple[Performer, ...]:
    """Credit each author with their TARGET files and rank by count.

    Ties keep the order in which authors first appear in ``records``.
    """
    credited: Dict[str, list[str]] = {}
    for record in records:
        if record.category is Category.TARGET:
            credited.setdefault(record.author or UNKNOWN_AUTHOR, []).append(record.component)

    # sorted() is stable, so equal counts stay in first-appearance order
    ordered = sorted(credited.items(), key=lambda item: len(item[1]), reverse=True)
    return tuple(
        Performer(name=name, conversion_count=len(components), components=tuple(components), rank=i)
        for i, (name, components) in enumerate(ordered, start=1)
    )


def build_offenses(records: Sequence[FileRecord]) -> Tuple[Offense, ...]:
    """One offense per LEGACY record."""
    return tuple(
        Offense(
            component=r.component,
            engineer=r.author or UNKNOWN_AUTHOR,
            legacy_library=r.legacy_dependencies[0] if r.legacy_dependencies else UNKNOWN_LIBRARY,
            file_path=r.path,
        )
        for r in records
        if r.category is Category.LEGACY
    )


def count_legacy_libraries(records: Sequence[FileRecord]) -> Dict[str, int]:
    return dict(Counter(chain.from_iterable(r.legacy_dependencies for r in records)))


def count_target_libraries(records: Sequence[FileRecord]) -> Dict[str, int]:
    return dict(Counter(chain.from_iterable(r.target_dependencies for r in records)))


def count_modules(records: Sequence[FileRecord]) -> Dict[str, int]:
    return dict(Counter(r.module for r in records))


def build_sprint_report(
    records: Sequence[FileRecord], window: SprintWindow, generated_date: str
) -> SprintReport:
    records = tuple(records)
    return SprintReport(
        sprint_id=window.sprint_id,
        generated_date=generated_date,
        window_descriptor=window.descriptor,
        summary=build_summary(records),
        offenses=build_offenses(records),
        performers=rank_performers(records),
        legacy_breakdown=count_legacy_libraries(records),
        all_records=records,
    )


def build_system_report(
    records: Sequence[FileRecord], analysis_date: str, record_cap: int = 1000
) -> SystemReport:
    """Codebase-wide report; only ``all_records`` is subject to ``record_cap``."""
    records = tuple(records)
    return SystemReport(
        analysis_date=analysis_date,
        summary=build_summary(records),
        legacy_breakdown=count_legacy_libraries(records),
        target_library_breakdown=count_target_libraries(records),
        module_breakdown=count_modules(records),
        all_records=records[:record_cap],
    )


def sorted_breakdown(breakdown: Dict[str, int]) -> list[tuple[str, int]]:
    """Breakdown entries by descending count, then name."""
    return sorted(breakdown.items(), key=lambda item: (-item[1], item[0]))
