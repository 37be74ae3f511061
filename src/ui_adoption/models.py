"""Data models for UI Adoption Tracker.

Every model is a frozen dataclass built from plain values so reports can be
serialised to JSON and read back without loss.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from pathlib import PurePosixPath
from typing import Any, Dict, Optional, Tuple


class Category(Enum):
    """UI library dependency state of a single file."""

    TARGET = "Target"
    LEGACY = "Legacy"
    MIXED = "Mixed"
    NO_UI = "NoUI"


@dataclass(frozen=True)
class FileRecord:
    """One analyzed source file."""

    path: str  # repo-relative, POSIX separators
    category: Category
    module: str
    legacy_dependencies: Tuple[str, ...] = ()
    target_dependencies: Tuple[str, ...] = ()
    author: Optional[str] = None  # sprint mode only

    @property
    def component(self) -> str:
        """Display name of the file."""
        return PurePosixPath(self.path).name

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "component": self.component,
            "category": self.category.value,
            "module": self.module,
            "legacy_dependencies": list(self.legacy_dependencies),
            "target_dependencies": list(self.target_dependencies),
            "author": self.author,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "FileRecord":
        return cls(
            path=d["path"],
            category=Category(d["category"]),
            module=d.get("module", "unknown"),
            legacy_dependencies=tuple(d.get("legacy_dependencies", ())),
            target_dependencies=tuple(d.get("target_dependencies", ())),
            author=d.get("author"),
        )


@dataclass(frozen=True)
class Performer:
    """An engineer's conversion credit for a sprint."""

    name: str
    conversion_count: int
    components: Tuple[str, ...]
    rank: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "conversion_count": self.conversion_count,
            "components": list(self.components),
            "rank": self.rank,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Performer":
        return cls(
            name=d["name"],
            conversion_count=d["conversion_count"],
            components=tuple(d.get("components", ())),
            rank=d["rank"],
        )


@dataclass(frozen=True)
class Offense:
    """A file touched in the sprint window that still uses a legacy library."""

    component: str
    engineer: str
    legacy_library: str
    file_path: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "component": self.component,
            "engineer": self.engineer,
            "legacy_library": self.legacy_library,
            "file_path": self.file_path,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Offense":
        return cls(
            component=d["component"],
            engineer=d["engineer"],
            legacy_library=d["legacy_library"],
            file_path=d.get("file_path", ""),
        )


@dataclass(frozen=True)
class Summary:
    """Category counts and the resulting adoption rate."""

    total_files: int = 0
    target_count: int = 0
    legacy_count: int = 0
    mixed_count: int = 0
    no_ui_count: int = 0
    adoption_rate_percent: int = 0

    @property
    def ui_file_count(self) -> int:
        """Files that depend on any UI library."""
        return self.target_count + self.legacy_count + self.mixed_count

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_files": self.total_files,
            "target_count": self.target_count,
            "legacy_count": self.legacy_count,
            "mixed_count": self.mixed_count,
            "no_ui_count": self.no_ui_count,
            "adoption_rate_percent": self.adoption_rate_percent,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Summary":
        return cls(**{k: int(d.get(k, 0)) for k in cls().to_dict()})


@dataclass(frozen=True)
class SprintWindow:
    """Inclusive date range of one sprint."""

    start: date
    end: date

    @property
    def sprint_id(self) -> str:
        return f"Sprint-{self.start:%Y%m%d}-{self.end:%Y%m%d}"

    @property
    def descriptor(self) -> str:
        return f"{self.start.isoformat()}..{self.end.isoformat()}"


@dataclass(frozen=True)
class SprintReport:
    """Adoption report for the files changed in one sprint window."""

    sprint_id: str
    generated_date: str  # ISO-8601 date
    window_descriptor: str
    summary: Summary
    offenses: Tuple[Offense, ...] = ()
    performers: Tuple[Performer, ...] = ()
    legacy_breakdown: Dict[str, int] = field(default_factory=dict)
    all_records: Tuple[FileRecord, ...] = ()

    @property
    def total_conversions(self) -> int:
        return sum(p.conversion_count for p in self.performers)

    @property
    def has_offenders(self) -> bool:
        return bool(self.offenses)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "sprint",
            "sprint_id": self.sprint_id,
            "generated_date": self.generated_date,
            "window_descriptor": self.window_descriptor,
            "summary": self.summary.to_dict(),
            "offenses": [o.to_dict() for o in self.offenses],
            "performers": [p.to_dict() for p in self.performers],
            "legacy_breakdown": dict(self.legacy_breakdown),
            "all_records": [r.to_dict() for r in self.all_records],
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SprintReport":
        return cls(
            sprint_id=d["sprint_id"],
            generated_date=d["generated_date"],
            window_descriptor=d["window_descriptor"],
            summary=Summary.from_dict(d["summary"]),
            offenses=tuple(Offense.from_dict(o) for o in d.get("offenses", [])),
            performers=tuple(Performer.from_dict(p) for p in d.get("performers", [])),
            legacy_breakdown=dict(d.get("legacy_breakdown", {})),
            all_records=tuple(FileRecord.from_dict(r) for r in d.get("all_records", [])),
        )


@dataclass(frozen=True)
class SystemReport:
    """Codebase-wide adoption report for a full-tree scan.

    ``all_records`` may be capped for rendering size; ``summary`` and the
    breakdowns always cover every scanned file.
    """

    analysis_date: str  # ISO-8601 date
    summary: Summary
    legacy_breakdown: Dict[str, int] = field(default_factory=dict)
    target_library_breakdown: Dict[str, int] = field(default_factory=dict)
    module_breakdown: Dict[str, int] = field(default_factory=dict)
    all_records: Tuple[FileRecord, ...] = ()

    @property
    def records_truncated(self) -> bool:
        return len(self.all_records) < self.summary.total_files

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "system",
            "analysis_date": self.analysis_date,
            "summary": self.summary.to_dict(),
            "legacy_breakdown": dict(self.legacy_breakdown),
            "target_library_breakdown": dict(self.target_library_breakdown),
            "module_breakdown": dict(self.module_breakdown),
            "all_records": [r.to_dict() for r in self.all_records],
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SystemReport":
        return cls(
            analysis_date=d["analysis_date"],
            summary=Summary.from_dict(d["summary"]),
            legacy_breakdown=dict(d.get("legacy_breakdown", {})),
            target_library_breakdown=dict(d.get("target_library_breakdown", {})),
            module_breakdown=dict(d.get("module_breakdown", {})),
            all_records=tuple(FileRecord.from_dict(r) for r in d.get("all_records", [])),
        )
