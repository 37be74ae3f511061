"""Analysis pipelines: enumerate, classify, aggregate."""

from .sprint import SprintAnalyzer, sprint_window
from .system import SystemAnalyzer

__all__ = ["SprintAnalyzer", "SystemAnalyzer", "sprint_window"]
