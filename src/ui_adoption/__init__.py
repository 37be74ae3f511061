"""
UI Adoption Tracker - measure migration off legacy UI libraries

Classifies frontend component files by the UI libraries they import, rolls
the results up into sprint and codebase-wide adoption reports, and renders
them as static HTML dashboards.
"""

__version__ = "0.1.0"

from .analysis import SprintAnalyzer, SystemAnalyzer
from .config import TrackerConfig, load_config
from .models import Category, FileRecord, Offense, Performer, SprintReport, SystemReport

__all__ = [
    "SprintAnalyzer",
    "SystemAnalyzer",
    "TrackerConfig",
    "load_config",
    "Category",
    "FileRecord",
    "Offense",
    "Performer",
    "SprintReport",
    "SystemReport",
]
