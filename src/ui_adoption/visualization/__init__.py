"""Visualization layer - static HTML dashboards."""

from .dashboard import render_sprint_dashboard, render_system_dashboard, write_dashboard
from .view import escape

__all__ = [
    "escape",
    "render_sprint_dashboard",
    "render_system_dashboard",
    "write_dashboard",
]
