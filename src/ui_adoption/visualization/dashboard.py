"""Render adoption reports as self-contained static HTML dashboards.

Rendering is a pure function of the report: no network resources, no
timestamps beyond the report's own dates, identical output for identical
input. All report text reaches the templates through the escaped view
models in ``view.py``.
"""

from pathlib import Path
from typing import Tuple

from ..models import SprintReport, SystemReport
from .view import BarRow, SprintView, SystemView, sprint_view, system_view


def render_sprint_dashboard(report: SprintReport) -> str:
    """Render a sprint report: stat cards plus converter and offence tabs."""
    return _sprint_html(sprint_view(report))


def render_system_dashboard(report: SystemReport) -> str:
    """Render a system report: stat cards plus library and module breakdowns."""
    return _system_html(system_view(report))


def write_dashboard(html: str, output_path: Path) -> Path:
    """Write rendered HTML and return the resolved output path."""
    out = output_path.resolve()
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(html, encoding="utf-8")
    return out


# ── Private helpers ──────────────────────────────────────────────────


_STYLE = """
* { margin: 0; padding: 0; box-sizing: border-box; }
body { font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif; background: #0d1117; color: #c9d1d9; }
#header { padding: 24px 32px; border-bottom: 1px solid #21262d; }
#header h1 { font-size: 24px; color: #58a6ff; margin-bottom: 8px; }
#header p { font-size: 14px; color: #8b949e; }
#summary { display: flex; gap: 24px; padding: 24px 32px; flex-wrap: wrap; }
.stat { background: #161b22; padding: 16px 24px; border-radius: 6px; border: 1px solid #21262d; min-width: 180px; }
.stat-value { font-size: 32px; font-weight: 600; color: #c9d1d9; }
.stat-label { font-size: 12px; text-transform: uppercase; letter-spacing: 0.5px; color: #8b949e; }
section { padding: 16px 32px; }
section h2 { font-size: 18px; color: #58a6ff; margin-bottom: 12px; }
section p.note { font-size: 13px; color: #8b949e; margin-bottom: 12px; }
.columns { display: grid; grid-template-columns: 1fr 1fr; gap: 24px; }
table { width: 100%; border-collapse: collapse; font-size: 14px; }
th, td { padding: 10px 12px; text-align: left; border-bottom: 1px solid #21262d; }
th { color: #8b949e; font-weight: 600; background: #161b22; }
td.rank { color: #58a6ff; font-weight: 600; }
tr.offender td:first-child { border-left: 4px solid #f85149; }
.empty { color: #3fb950; font-size: 14px; }
.bar-row { display: flex; justify-content: space-between; align-items: center; padding: 8px 0; border-bottom: 1px solid #21262d; }
.bar-name { font-size: 13px; }
.bar-count { font-weight: 600; color: #58a6ff; }
.bar { width: 260px; height: 8px; background: #21262d; border-radius: 4px; overflow: hidden; margin-top: 4px; }
.bar-fill { height: 100%; background: #58a6ff; }
.tabs { display: flex; gap: 8px; margin-bottom: 16px; border-bottom: 1px solid #21262d; }
.tab-button { background: none; border: none; color: #8b949e; padding: 10px 16px; font-size: 14px; cursor: pointer; border-bottom: 2px solid transparent; }
.tab-button.active { color: #58a6ff; border-bottom-color: #58a6ff; }
.tab-content { display: none; }
.tab-content.active { display: block; }
footer { padding: 24px 32px; text-align: center; color: #484f58; font-size: 12px; border-top: 1px solid #21262d; margin-top: 32px; }
"""

_TAB_SCRIPT = """
function showTab(name, button) {
  document.querySelectorAll(".tab-content").forEach(function(el) { el.classList.remove("active"); });
  document.querySelectorAll(".tab-button").forEach(function(el) { el.classList.remove("active"); });
  document.getElementById(name).classList.add("active");
  button.classList.add("active");
}
"""


def _page(title: str, body: str, script: str = "") -> str:
    script_block = f"<script>{script}</script>\n" if script else ""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{title}</title>
<style>{_STYLE}</style>
</head>
<body>
{body}
<footer>Generated by UI Adoption Tracker</footer>
{script_block}</body>
</html>
"""


def _stat(value: str, label: str) -> str:
    return f'<div class="stat"><div class="stat-value">{value}</div><div class="stat-label">{label}</div></div>'


def _sprint_html(view: SprintView) -> str:
    if view.converters:
        converter_rows = "\n".join(
            f'<tr class="performer"><td class="rank">{c.rank}</td><td>{c.name}</td>'
            f"<td>{c.conversions}</td><td>{c.components}</td></tr>"
            for c in view.converters
        )
        converters = f"""<table>
<thead><tr><th>Rank</th><th>Name</th><th>Conversions</th><th>Components Converted</th></tr></thead>
<tbody>
{converter_rows}
</tbody>
</table>"""
    else:
        converters = '<p class="empty">No conversions recorded this sprint.</p>'

    if view.offences:
        offence_rows = "\n".join(
            f'<tr class="offender"><td title="{o.file_path}">{o.component}</td>'
            f"<td>{o.engineer}</td><td>{o.legacy_library}</td></tr>"
            for o in view.offences
        )
        offences = f"""<table>
<thead><tr><th>Component</th><th>Name</th><th>Legacy library</th></tr></thead>
<tbody>
{offence_rows}
</tbody>
</table>"""
    else:
        offences = '<p class="empty">No offenders found. Every touched component uses the target library.</p>'

    stats = "\n".join(
        [
            _stat(str(view.total_offences), "Total offences"),
            _stat(str(view.total_conversions), "Total conversions"),
            _stat(f"{view.adoption_rate}%", "Adoption rate"),
        ]
    )

    body = f"""<div id="header">
  <h1>UI Adoption Sprint Report</h1>
  <p>{view.sprint_id} &middot; Report date: {view.generated_date} &middot; Period: {view.window}</p>
</div>
<div id="summary">
{stats}
</div>
<section>
  <div class="tabs">
    <button class="tab-button active" onclick="showTab('top-converters', this)">Top Converters</button>
    <button class="tab-button" onclick="showTab('offences', this)">Offences</button>
  </div>
  <div id="top-converters" class="tab-content active">
    <h2>Top Converters</h2>
    <p class="note">Engineers who converted the most components to the target library this sprint.</p>
    {converters}
  </div>
  <div id="offences" class="tab-content">
    <h2>Offences</h2>
    <p class="note">Components modified this sprint that still depend on a legacy library.</p>
    {offences}
  </div>
</section>"""

    return _page("UI Adoption Sprint Report", body, _TAB_SCRIPT)


def _bar_list(rows: Tuple[BarRow, ...], empty: str) -> str:
    if not rows:
        return f'<p class="empty">{empty}</p>'
    return "\n".join(
        f'<div class="bar-row"><div><div class="bar-name">{r.name}</div>'
        f'<div class="bar"><div class="bar-fill" style="width: {r.percent}%"></div></div></div>'
        f'<div class="bar-count">{r.count}</div></div>'
        for r in rows
    )


def _system_html(view: SystemView) -> str:
    stats = "\n".join(
        [
            _stat(str(view.total_files), "Total UI files"),
            _stat(str(view.target_count), "Target components"),
            _stat(str(view.legacy_count), "Legacy components"),
            _stat(str(view.mixed_count), "Mixed components"),
            _stat(str(view.no_ui_count), "No UI"),
            _stat(f"{view.adoption_rate}%", "Adoption rate"),
        ]
    )

    if view.legacy_files:
        file_rows = "\n".join(
            f"<tr><td>{f.path}</td><td>{f.module}</td><td>{f.category}</td><td>{f.libraries}</td></tr>"
            for f in view.legacy_files
        )
        files = f"""<table>
<thead><tr><th>File</th><th>Module</th><th>Category</th><th>Legacy imports</th></tr></thead>
<tbody>
{file_rows}
</tbody>
</table>"""
    else:
        files = '<p class="empty">No files depend on legacy libraries.</p>'

    note = ""
    if view.records_shown < view.total_files:
        note = f'<p class="note">Showing files from the first {view.records_shown} of {view.total_files} scanned.</p>'

    body = f"""<div id="header">
  <h1>System-Wide UI Analysis</h1>
  <p>Complete codebase UI composition &middot; Analysis date: {view.analysis_date}</p>
</div>
<div id="summary">
{stats}
</div>
<section class="columns">
  <div>
    <h2>Legacy Library Usage</h2>
    {_bar_list(view.legacy_bars, "No legacy libraries detected.")}
  </div>
  <div>
    <h2>Target Library Usage</h2>
    {_bar_list(view.target_bars, "No target library imports detected.")}
  </div>
</section>
<section>
  <h2>Module Distribution</h2>
  {_bar_list(view.module_bars, "No files scanned.")}
</section>
<section>
  <h2>Files Still On Legacy Libraries</h2>
  {note}
  {files}
</section>"""

    return _page("System-Wide UI Analysis", body)
