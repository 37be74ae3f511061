"""Dashboard CLI command -- re-render the sprint dashboard from a saved report."""

from rich.markup import escape

from ..config import SPRINT_DASHBOARD_FILENAME, SPRINT_REPORT_FILENAME
from ..exceptions import UIAdoptionError
from ..persistence import load_sprint_report
from ..visualization import render_sprint_dashboard, write_dashboard
from . import app
from ._common import console, fail, output_path


@app.command()
def dashboard():
    """
    Regenerate sprint-dashboard.html from the saved sprint-report.json.
    """
    try:
        report = load_sprint_report(output_path(SPRINT_REPORT_FILENAME))
    except UIAdoptionError as e:
        fail(e)

    path = write_dashboard(render_sprint_dashboard(report), output_path(SPRINT_DASHBOARD_FILENAME))

    console.print("[green]Sprint dashboard generated.[/green]")
    console.print(f"Dashboard saved to: [bold green]{escape(str(path))}[/bold green]")
    console.print(f"Report date: {escape(report.generated_date)}")
    console.print(f"Total offences: {len(report.offenses)}")
    console.print(f"Total conversions: {report.total_conversions}")
    console.print(f"Adoption rate: {report.summary.adoption_rate_percent}%")
