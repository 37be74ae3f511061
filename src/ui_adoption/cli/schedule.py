"""Schedule CLI command -- cron instructions for periodic sprint reports."""

from rich.markup import escape

from ..config import data_dir
from . import app
from ._common import console

# (cron weekday, sprint end day, report day)
_SCHEDULES = [
    (0, "Fridays", "Sundays"),
    (5, "Wednesdays", "Fridays"),
    (4, "Tuesdays", "Thursdays"),
]


@app.command()
def schedule():
    """
    Print crontab lines that run the sprint report every two days after sprint end.
    """
    workdir = escape(str(data_dir().resolve()))

    console.print("[bold]Automating sprint reports[/bold]\n")
    console.print("1. Open your crontab:")
    console.print("   crontab -e\n")
    console.print("2. Add the line matching your sprint schedule:\n")
    for weekday, sprint_end, report_day in _SCHEDULES:
        console.print(f"   # Sprints ending on {sprint_end} (run on {report_day}):")
        console.print(f"   0 9 * * {weekday} cd {workdir} && ui-adoption sprint\n", soft_wrap=True)
    console.print("3. The dashboard is written to sprint-dashboard.html in that directory.")
    console.print("   Regenerate it from the last report with: ui-adoption dashboard")
