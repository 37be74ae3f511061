"""Sprint CLI command -- analyze the last completed sprint."""

import typer
from rich.markup import escape
from rich.table import Table

from ..analysis import SprintAnalyzer
from ..config import SPRINT_DASHBOARD_FILENAME, SPRINT_REPORT_FILENAME
from ..exceptions import UIAdoptionError
from ..logging_config import setup_logging
from ..models import SprintReport
from ..persistence import save_report
from ..visualization import render_sprint_dashboard, write_dashboard
from . import app
from ._common import console, err_console, fail, output_path, resolve_settings


def print_sprint_summary(report: SprintReport) -> None:
    """Print the sprint summary table and the offender verdict."""
    summary = report.summary
    table = Table(title=f"{report.sprint_id} ({report.window_descriptor})", show_header=False)
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("Components modified", str(summary.total_files))
    table.add_row("Target components", f"{summary.target_count} ({summary.adoption_rate_percent}%)")
    table.add_row("Legacy components", str(summary.legacy_count))
    table.add_row("Mixed components", str(summary.mixed_count))
    table.add_row("No UI components", str(summary.no_ui_count))
    table.add_row("Conversions", str(report.total_conversions))
    console.print(table)

    if report.has_offenders:
        console.print(
            f"[red]{len(report.offenses)} offenders found.[/red] Check the dashboard for details."
        )
    else:
        console.print("[green]No offenders found![/green] All touched components use the target library.")


@app.command()
def sprint():
    """
    Analyze UI files changed during the last completed sprint.

    Reads the configuration written by [bold]setup[/bold], lists files changed
    in the sprint window via git, classifies them and writes
    sprint-report.json and sprint-dashboard.html to the data directory.
    """
    config = resolve_settings()
    logger = setup_logging(verbose=config.verbose)

    console.print(f"Analyzing repo: [bold]{escape(str(config.root))}[/bold]")

    try:
        report = SprintAnalyzer(config).run()
        report_path = save_report(report, output_path(SPRINT_REPORT_FILENAME))
        dashboard_path = write_dashboard(
            render_sprint_dashboard(report), output_path(SPRINT_DASHBOARD_FILENAME)
        )
    except UIAdoptionError as e:
        fail(e)
    except OSError as e:
        logger.exception("Sprint analysis failed")
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    print_sprint_summary(report)
    console.print(f"\nReport saved to: [bold green]{escape(str(report_path))}[/bold green]")
    console.print(f"Dashboard saved to: [bold green]{escape(str(dashboard_path))}[/bold green]")
