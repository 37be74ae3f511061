"""System CLI command -- full-tree UI composition analysis."""

from typing import Dict

import typer
from rich.markup import escape
from rich.progress import BarColumn, Progress, TaskProgressColumn, TextColumn
from rich.table import Table

from ..aggregation import sorted_breakdown
from ..analysis import SystemAnalyzer
from ..config import SYSTEM_DASHBOARD_FILENAME, SYSTEM_REPORT_FILENAME
from ..exceptions import UIAdoptionError
from ..logging_config import setup_logging
from ..models import SystemReport
from ..persistence import save_report
from ..visualization import render_system_dashboard, write_dashboard
from . import app
from ._common import console, err_console, fail, output_path, resolve_settings


def _breakdown_table(title: str, breakdown: Dict[str, int], empty: str) -> Table:
    table = Table(title=title, title_justify="left")
    table.add_column("Name")
    table.add_column("Files", justify="right")
    for name, count in sorted_breakdown(breakdown):
        table.add_row(escape(name), str(count))
    if not breakdown:
        table.add_row(f"[dim]{empty}[/dim]", "")
    return table


def print_system_summary(report: SystemReport) -> None:
    summary = report.summary
    table = Table(title=f"System-wide UI analysis ({report.analysis_date})", show_header=False)
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("Total UI files", str(summary.total_files))
    table.add_row("Target components", f"{summary.target_count} ({summary.adoption_rate_percent}%)")
    table.add_row("Legacy components", str(summary.legacy_count))
    table.add_row("Mixed components", str(summary.mixed_count))
    table.add_row("No UI components", str(summary.no_ui_count))
    console.print(table)

    console.print(
        _breakdown_table(
            "Legacy library breakdown", report.legacy_breakdown, "No legacy libraries detected"
        )
    )
    console.print(
        _breakdown_table(
            "Target library usage", report.target_library_breakdown, "No target imports detected"
        )
    )
    console.print(_breakdown_table("Module breakdown", report.module_breakdown, "No modules"))


@app.command()
def system():
    """
    Classify every UI file under the configured target directories.

    Writes system-report.json and system-dashboard.html to the data
    directory.
    """
    config = resolve_settings()
    logger = setup_logging(verbose=config.verbose)

    console.print(f"Analyzing repo: [bold]{escape(str(config.root))}[/bold]")

    try:
        with Progress(
            TextColumn("[bold]{task.description}"),
            BarColumn(bar_width=40, complete_style="cyan", finished_style="green"),
            TaskProgressColumn(),
            console=console,
            transient=True,
        ) as progress:
            task_id = progress.add_task("Classifying files", total=None)

            def on_progress(done: int, total: int) -> None:
                progress.update(task_id, completed=done, total=total)

            report = SystemAnalyzer(config).run(progress_callback=on_progress)

        report_path = save_report(report, output_path(SYSTEM_REPORT_FILENAME))
        dashboard_path = write_dashboard(
            render_system_dashboard(report), output_path(SYSTEM_DASHBOARD_FILENAME)
        )
    except UIAdoptionError as e:
        fail(e)
    except OSError as e:
        logger.exception("System analysis failed")
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    print_system_summary(report)
    console.print(f"\nReport saved to: [bold green]{escape(str(report_path))}[/bold green]")
    console.print(f"Dashboard saved to: [bold green]{escape(str(dashboard_path))}[/bold green]")
