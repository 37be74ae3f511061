"""Setup CLI command -- interactively write the configuration file."""

from pathlib import Path

import typer
from rich.markup import escape

from ..config import TrackerConfig, default_config_path, load_config, save_config, validate_source_repo
from ..exceptions import ConfigurationError
from . import app
from ._common import console, fail


@app.command()
def setup():
    """
    Point the tracker at your frontend repository.

    Prompts for the repository path and sprint schedule and writes
    config.json to the data directory.
    """
    config_path = default_config_path()

    if config_path.exists():
        try:
            current = load_config(config_path, check_paths=False)
            console.print(f"Current frontend repo path: [bold]{escape(current.source_repo_path)}[/bold]")
        except ConfigurationError as e:
            console.print(f"[yellow]Existing configuration is invalid:[/yellow] {escape(str(e))}")
        if not typer.confirm("Do you want to update the configuration?", default=False):
            console.print("Setup cancelled.")
            raise typer.Exit(0)

    console.print("Example: /Users/username/projects/my-frontend-app")
    repo_path = typer.prompt("Frontend repo path")
    root = Path(repo_path).expanduser().resolve()

    try:
        validate_source_repo(root)
    except ConfigurationError as e:
        fail(e)

    sprint_length = typer.prompt("Sprint length (days)", default=14, type=int)
    days_since_end = typer.prompt("Days between sprint end and report", default=2, type=int)

    try:
        config = TrackerConfig(
            source_repo_path=str(root),
            sprint_length_days=sprint_length,
            days_since_sprint_end=days_since_end,
        )
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    saved = save_config(config, config_path)

    console.print(f"\n[green]Configuration saved to {escape(str(saved))}[/green]\n")
    console.print("You can now run:")
    console.print("  ui-adoption sprint")
    console.print("  ui-adoption system")
