"""Shared CLI helpers."""

from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from ..config import TrackerConfig, data_dir, load_config
from ..exceptions import UIAdoptionError

console = Console()
err_console = Console(stderr=True)


def output_path(filename: str) -> Path:
    """Fixed location of a generated file inside the data directory."""
    return data_dir() / filename


def fail(error: UIAdoptionError) -> NoReturn:
    """Print a fatal error with its remediation hint and exit with status 1."""
    err_console.print(f"[red]Error:[/red] {escape(str(error))}")
    if error.hint:
        err_console.print(f"[yellow]Hint:[/yellow] {escape(error.hint)}")
    raise typer.Exit(1)


def resolve_settings() -> TrackerConfig:
    """Load the configuration from the data directory or exit."""
    try:
        return load_config()
    except UIAdoptionError as e:
        fail(e)
