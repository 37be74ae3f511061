"""CLI entry point - registers all subcommands."""

import typer

app = typer.Typer(
    name="ui-adoption",
    help="UI Adoption Tracker - measure migration from legacy UI libraries",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def main() -> None:
    app()


# Import subcommands to register them
from .configure import setup as _setup  # noqa: F401, E402
from .sprint import sprint as _sprint  # noqa: F401, E402
from .dashboard import dashboard as _dashboard  # noqa: F401, E402
from .system import system as _system  # noqa: F401, E402
from .schedule import schedule as _schedule  # noqa: F401, E402
