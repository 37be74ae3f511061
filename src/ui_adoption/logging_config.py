"""
Logging configuration for UI Adoption Tracker.

Log records go to stderr through a rich handler so they never mix with the
summaries the CLI prints on stdout. The handler is attached to the
``ui_adoption`` package logger, not the root logger, so the host process's
own logging setup is left alone.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "ui_adoption"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Route package log records to stderr.

    WARNING and above by default (unreadable files, git failures, missing
    target directories); DEBUG with phase progress when ``verbose`` is set.
    Calling it again replaces the handler from the previous call.

    Returns:
        The configured ``ui_adoption`` logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in [h for h in logger.handlers if isinstance(h, RichHandler)]:
        logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_time=verbose,
        show_path=verbose,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the package namespace.

    ``get_logger(__name__)`` inside the package returns the module's own
    logger; any other name is nested under ``ui_adoption``.
    """
    if name is None:
        return logging.getLogger(PACKAGE_LOGGER)

    if not name.startswith(PACKAGE_LOGGER):
        name = f"{PACKAGE_LOGGER}.{name}"

    return logging.getLogger(name)
