"""
Logging setup for the validation-report CLI.

Library modules only create loggers; the CLI decides where they go.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


LOGGER_NAME = "validation_report"


def configure_logging(verbosity: int = 0) -> None:
    """
    Route package logs to stderr through rich.

    Args:
        verbosity: 0=WARNING (default), 1=INFO, 2+=DEBUG
    """
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Repeated calls (e.g. several CLI invocations in one process) reuse the handler
    for handler in logger.handlers:
        if isinstance(handler, RichHandler):
            handler.setLevel(level)
            return

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
