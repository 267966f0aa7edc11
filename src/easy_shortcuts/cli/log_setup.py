"""Logging configuration for the CLI.

The library only emits debug records under the ``easy_shortcuts``
logger and stays silent by default.  ``--verbose`` routes them to stderr
through Rich's handler, or a plain stream handler without Rich.
"""

from __future__ import annotations

import logging

LOGGER_NAME: str = "easy_shortcuts"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a stderr handler to the package logger and return it."""
    logger = logging.getLogger(LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(level)

    try:
        from rich.logging import RichHandler

        from easy_shortcuts.cli.console import get_rich_console

        handler: logging.Handler = RichHandler(
            console=get_rich_console(),
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="%H:%M:%S"))
    except ModuleNotFoundError:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

    for existing in [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]:
        logger.removeHandler(existing)
    logger.addHandler(handler)
    return logger
