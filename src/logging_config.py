"""Logging configuration.

Logs go to stderr through rich so they never interleave with the task and
report text printed on stdout.
"""
import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGERS = ("validator", "roles", "task", "report", "simulation")


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """
    Configure the simulation's loggers with a rich handler.

    Args:
        verbose: Enable DEBUG level logging
        quiet: Suppress all but ERROR level logging

    Returns:
        The simulation logger
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_time=verbose,
        show_path=verbose,
    )
    for name in ROOT_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers.clear()
        logger.addHandler(handler)
        logger.propagate = False

    return logging.getLogger("simulation")
