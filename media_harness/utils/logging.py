"""Logging setup for the harness CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "INFO", verbose: bool = False) -> None:
    """Configure root logging with a rich handler on stderr.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)
        verbose: Include logger names and source paths in each line
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=verbose,
        rich_tracebacks=verbose,
        markup=False,
    )
    fmt = "%(name)s: %(message)s" if verbose else "%(message)s"

    logging.basicConfig(level=numeric_level, format=fmt, datefmt="[%X]", handlers=[handler], force=True)
