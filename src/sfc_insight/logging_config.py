"""
Logging configuration for SFC Insight.

Provides structured logging with rich formatting on stderr, leaving stdout
free for the report itself.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """
    Configure logging with rich handler for colored output.

    Args:
        verbose: Enable DEBUG level logging
        quiet: Suppress all but ERROR level logging

    Returns:
        Configured logger instance for sfc_insight
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    # Reports go to stdout; every log record, unclassified diagnostics
    # included, goes to stderr so the two never interleave.
    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_time=verbose,
        show_path=verbose,
    )

    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=[handler], force=True
    )

    logger = logging.getLogger("sfc_insight")
    logger.setLevel(level)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Module name (e.g., 'sfc_insight.analysis.aggregator')
              If None, returns the root sfc_insight logger

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger("sfc_insight")

    if not name.startswith("sfc_insight"):
        name = f"sfc_insight.{name}"

    return logging.getLogger(name)
