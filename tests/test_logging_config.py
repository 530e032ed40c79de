"""Tests for logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from sfc_insight.logging_config import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    package = logging.getLogger("sfc_insight")
    saved = (root.level, list(root.handlers), package.level)
    yield
    root.setLevel(saved[0])
    root.handlers[:] = saved[1]
    package.setLevel(saved[2])


@pytest.mark.parametrize(
    "verbose, quiet, level",
    [
        (False, False, logging.WARNING),
        (True, False, logging.DEBUG),
        (False, True, logging.ERROR),
        (True, True, logging.ERROR),
    ],
)
def test_levels(verbose, quiet, level):
    logger = setup_logging(verbose=verbose, quiet=quiet)
    assert logger.name == "sfc_insight"
    assert logger.level == level


def test_single_stderr_rich_handler():
    setup_logging()
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], RichHandler)
    assert handlers[0].console.stderr is True


class TestGetLogger:
    def test_package_logger(self):
        assert get_logger().name == "sfc_insight"

    def test_prefixes_bare_names(self):
        assert get_logger("diagnostics").name == "sfc_insight.diagnostics"

    def test_keeps_qualified_names(self):
        assert get_logger("sfc_insight.cli").name == "sfc_insight.cli"
