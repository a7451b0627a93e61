"""Shared fixtures for CLI command tests."""

import logging
from collections.abc import Generator

import pytest
from click.testing import CliRunner

from legalchunk.lib.logging_config import PACKAGE_LOGGER


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_package_logger() -> Generator[None, None, None]:
    """Drop handlers bound to CliRunner streams after each command test."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers = logger.handlers[:]
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate
