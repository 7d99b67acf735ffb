"""
Root Pytest Fixtures.

Shared fixtures available to all test types.
"""

import logging
from collections.abc import Generator
from logging.handlers import RotatingFileHandler

import pytest
import structlog

from amp_cli.core.config import get_app_config


# =============================================================================
# Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _clear_config_cache() -> Generator[None, None, None]:
    """Clear lru_cache between tests so each test gets a fresh load."""
    get_app_config.cache_clear()
    yield
    get_app_config.cache_clear()


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None, None, None]:
    """
    Drop handlers installed by setup_logging after each test.

    CliRunner swaps sys.stderr during invoke, so a handler created inside
    one invocation must not outlive it.
    """
    root_logger = logging.getLogger()
    original_level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if type(handler) in (logging.StreamHandler, RotatingFileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(original_level)
    structlog.reset_defaults()

