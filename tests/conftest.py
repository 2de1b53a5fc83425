"""
Root Pytest Fixtures.

Shared fixtures available to all tests.
"""

from collections.abc import Generator

import pytest

import httpie_lite.cli.client as client_module
from httpie_lite.core.config import get_app_config
from httpie_lite.core.logging import setup_logging


@pytest.fixture(autouse=True)
def _reset_state() -> Generator[None, None, None]:
    """Fresh config cache, client singleton and log handlers for every test."""
    get_app_config.cache_clear()
    client_module._client = None
    setup_logging(level="WARNING", format_type="console")
    yield
    client_module._client = None
    get_app_config.cache_clear()
