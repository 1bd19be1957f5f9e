"""
Root Pytest Fixtures.

Shared fixtures available to all test types.
"""

import pytest

from shortlink.core.config import get_app_config


@pytest.fixture(autouse=True)
def _fresh_app_config():
    """Each test sees configuration loaded from its own working directory."""
    get_app_config.cache_clear()
    yield
    get_app_config.cache_clear()
