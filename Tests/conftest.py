"""
Root conftest.py for shared test fixtures and configuration.
This file provides common fixtures used across the test suite.
"""

import pytest
import tempfile
import shutil
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock
import sys

from loguru import logger

# Add project root to Python path for consistent imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


# ========== Path and File System Fixtures ==========

@pytest.fixture
def isolated_temp_dir():
    """Create an isolated temporary directory that's always cleaned up."""
    temp_dir = tempfile.mkdtemp(prefix="chatbook_nav_test_")
    temp_path = Path(temp_dir)
    yield temp_path
    # Ensure cleanup even if test fails
    if temp_path.exists():
        shutil.rmtree(temp_dir, ignore_errors=True)


# ========== Logging Fixtures ==========

@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during the test."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


# ========== Config Fixtures ==========

@pytest.fixture
def clean_settings_cache(monkeypatch):
    """Drop the cached settings and any config env vars around a test."""
    from chatbook_nav import config

    monkeypatch.delenv(config.CONFIG_PATH_ENV_VAR, raising=False)
    monkeypatch.delenv(config.LOG_LEVEL_ENV_VAR, raising=False)
    monkeypatch.setattr(config, "_SETTINGS_CACHE", None)
    yield config
    monkeypatch.setattr(config, "_SETTINGS_CACHE", None)


# ========== Mock Fixtures ==========

@pytest.fixture
def mock_app():
    """Mock Textual app with an awaitable switch_screen."""
    app = MagicMock()
    app.switch_screen = AsyncMock()
    return app


# ========== Navigation Fixtures ==========

@pytest.fixture
def main_state():
    from chatbook_nav.state.navigation_state import get_state_for_route
    return get_state_for_route("main")


@pytest.fixture
def deep_stack():
    """A three-deep stack, as left behind by an account/password flow."""
    from chatbook_nav.state.navigation_state import NavigationState, Route
    return NavigationState(
        index=2,
        routes=(
            Route(key="one", route_name="account"),
            Route(key="two", route_name="realm"),
            Route(key="password", route_name="password"),
        ),
    )
