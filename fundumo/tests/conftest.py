"""
Pytest configuration and shared fixtures for the store tests.

Stores are always built fresh per test on an in-memory backend; nothing is
shared between tests.
"""

import sys
from pathlib import Path

import pytest

# Add fundumo directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# Import store fixtures to make them available to all tests
from tests.fixtures.store_fixtures import (  # noqa: E402, F401
    clock,
    event_store,
    feedback_store,
    memory_backend,
    memory_store,
    storage,
    write_queue,
)


def pytest_collection_modifyitems(items):
    """Auto-apply markers based on test directory."""
    for item in items:
        filepath = str(item.fspath)
        if "/tests/unit/" in filepath:
            item.add_marker(pytest.mark.unit)
        elif "/tests/integration/" in filepath:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop the cached settings around every test so env changes are picked up."""
    from core import reset_settings

    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def logging_setup_calls(monkeypatch):
    """
    Record the app factory's logging setup instead of reconfiguring the root logger.

    setup_logging(force=True) would replace pytest's capture handlers mid-test.
    """
    import core.app_factory

    calls = []
    monkeypatch.setattr(core.app_factory, "setup_logging", lambda debug_mode=False: calls.append(debug_mode))
    return calls
