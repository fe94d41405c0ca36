"""
Conftest for integration tests.

Automatically applies the 'integration' marker to all tests in this directory.
"""

import pytest

# Apply 'integration' marker to all tests in this directory
pytestmark = pytest.mark.integration


@pytest.fixture
def sqlite_url(tmp_path) -> str:
    """URL of a throwaway SQLite database file."""
    return f"sqlite+aiosqlite:///{tmp_path / 'fundumo-test.db'}"
