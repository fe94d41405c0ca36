"""
Database infrastructure package.

Re-exports commonly used database components for convenient imports.
"""

from .connection import (
    Base,
    create_engine_for,
    create_session_factory,
    get_database_type,
    init_db,
    retry_on_db_lock,
)
from .models import KeyValueItem
from .write_queue import WriteQueue

__all__ = [
    # Connection
    "Base",
    "create_engine_for",
    "create_session_factory",
    "get_database_type",
    "init_db",
    "retry_on_db_lock",
    # Models
    "KeyValueItem",
    # Write queue
    "WriteQueue",
]
