"""
Domain layer for the record-keeping stores.

Structure:
- entities/: Canonical records (EventSummary, MemoryEntry, FeedbackEntry, ...)
- value_objects/: Store keys and fixed limits
- services/: Pure domain logic (sanitation, identifiers, tag cloud, resurfacing)
"""

from .entities import (
    EventHighlight,
    EventSummary,
    FeedbackEntry,
    MemoryEntry,
    ResurfacedMemory,
)
from .exceptions import (
    ConfigurationError,
    FundumoError,
    PersistenceError,
    PersistenceReadError,
    PersistenceWriteError,
    ValidationError,
)
from .value_objects import StoreKey

__all__ = [
    # Entities
    "EventHighlight",
    "EventSummary",
    "MemoryEntry",
    "ResurfacedMemory",
    "FeedbackEntry",
    # Exceptions
    "FundumoError",
    "ValidationError",
    "PersistenceError",
    "PersistenceReadError",
    "PersistenceWriteError",
    "ConfigurationError",
    # Value objects
    "StoreKey",
]
