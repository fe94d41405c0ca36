"""
Entities: the canonical records owned by the stores.
"""

from .records import (
    EventHighlight,
    EventSummary,
    FeedbackEntry,
    MemoryEntry,
    RecordModel,
    ResurfacedMemory,
)

__all__ = [
    "RecordModel",
    "EventHighlight",
    "EventSummary",
    "MemoryEntry",
    "ResurfacedMemory",
    "FeedbackEntry",
]
