"""
Services layer: the persisted stores and the persistence wrapper they share.
"""

from .base_store import BaseStore
from .event_summary_store import EventSummaryStore
from .feedback_store import FeedbackStore
from .memory_lane_store import MemoryLaneStore
from .persistence_manager import PersistenceManager

__all__ = [
    "BaseStore",
    "PersistenceManager",
    "EventSummaryStore",
    "FeedbackStore",
    "MemoryLaneStore",
]
