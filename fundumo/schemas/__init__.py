"""Pydantic schemas for store snapshots."""

from .state import EventSummaryState, FeedbackState, MemoryLaneState

__all__ = [
    "EventSummaryState",
    "FeedbackState",
    "MemoryLaneState",
]
