"""Store snapshot schemas.

A snapshot is what the UI reads and what gets persisted: the collection plus the
derived view(s) computed from it. Derived views in a persisted snapshot are
never trusted on load; stores recompute them.
"""

from typing import Dict, List

from domain.entities.records import EventSummary, FeedbackEntry, MemoryEntry, RecordModel, ResurfacedMemory
from pydantic import Field


class EventSummaryState(RecordModel):
    summaries: List[EventSummary] = Field(default_factory=list)
    tag_cloud: Dict[str, int] = Field(default_factory=dict)


class FeedbackState(RecordModel):
    entries: List[FeedbackEntry] = Field(default_factory=list)
    unresolved_count: int = 0


class MemoryLaneState(RecordModel):
    entries: List[MemoryEntry] = Field(default_factory=list)
    resurfaced: List[ResurfacedMemory] = Field(default_factory=list)
