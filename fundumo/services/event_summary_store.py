"""
Event Summary Store.

Owns the event recaps and derives a tag cloud (tag -> number of recaps carrying
it). The collection keeps the 50 most recent recaps, newest first.
"""

from datetime import datetime
from typing import Dict, Iterable, List, Optional, Tuple

from domain.entities.records import EventSummary
from domain.services.identifiers import generate_id
from domain.services.sanitation import (
    clamp_media_count,
    clean_text,
    require_text,
    sanitize_highlights,
    sanitize_tags,
)
from domain.services.tag_cloud import build_tag_cloud, rank_tags
from domain.value_objects.enums import MAX_EVENT_SUMMARIES, MAX_EVENT_TAGS
from schemas.state import EventSummaryState
from utils.dates import DateLike, add_days, as_datetime, is_same_day

from services.base_store import BaseStore


class EventSummaryStore(BaseStore[EventSummary, EventSummaryState]):
    """Event recaps plus their tag cloud."""

    record_model = EventSummary
    collection_key = "summaries"
    max_records = MAX_EVENT_SUMMARIES

    def __init__(self, *args, **kwargs):
        self._tag_cloud: Dict[str, int] = {}
        super().__init__(*args, **kwargs)

    def _recompute(self) -> None:
        self._tag_cloud = build_tag_cloud(self._records)

    def snapshot(self) -> EventSummaryState:
        return EventSummaryState(summaries=list(self._records), tag_cloud=dict(self._tag_cloud))

    @property
    def summaries(self) -> List[EventSummary]:
        return list(self._records)

    @property
    def tag_cloud(self) -> Dict[str, int]:
        return dict(self._tag_cloud)

    # =========================================================================
    # Mutations
    # =========================================================================

    def add_summary(
        self,
        title: str,
        description: str,
        date: DateLike,
        media_count: float = 0,
        highlights: Iterable[str] = (),
        tags: Iterable[str] = (),
    ) -> EventSummary:
        """
        Create a recap and put it first.

        Args:
            title: Required; trimmed
            description: Trimmed, may be empty
            date: When the event happened
            media_count: Clamped to [0, 999]
            highlights: Free-text lines; blanks dropped, at most 8 kept
            tags: Trimmed, lowercased, de-duplicated, at most 8 kept

        Returns:
            The stored recap

        Raises:
            ValidationError: If the title is blank
        """
        summary = EventSummary(
            id=generate_id(),
            title=require_text(title, "title", "Event title cannot be empty."),
            description=clean_text(description),
            date=as_datetime(date),
            media_count=clamp_media_count(media_count),
            highlights=sanitize_highlights(highlights),
            tags=sanitize_tags(tags, MAX_EVENT_TAGS),
            created_at=self._now(),
        )
        self._commit([summary, *self._records])
        self.logger.debug(f"Added summary {summary.id} ({len(self._records)} total)")
        return summary

    def delete_summary(self, summary_id: str) -> None:
        """Remove a recap. Unknown ids are ignored."""
        self._commit(summary for summary in self._records if summary.id != summary_id)

    # =========================================================================
    # Queries
    # =========================================================================

    def get_summaries_for_date(self, target: DateLike) -> List[EventSummary]:
        """Recaps whose event date falls on the same calendar day as `target`."""
        return [summary for summary in self._records if is_same_day(summary.date, target)]

    def get_summaries_between(self, start: DateLike, end: DateLike) -> List[EventSummary]:
        """
        Recaps dated from `start` through `end`.

        The end bound is pushed one day later so that anything on the end day
        matches regardless of its time-of-day.
        """
        lower = as_datetime(start)
        upper = add_days(end, 1)
        return [summary for summary in self._records if lower <= summary.date <= upper]

    def top_tags(self, limit: Optional[int] = None) -> List[Tuple[str, int]]:
        """Tag cloud entries, most used first."""
        return rank_tags(self._tag_cloud, limit)
