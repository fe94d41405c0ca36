"""
Record models using Pydantic.

These are the canonical, already-sanitized records each store owns. Records are
frozen; a store replaces a record (model_copy) rather than mutating it.
Persisted field names are camelCase via the alias generator, and every
timestamp is held as naive local time.
"""

from datetime import datetime
from typing import List, Optional

from domain.value_objects.enums import MEDIA_COUNT_MAX, MEDIA_COUNT_MIN
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from utils.dates import to_local_naive


class RecordModel(BaseModel):
    """Base for persisted records: immutable, camelCase on the wire."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_validator("*", mode="after")
    @classmethod
    def normalize_datetimes(cls, v):
        """Store every timestamp as naive local time."""
        if isinstance(v, datetime):
            return to_local_naive(v)
        return v


class EventHighlight(RecordModel):
    """A single highlight line of an event recap."""

    id: str
    text: str


class EventSummary(RecordModel):
    """An event recap."""

    id: str
    title: str
    description: str = ""
    date: datetime
    media_count: int = Field(default=0, ge=MEDIA_COUNT_MIN, le=MEDIA_COUNT_MAX)
    highlights: List[EventHighlight] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    created_at: datetime


class MemoryEntry(RecordModel):
    """A memory lane journal entry. captured_on is always at midnight."""

    id: str
    title: str
    description: str = ""
    captured_on: datetime
    tags: List[str] = Field(default_factory=list)
    mood: Optional[str] = None
    created_at: datetime


class ResurfacedMemory(MemoryEntry):
    """A memory whose anniversary falls near the reference date (derived, never stored on its own)."""

    resurfaced_on: datetime
    days_offset: int = Field(ge=0)


class FeedbackEntry(RecordModel):
    """An anonymous feedback submission."""

    id: str
    topic: str
    message: str = ""
    mood: Optional[str] = None
    created_at: datetime
    anonymous_code: str
    shared_at: Optional[datetime] = None
    resolved_at: Optional[datetime] = None

    @property
    def is_resolved(self) -> bool:
        return self.resolved_at is not None
