"""
Domain enums for type-safe constants.
"""

from enum import Enum


class StoreKey(str, Enum):
    """Persisted document names, one per store."""

    EVENT_SUMMARIES = "event-summaries"
    FEEDBACK = "feedback"
    MEMORY_LANE = "memory-lane"

    def __str__(self) -> str:
        return self.value


# Collection caps (insertion-order truncation, newest kept)
MAX_EVENT_SUMMARIES = 50
MAX_MEMORY_ENTRIES = 120

# Per-record sanitation limits
MAX_EVENT_HIGHLIGHTS = 8
MAX_EVENT_TAGS = 8
MAX_MEMORY_TAGS = 10
MEDIA_COUNT_MIN = 0
MEDIA_COUNT_MAX = 999

# Resurfacing
SURFACING_WINDOW_DAYS = 21
MAX_RESURFACED = 6

# Anonymous feedback codes: FUN-XXXXXXXXXX
ANONYMOUS_CODE_PREFIX = "FUN-"
ANONYMOUS_CODE_LENGTH = 10

# Namespace prepended to every persisted key
DEFAULT_STORAGE_PREFIX = "@fundumo:"
