"""
Value objects: immutable constants and enums shared by the stores.
"""

from .enums import (
    ANONYMOUS_CODE_LENGTH,
    ANONYMOUS_CODE_PREFIX,
    MAX_EVENT_HIGHLIGHTS,
    MAX_EVENT_SUMMARIES,
    MAX_EVENT_TAGS,
    MAX_MEMORY_ENTRIES,
    MAX_MEMORY_TAGS,
    MAX_RESURFACED,
    MEDIA_COUNT_MAX,
    MEDIA_COUNT_MIN,
    SURFACING_WINDOW_DAYS,
    StoreKey,
)

__all__ = [
    "StoreKey",
    "MAX_EVENT_SUMMARIES",
    "MAX_MEMORY_ENTRIES",
    "MAX_EVENT_HIGHLIGHTS",
    "MAX_EVENT_TAGS",
    "MAX_MEMORY_TAGS",
    "MEDIA_COUNT_MIN",
    "MEDIA_COUNT_MAX",
    "SURFACING_WINDOW_DAYS",
    "MAX_RESURFACED",
    "ANONYMOUS_CODE_PREFIX",
    "ANONYMOUS_CODE_LENGTH",
]
