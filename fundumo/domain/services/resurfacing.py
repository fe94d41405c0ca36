"""
Anniversary-window resurfacing for memory lane entries.

Given a reference date, every memory's captured date is re-stamped into the
reference year and compared by calendar days. Memories whose anniversary lies
within the window are returned closest-first.
"""

from datetime import datetime
from typing import List, Optional, Sequence

from domain.entities.records import MemoryEntry, ResurfacedMemory
from domain.value_objects.enums import MAX_RESURFACED, SURFACING_WINDOW_DAYS
from utils.dates import DateLike, difference_in_calendar_days, set_year, start_of_day


def anniversary_offset(captured_on: DateLike, reference: datetime) -> int:
    """
    Absolute calendar-day distance between a capture date's anniversary and the reference.

    The anniversary is taken in the reference's year only; it does not wrap into
    the previous or following year.
    """
    comparable = set_year(captured_on, reference.year)
    return abs(difference_in_calendar_days(comparable, reference))


def compute_resurfaced(
    entries: Sequence[MemoryEntry],
    now: DateLike,
    window_days: int = SURFACING_WINDOW_DAYS,
    limit: Optional[int] = MAX_RESURFACED,
) -> List[ResurfacedMemory]:
    """
    Select the memories that resurface on `now`.

    Args:
        entries: Memory entries in store order
        now: Reference moment; only its calendar date matters
        window_days: Maximum anniversary distance, inclusive
        limit: Maximum number of memories returned (None for no cap)

    Returns:
        Resurfaced memories sorted by ascending days_offset. Ties keep the
        order of `entries` (sorted() is stable).
    """
    if not entries:
        return []

    today_midnight = start_of_day(now)
    candidates: List[ResurfacedMemory] = []
    for entry in entries:
        offset = anniversary_offset(entry.captured_on, today_midnight)
        if offset > window_days:
            continue
        candidates.append(
            ResurfacedMemory(
                **entry.model_dump(),
                resurfaced_on=today_midnight,
                days_offset=offset,
            )
        )

    ordered = sorted(candidates, key=lambda memory: memory.days_offset)
    return ordered if limit is None else ordered[:limit]
