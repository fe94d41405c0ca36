"""
Input sanitation shared by the stores.

Free text from the UI is normalized here before it becomes part of a record:
trimmed, case-folded where it is a tag, de-duplicated and capped.
"""

from typing import Iterable, List, Optional

from domain.entities.records import EventHighlight
from domain.exceptions import ValidationError
from domain.value_objects.enums import MAX_EVENT_HIGHLIGHTS, MEDIA_COUNT_MAX, MEDIA_COUNT_MIN

from .identifiers import generate_short_id


def require_text(value: str, field: str, message: str) -> str:
    """
    Trim a required field, raising ValidationError if nothing is left.

    Args:
        value: Raw user input
        field: Name of the field (carried on the error)
        message: User-presentable error message

    Returns:
        The trimmed value
    """
    trimmed = (value or "").strip()
    if not trimmed:
        raise ValidationError(field, message)
    return trimmed


def clean_text(value: Optional[str]) -> str:
    """Trim free text; None becomes the empty string."""
    return (value or "").strip()


def clean_optional_text(value: Optional[str]) -> Optional[str]:
    """Trim an optional field; blank becomes None."""
    if value is None:
        return None
    trimmed = value.strip()
    return trimmed or None


def clamp_media_count(value: float) -> int:
    return max(MEDIA_COUNT_MIN, min(MEDIA_COUNT_MAX, int(value)))


def sanitize_tags(tags: Iterable[str], limit: int) -> List[str]:
    """
    Normalize a tag list.

    Tags are trimmed and lowercased, blanks and repeats are dropped (first
    occurrence wins) and the result is capped at `limit`.
    """
    result: List[str] = []
    for tag in tags:
        normalized = tag.strip().lower()
        if normalized and normalized not in result:
            result.append(normalized)
        if len(result) >= limit:
            break
    return result


def sanitize_highlights(values: Iterable[str]) -> List[EventHighlight]:
    """Trim highlight lines, drop blanks, cap the count and give each a fresh id."""
    texts = [text.strip() for text in values]
    kept = [text for text in texts if text][:MAX_EVENT_HIGHLIGHTS]
    return [EventHighlight(id=generate_short_id(), text=text) for text in kept]
