"""
Pure domain logic: sanitation, identifiers and derived-view computations.
"""

from .identifiers import generate_anonymous_code, generate_id, generate_short_id
from .resurfacing import anniversary_offset, compute_resurfaced
from .sanitation import (
    clamp_media_count,
    clean_optional_text,
    clean_text,
    require_text,
    sanitize_highlights,
    sanitize_tags,
)
from .tag_cloud import build_tag_cloud, rank_tags

__all__ = [
    "generate_id",
    "generate_short_id",
    "generate_anonymous_code",
    "anniversary_offset",
    "compute_resurfaced",
    "require_text",
    "clean_text",
    "clean_optional_text",
    "clamp_media_count",
    "sanitize_tags",
    "sanitize_highlights",
    "build_tag_cloud",
    "rank_tags",
]
