"""Tag frequency aggregation for event recaps."""

from typing import Dict, List, Optional, Sequence, Tuple

from domain.entities.records import EventSummary


def build_tag_cloud(summaries: Sequence[EventSummary]) -> Dict[str, int]:
    """Count, for every tag, how many summaries carry it. Keys keep first-seen order."""
    cloud: Dict[str, int] = {}
    for summary in summaries:
        for tag in summary.tags:
            cloud[tag] = cloud.get(tag, 0) + 1
    return cloud


def rank_tags(cloud: Dict[str, int], limit: Optional[int] = None) -> List[Tuple[str, int]]:
    """Most frequent tags first; equal counts keep the cloud's order."""
    ranked = sorted(cloud.items(), key=lambda item: item[1], reverse=True)
    return ranked if limit is None else ranked[:limit]
