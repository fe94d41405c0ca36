"""
Memory Lane Store.

Owns journal memories (at most 120, newest first) and derives the handful that
resurface today: memories whose anniversary is within three weeks of the
reference date.
"""

from typing import Iterable, List, Optional

from domain.entities.records import MemoryEntry, ResurfacedMemory
from domain.services.identifiers import generate_id
from domain.services.resurfacing import compute_resurfaced
from domain.services.sanitation import clean_optional_text, clean_text, require_text, sanitize_tags
from domain.value_objects.enums import MAX_MEMORY_ENTRIES, MAX_MEMORY_TAGS
from schemas.state import MemoryLaneState
from utils.dates import DateLike, start_of_day

from services.base_store import BaseStore


class MemoryLaneStore(BaseStore[MemoryEntry, MemoryLaneState]):
    """Memories plus the resurfaced-today subset."""

    record_model = MemoryEntry
    collection_key = "entries"
    max_records = MAX_MEMORY_ENTRIES

    def __init__(self, *args, **kwargs):
        self._resurfaced: List[ResurfacedMemory] = []
        super().__init__(*args, **kwargs)

    def _recompute(self) -> None:
        self._resurfaced = compute_resurfaced(self._records, self._now())

    def snapshot(self) -> MemoryLaneState:
        return MemoryLaneState(entries=list(self._records), resurfaced=list(self._resurfaced))

    @property
    def entries(self) -> List[MemoryEntry]:
        return list(self._records)

    @property
    def resurfaced(self) -> List[ResurfacedMemory]:
        return list(self._resurfaced)

    # =========================================================================
    # Mutations
    # =========================================================================

    def add_memory(
        self,
        title: str,
        description: str,
        captured_on: DateLike,
        tags: Iterable[str] = (),
        mood: Optional[str] = None,
    ) -> MemoryEntry:
        """
        Record a memory and put it first.

        Args:
            title: Required; trimmed
            description: Trimmed, may be empty
            captured_on: Any moment on the day the memory is from; stored at midnight
            tags: Trimmed, lowercased, de-duplicated, at most 10 kept
            mood: Optional; blank is treated as absent

        Returns:
            The stored memory

        Raises:
            ValidationError: If the title is blank
        """
        entry = MemoryEntry(
            id=generate_id(),
            title=require_text(title, "title", "Memory title is required."),
            description=clean_text(description),
            captured_on=start_of_day(captured_on),
            tags=sanitize_tags(tags, MAX_MEMORY_TAGS),
            mood=clean_optional_text(mood),
            created_at=self._now(),
        )
        self._commit([entry, *self._records])
        self.logger.debug(f"Added memory {entry.id} ({len(self._resurfaced)} resurfaced)")
        return entry

    def delete_memory(self, entry_id: str) -> None:
        """Remove a memory. Unknown ids are ignored."""
        self._commit(entry for entry in self._records if entry.id != entry_id)

    def refresh_resurfaced(self, reference_date: Optional[DateLike] = None) -> List[ResurfacedMemory]:
        """
        Recompute the resurfaced subset against `reference_date` (default: now).

        Entries are left untouched.

        Returns:
            The resurfaced memories, closest anniversary first
        """
        reference = reference_date if reference_date is not None else self._now()
        self._resurfaced = compute_resurfaced(self._records, reference)
        self._notify()
        self._persist()
        return list(self._resurfaced)

    # =========================================================================
    # Queries
    # =========================================================================

    def sorted_entries(self) -> List[MemoryEntry]:
        """Memories by capture date, most recent first."""
        return sorted(self._records, key=lambda entry: entry.captured_on, reverse=True)
