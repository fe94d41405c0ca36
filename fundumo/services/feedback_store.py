"""
Feedback Store.

Owns anonymous feedback entries and derives the number still unresolved. Each
entry gets an anonymous code at creation; the code is handed back to the
submitter and is the only way to tie an entry to its author.
"""

from typing import List, Optional

from domain.entities.records import FeedbackEntry
from domain.services.identifiers import generate_anonymous_code, generate_id
from domain.services.sanitation import clean_optional_text, clean_text, require_text
from schemas.state import FeedbackState

from services.base_store import BaseStore


class FeedbackStore(BaseStore[FeedbackEntry, FeedbackState]):
    """Feedback entries plus the unresolved counter."""

    record_model = FeedbackEntry
    collection_key = "entries"

    def __init__(self, *args, **kwargs):
        self._unresolved_count = 0
        super().__init__(*args, **kwargs)

    def _recompute(self) -> None:
        self._unresolved_count = sum(1 for entry in self._records if entry.resolved_at is None)

    def snapshot(self) -> FeedbackState:
        return FeedbackState(entries=list(self._records), unresolved_count=self._unresolved_count)

    @property
    def entries(self) -> List[FeedbackEntry]:
        return list(self._records)

    @property
    def unresolved_count(self) -> int:
        return self._unresolved_count

    # =========================================================================
    # Mutations
    # =========================================================================

    def add_feedback(self, topic: str, message: str = "", mood: Optional[str] = None) -> FeedbackEntry:
        """
        Record a feedback entry.

        Returns:
            The stored entry; its anonymous_code is what the submitter keeps

        Raises:
            ValidationError: If the topic is blank
        """
        entry = FeedbackEntry(
            id=generate_id(),
            topic=require_text(topic, "topic", "Feedback topic cannot be empty."),
            message=clean_text(message),
            mood=clean_optional_text(mood),
            created_at=self._now(),
            anonymous_code=self._unique_code(),
        )
        self._commit([entry, *self._records])
        self.logger.debug(f"Added feedback {entry.id} ({self._unresolved_count} unresolved)")
        return entry

    def resolve_feedback(self, entry_id: str) -> Optional[FeedbackEntry]:
        """
        Mark an entry resolved now. Resolving again refreshes the timestamp.

        Returns:
            The updated entry, or None if the id is unknown
        """
        index = self._find_index(entry_id)
        if index is None:
            self.logger.debug(f"resolve_feedback: no entry {entry_id}")
            return None

        resolved = self._records[index].model_copy(update={"resolved_at": self._now()})
        records = list(self._records)
        records[index] = resolved
        self._commit(records)
        return resolved

    def delete_feedback(self, entry_id: str) -> None:
        """Remove an entry. Unknown ids are ignored."""
        self._commit(entry for entry in self._records if entry.id != entry_id)

    # =========================================================================
    # Queries
    # =========================================================================

    def find_by_code(self, code: str) -> Optional[FeedbackEntry]:
        """Look an entry up by its anonymous code (case and surrounding space ignored)."""
        wanted = (code or "").strip().upper()
        if not wanted:
            return None
        return next((entry for entry in self._records if entry.anonymous_code == wanted), None)

    def sorted_entries(self) -> List[FeedbackEntry]:
        """Entries newest first, the order the feedback screen lists them in."""
        return sorted(self._records, key=lambda entry: entry.created_at, reverse=True)

    def _unique_code(self) -> str:
        taken = {entry.anonymous_code for entry in self._records}
        code = generate_anonymous_code()
        while code in taken:
            code = generate_anonymous_code()
        return code
