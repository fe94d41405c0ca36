"""
Persistence Manager - one JSON document per store.

A store never touches storage directly. It hands its whole state to its
PersistenceManager, which wraps it as {"state": ..., "version": N}, and it asks
the manager for that state back once at startup.

Writes go through the write queue and are fire-and-forget: save() returns at
once and the durable write lands in the background.
"""

import logging
from typing import Any, Dict, Optional

from domain.value_objects.enums import StoreKey
from infrastructure.database.write_queue import WriteQueue
from infrastructure.storage import Storage

logger = logging.getLogger("PersistenceManager")

STATE_VERSION = 0


class PersistenceManager:
    """
    Loads and saves a single store's document.

    Args:
        storage: Namespaced storage adapter
        write_queue: Queue that serializes the background writes
        name: Store key (event-summaries, feedback, memory-lane)
        version: Document version written alongside the state
    """

    def __init__(self, storage: Storage, write_queue: WriteQueue, name: StoreKey, version: int = STATE_VERSION):
        self.storage = storage
        self.write_queue = write_queue
        self.name = str(name)
        self.version = version

    async def load(self) -> Optional[Dict[str, Any]]:
        """
        Read the persisted state mapping.

        Returns:
            The "state" mapping, or None if nothing usable is stored
        """
        document = await self.storage.get(self.name, None)
        if document is None:
            return None

        if not isinstance(document, dict) or not isinstance(document.get("state"), dict):
            logger.warning(f"Ignoring malformed document for '{self.name}'")
            return None

        stored_version = document.get("version", STATE_VERSION)
        if stored_version != self.version:
            logger.warning(
                f"Document '{self.name}' has version {stored_version}, expected {self.version}; loading as-is"
            )
        return document["state"]

    def save(self, state: Dict[str, Any]) -> None:
        """
        Schedule a write of the full state. Returns immediately.

        The state must already be JSON-compatible; it is captured now, so later
        mutations of the store do not leak into this write.
        """
        document = {"state": state, "version": self.version}
        self.write_queue.submit(self.storage.set(self.name, document))

    async def clear(self) -> None:
        """Remove the persisted document."""
        await self.write_queue.enqueue(self.storage.remove(self.name))
        logger.info(f"Cleared persisted state for '{self.name}'")
