"""
Application factory.

Configures logging from the settings, builds the storage backend, the storage
adapter, the write queue and the three stores once, hydrates every store before
handing them out, and tears it all down again (draining pending writes) at
shutdown.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, Optional

from domain.value_objects.enums import StoreKey
from infrastructure.database.write_queue import WriteQueue
from infrastructure.storage import DatabaseBackend, KeyValueBackend, MemoryBackend, Storage
from services.base_store import Clock
from services.event_summary_store import EventSummaryStore
from services.feedback_store import FeedbackStore
from services.memory_lane_store import MemoryLaneStore
from services.persistence_manager import PersistenceManager

from .logging import setup_logging
from .settings import Settings, get_settings

logger = logging.getLogger("AppFactory")


@dataclass
class FundumoApp:
    """The composed application: one instance of each store sharing one storage stack."""

    settings: Settings
    backend: KeyValueBackend
    storage: Storage
    write_queue: WriteQueue
    event_summaries: EventSummaryStore
    feedback: FeedbackStore
    memory_lane: MemoryLaneStore

    async def flush(self) -> None:
        """Wait for every pending write."""
        await self.write_queue.drain()

    async def shutdown(self) -> None:
        """Drain pending writes, stop the writer and release the backend."""
        logger.info("Shutting down...")
        await self.write_queue.stop(timeout=self.settings.write_queue_stop_timeout)
        await self.backend.close()
        logger.info("Shutdown complete")


def create_backend(settings: Settings) -> KeyValueBackend:
    """Pick the key-value backend the settings ask for."""
    if settings.uses_memory_backend:
        return MemoryBackend()
    return DatabaseBackend(settings.database_url)


async def create_app(
    settings: Optional[Settings] = None,
    backend: Optional[KeyValueBackend] = None,
    clock: Optional[Clock] = None,
) -> FundumoApp:
    """
    Compose and hydrate the application.

    Args:
        settings: Settings to use (defaults to the process settings)
        backend: Key-value backend override (tests pass a MemoryBackend)
        clock: Clock override for every store

    Returns:
        A ready FundumoApp whose stores have all been hydrated
    """
    settings = settings or get_settings()
    setup_logging(debug_mode=settings.debug_logging)

    backend = backend or create_backend(settings)
    await backend.init()

    storage = Storage(backend, prefix=settings.storage_prefix)
    write_queue = WriteQueue()
    await write_queue.start()

    def persistence(name: StoreKey) -> PersistenceManager:
        return PersistenceManager(storage, write_queue, name)

    app = FundumoApp(
        settings=settings,
        backend=backend,
        storage=storage,
        write_queue=write_queue,
        event_summaries=EventSummaryStore(persistence(StoreKey.EVENT_SUMMARIES), clock=clock),
        feedback=FeedbackStore(persistence(StoreKey.FEEDBACK), clock=clock),
        memory_lane=MemoryLaneStore(persistence(StoreKey.MEMORY_LANE), clock=clock),
    )

    await asyncio.gather(
        app.event_summaries.hydrate(),
        app.feedback.hydrate(),
        app.memory_lane.hydrate(),
    )
    logger.info(
        f"Stores ready: {len(app.event_summaries)} summaries, "
        f"{len(app.feedback)} feedback entries, {len(app.memory_lane)} memories"
    )
    return app


@asynccontextmanager
async def lifespan(
    settings: Optional[Settings] = None,
    backend: Optional[KeyValueBackend] = None,
    clock: Optional[Clock] = None,
) -> AsyncIterator[FundumoApp]:
    """Create the app for the duration of a block and shut it down afterwards."""
    app = await create_app(settings, backend, clock)
    try:
        yield app
    finally:
        await app.shutdown()
