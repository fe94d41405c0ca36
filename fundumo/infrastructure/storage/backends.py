"""
Key-value backends behind the storage adapter.

A backend only moves raw strings; namespacing, JSON and failure tolerance live in
the adapter. Backends raise on failure.
"""

import logging
from typing import Dict, Optional, Protocol

from infrastructure.database.connection import (
    create_engine_for,
    create_session_factory,
    init_db,
    retry_on_db_lock,
)
from infrastructure.database.models import KeyValueItem
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger("Storage.backend")


class KeyValueBackend(Protocol):
    """Async string key-value store."""

    async def init(self) -> None: ...

    async def close(self) -> None: ...

    async def get_item(self, key: str) -> Optional[str]: ...

    async def set_item(self, key: str, value: str) -> None: ...

    async def remove_item(self, key: str) -> None: ...


class MemoryBackend:
    """Process-local backend. Used by tests and for throwaway sessions."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.items: Dict[str, str] = dict(initial or {})

    async def init(self) -> None:
        return None

    async def close(self) -> None:
        return None

    async def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self.items[key] = value

    async def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


class DatabaseBackend:
    """
    Durable backend on a single SQL table (kv_store).

    Defaults to SQLite through aiosqlite; any SQLAlchemy async URL works.
    """

    def __init__(self, url: str, engine: Optional[AsyncEngine] = None):
        self.url = url
        self._engine = engine
        self._session_factory = None

    async def init(self) -> None:
        """Create the engine and the table. Safe to call more than once."""
        if self._engine is None:
            self._engine = create_engine_for(self.url)
        if self._session_factory is None:
            self._session_factory = create_session_factory(self._engine)
            await init_db(self._engine)
            logger.info(f"Key-value table ready at {self.url}")

    async def close(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._session_factory = None

    async def _sessions(self):
        if self._session_factory is None:
            await self.init()
        return self._session_factory

    async def get_item(self, key: str) -> Optional[str]:
        factory = await self._sessions()
        async with factory() as session:
            result = await session.execute(select(KeyValueItem.value).where(KeyValueItem.key == key))
            return result.scalar_one_or_none()

    @retry_on_db_lock()
    async def set_item(self, key: str, value: str) -> None:
        factory = await self._sessions()
        async with factory() as session:
            await session.merge(KeyValueItem(key=key, value=value))
            await session.commit()
        logger.debug(f"Wrote {len(value)} chars to '{key}'")

    @retry_on_db_lock()
    async def remove_item(self, key: str) -> None:
        factory = await self._sessions()
        async with factory() as session:
            await session.execute(delete(KeyValueItem).where(KeyValueItem.key == key))
            await session.commit()
