"""
Namespaced, failure-tolerant JSON storage.

This adapter is the only component that performs I/O. Reads never raise: a
missing key, unparsable data or a backend error yields the caller's fallback.
Writes and removals log failures and return normally.
"""

import json
import logging
from typing import Any, Optional, TypeVar

from domain.exceptions import PersistenceReadError, PersistenceWriteError
from domain.value_objects.enums import DEFAULT_STORAGE_PREFIX
from pydantic import BaseModel

from .backends import KeyValueBackend

logger = logging.getLogger("Storage")

T = TypeVar("T")

DEFAULT_PREFIX = DEFAULT_STORAGE_PREFIX


class Storage:
    """JSON values over a key-value backend, with every key namespaced."""

    def __init__(self, backend: KeyValueBackend, prefix: str = DEFAULT_PREFIX):
        self.backend = backend
        self.prefix = prefix

    def namespaced(self, key: str) -> str:
        return f"{self.prefix}{key}"

    async def get(self, key: str, fallback: T) -> Any:
        """
        Read and decode a value.

        Args:
            key: Un-prefixed key
            fallback: Returned when the key is missing or unreadable

        Returns:
            The decoded JSON value, or `fallback`
        """
        try:
            raw = await self._read(key)
        except PersistenceReadError as e:
            logger.warning(f"storage.get({key}) failed: {e.reason}")
            return fallback

        if not raw:
            logger.debug(f"storage.get({key}): no value, using fallback")
            return fallback
        return self._decode(key, raw, fallback)

    async def set(self, key: str, value: Any) -> None:
        """Encode and write a value. Failures are logged, never raised."""
        try:
            await self._write(key, self._encode(key, value))
        except PersistenceWriteError as e:
            logger.warning(f"storage.set({key}) failed: {e.reason}")

    async def remove(self, key: str) -> None:
        """Delete a value. Failures are logged, never raised."""
        try:
            await self.backend.remove_item(self.namespaced(key))
        except Exception as e:
            error = PersistenceWriteError(key, f"remove failed: {e}")
            logger.warning(f"storage.remove({key}) failed: {error.reason}")

    async def _read(self, key: str) -> Optional[str]:
        try:
            return await self.backend.get_item(self.namespaced(key))
        except Exception as e:
            raise PersistenceReadError(key, f"backend error: {e}") from e

    async def _write(self, key: str, raw: str) -> None:
        try:
            await self.backend.set_item(self.namespaced(key), raw)
        except Exception as e:
            raise PersistenceWriteError(key, f"backend error: {e}") from e

    def _decode(self, key: str, raw: str, fallback: T) -> Any:
        try:
            return json.loads(raw)
        except ValueError as e:
            error = PersistenceReadError(key, f"invalid JSON: {e}")
            logger.warning(f"storage.get({key}) failed: {error.reason}")
            return fallback

    def _encode(self, key: str, value: Any) -> str:
        if isinstance(value, BaseModel):
            value = value.model_dump(mode="json", by_alias=True)
        try:
            return json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise PersistenceWriteError(key, f"not JSON-serializable: {e}") from e
