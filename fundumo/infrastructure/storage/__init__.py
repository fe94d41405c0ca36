"""
Storage infrastructure package.

The Storage adapter plus the key-value backends it can run on.
"""

from .adapter import DEFAULT_PREFIX, Storage
from .backends import DatabaseBackend, KeyValueBackend, MemoryBackend

__all__ = [
    "Storage",
    "DEFAULT_PREFIX",
    "KeyValueBackend",
    "MemoryBackend",
    "DatabaseBackend",
]
