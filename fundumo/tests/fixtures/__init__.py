"""Test fixtures package."""

from tests.fixtures.store_fixtures import (
    REFERENCE_NOW,
    FailingBackend,
    FakeClock,
    clock,
    event_store,
    feedback_store,
    make_persistence,
    memory_backend,
    memory_store,
    storage,
    write_queue,
)

__all__ = [
    "REFERENCE_NOW",
    "FakeClock",
    "FailingBackend",
    "make_persistence",
    "clock",
    "memory_backend",
    "storage",
    "write_queue",
    "event_store",
    "feedback_store",
    "memory_store",
]
