"""
Unit tests for the memory lane store.
"""

from datetime import date, datetime, timedelta

import pytest
from domain.exceptions import ValidationError
from domain.value_objects.enums import StoreKey
from services.memory_lane_store import MemoryLaneStore
from services.persistence_manager import PersistenceManager


class TestAddMemory:
    """Tests for MemoryLaneStore.add_memory."""

    async def test_normalizes_capture_date_and_fields(self, memory_store, clock):
        entry = memory_store.add_memory(
            title="  First hackathon ",
            description=" We shipped! ",
            captured_on=datetime(2020, 6, 10, 16, 42, 5),
            tags=[" Team", "TEAM", "", "Code"],
            mood="  ",
        )

        assert entry.title == "First hackathon"
        assert entry.description == "We shipped!"
        assert entry.captured_on == datetime(2020, 6, 10)
        assert entry.tags == ["team", "code"]
        assert entry.mood is None
        assert entry.created_at == clock.now

    async def test_accepts_plain_dates(self, memory_store):
        entry = memory_store.add_memory("Picnic", "", date(2021, 6, 20), mood=" sunny ")

        assert entry.captured_on == datetime(2021, 6, 20)
        assert entry.mood == "sunny"

    async def test_tags_capped_at_ten(self, memory_store):
        entry = memory_store.add_memory("Tags", "", date(2021, 1, 1), tags=[f"t{i}" for i in range(15)])

        assert entry.tags == [f"t{i}" for i in range(10)]

    @pytest.mark.parametrize("title", ["", "    "])
    async def test_blank_title_rejected(self, memory_store, title):
        memory_store.add_memory("Kept", "", date(2020, 6, 10))

        with pytest.raises(ValidationError, match="Memory title is required."):
            memory_store.add_memory(title, "", date(2020, 6, 11))

        assert [e.title for e in memory_store.entries] == ["Kept"]
        assert [m.title for m in memory_store.resurfaced] == ["Kept"]

    async def test_collection_capped_at_120(self, memory_store):
        created = [memory_store.add_memory(f"M{i}", "", date(2010, 1, 1)) for i in range(125)]

        entries = memory_store.entries
        assert len(entries) == 120
        assert entries[0].id == created[-1].id
        assert entries[-1].id == created[5].id

    async def test_add_recomputes_resurfaced_against_now(self, memory_store):
        near = memory_store.add_memory("Near", "", date(2020, 6, 10))
        memory_store.add_memory("Far", "", date(2020, 1, 1))

        resurfaced = memory_store.resurfaced
        assert [m.id for m in resurfaced] == [near.id]
        assert resurfaced[0].days_offset == 5
        assert resurfaced[0].resurfaced_on == datetime(2024, 6, 15)


class TestDeleteMemory:
    """Tests for MemoryLaneStore.delete_memory."""

    async def test_delete_removes_from_resurfaced(self, memory_store):
        entry = memory_store.add_memory("Near", "", date(2020, 6, 10))

        memory_store.delete_memory(entry.id)

        assert memory_store.entries == []
        assert memory_store.resurfaced == []

    async def test_delete_unknown_id_is_noop(self, memory_store):
        memory_store.add_memory("Near", "", date(2020, 6, 10))

        memory_store.delete_memory("missing")

        assert len(memory_store.entries) == 1
        assert len(memory_store.resurfaced) == 1


class TestRefreshResurfaced:
    """Tests for MemoryLaneStore.refresh_resurfaced."""

    async def test_reference_date_selects_window(self, memory_store):
        june = memory_store.add_memory("June", "", date(2019, 6, 10))
        december = memory_store.add_memory("December", "", date(2019, 12, 24))

        assert [m.id for m in memory_store.refresh_resurfaced(datetime(2024, 12, 20, 22, 0))] == [december.id]
        assert [m.id for m in memory_store.refresh_resurfaced(date(2024, 6, 15))] == [june.id]

    async def test_defaults_to_clock(self, memory_store, clock):
        memory_store.add_memory("June", "", date(2019, 6, 10))
        clock.advance(days=180)

        assert memory_store.refresh_resurfaced() == []

    async def test_at_most_six_in_ascending_offset(self, memory_store):
        for offset in [10, 0, 8, 3, 6, 1, 9, 2, 7, 4]:
            memory_store.add_memory(f"M{offset}", "", date(2020, 6, 15) + timedelta(days=offset))

        result = memory_store.refresh_resurfaced(date(2024, 6, 15))

        assert [m.days_offset for m in result] == [0, 1, 2, 3, 4, 6]

    async def test_refresh_twice_is_identical(self, memory_store):
        for day in range(1, 20, 2):
            memory_store.add_memory(f"D{day}", "", date(2018, 6, day))

        first = memory_store.refresh_resurfaced(date(2024, 6, 15))
        second = memory_store.refresh_resurfaced(date(2024, 6, 15))

        assert first == second
        assert memory_store.resurfaced == second

    async def test_refresh_leaves_entries_untouched(self, memory_store):
        memory_store.add_memory("June", "", date(2019, 6, 10))
        before = memory_store.entries

        memory_store.refresh_resurfaced(date(2024, 6, 1))

        assert memory_store.entries == before

    async def test_leap_day_memory_resurfaces_on_feb_28(self, memory_store):
        leap = memory_store.add_memory("Leap", "", date(2020, 2, 29))

        result = memory_store.refresh_resurfaced(date(2023, 2, 28))

        assert [(m.id, m.days_offset) for m in result] == [(leap.id, 0)]


class TestQueriesAndPersistence:
    """Tests for ordering and persistence of the memory lane store."""

    async def test_sorted_entries_by_capture_date(self, memory_store):
        memory_store.add_memory("Middle", "", date(2020, 1, 1))
        memory_store.add_memory("Oldest", "", date(2015, 1, 1))
        memory_store.add_memory("Newest", "", date(2023, 1, 1))

        assert [e.title for e in memory_store.sorted_entries()] == ["Newest", "Middle", "Oldest"]

    async def test_round_trip_recomputes_resurfaced(self, memory_store, write_queue, storage, clock):
        memory_store.add_memory("Near", "", date(2020, 6, 10), tags=["team"], mood="proud")
        memory_store.add_memory("Far", "", date(2020, 1, 1))
        await write_queue.drain()

        document = await storage.get(StoreKey.MEMORY_LANE.value, None)
        assert document["state"]["entries"][1]["capturedOn"] == "2020-06-10T00:00:00"
        assert document["state"]["resurfaced"][0]["daysOffset"] == 5

        # A restart months later must not reuse the stale resurfaced view
        clock.advance(days=100)
        restored = MemoryLaneStore(PersistenceManager(storage, write_queue, StoreKey.MEMORY_LANE), clock=clock)
        await restored.hydrate()

        assert restored.entries == memory_store.entries
        assert restored.resurfaced == []

    async def test_hydrate_runs_once(self, memory_store, write_queue, storage, clock):
        memory_store.add_memory("Near", "", date(2020, 6, 10))
        await write_queue.drain()
        restored = MemoryLaneStore(PersistenceManager(storage, write_queue, StoreKey.MEMORY_LANE), clock=clock)

        await restored.hydrate()
        restored.add_memory("Added after hydrate", "", date(2021, 6, 11))
        await restored.hydrate()

        assert [e.title for e in restored.entries] == ["Added after hydrate", "Near"]
