"""
Tests for CustomLocationStore and the optimistic update helper.
"""

import asyncio

import pytest

from core.errors import LocationStorageError, PlatformError
from core.location_store import CustomLocationStore
from core.optimistic import apply_optimistic
from core.types import CustomLocation

from fakes import FakePlatformServices


DOCS = CustomLocation("/home/docs", "Docs")
PICS = CustomLocation("/home/pics", "Pictures")


@pytest.fixture
def services():
    return FakePlatformServices()


@pytest.fixture
def store(services):
    return CustomLocationStore(services)


# -------------------------------------------------------------------------
# load_on_init
# -------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_load_on_init_reads_saved(store, services):
    services.saved_locations = [DOCS, PICS]
    await store.load_on_init()
    assert store.locations == (DOCS, PICS)
    assert store.is_loaded


@pytest.mark.asyncio
async def test_load_on_init_failure_defaults_to_empty(store, services):
    services.load_error = "disk unavailable"
    await store.load_on_init()
    assert store.locations == ()
    assert store.is_loaded


@pytest.mark.asyncio
async def test_load_on_init_runs_once(store, services):
    services.saved_locations = [DOCS]
    await store.load_on_init()
    services.saved_locations = [DOCS, PICS]
    await store.load_on_init()
    assert store.locations == (DOCS,)


@pytest.mark.asyncio
async def test_load_on_init_drops_duplicate_paths(store, services):
    services.saved_locations = [DOCS, CustomLocation("/home/docs", "Again"), PICS]
    await store.load_on_init()
    assert store.locations == (DOCS, PICS)


@pytest.mark.asyncio
async def test_add_during_slow_load_keeps_saved_locations(store, services):
    services.saved_locations = [DOCS]
    services.load_delay = 0.01

    loading = asyncio.ensure_future(store.load_on_init())
    await asyncio.sleep(0)
    assert await store.add(PICS) is True
    await loading

    assert store.locations == (DOCS, PICS)
    assert services.saved_locations == [DOCS, PICS]


@pytest.mark.asyncio
async def test_add_before_load_reads_saved_first(store, services):
    services.saved_locations = [DOCS]
    assert await store.add(PICS) is True
    assert store.is_loaded
    assert services.saved_locations == [DOCS, PICS]


@pytest.mark.asyncio
async def test_remove_before_load_keeps_other_saved(store, services):
    services.saved_locations = [DOCS, PICS]
    assert await store.remove(DOCS.path) is True
    assert services.saved_locations == [PICS]


# -------------------------------------------------------------------------
# add / remove
# -------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_add_persists(store, services):
    assert await store.add(DOCS) is True
    assert store.locations == (DOCS,)
    assert services.saved_locations == [DOCS]


@pytest.mark.asyncio
async def test_add_duplicate_path_is_noop(store, services):
    await store.add(DOCS)
    calls = services.save_calls
    assert await store.add(CustomLocation("/home/docs", "Other label")) is False
    assert store.locations == (DOCS,)
    assert len(store) == 1
    assert services.save_calls == calls


@pytest.mark.asyncio
async def test_add_is_visible_before_save_completes(store):
    task = asyncio.ensure_future(store.add(DOCS))
    await asyncio.sleep(0)
    assert store.contains(DOCS.path)
    assert await task is True


@pytest.mark.asyncio
async def test_failed_save_rolls_back_add(store, services):
    await store.add(DOCS)
    before = store.locations
    services.save_error = "read-only filesystem"

    failures = []
    store.saveFailed.connect(failures.append)

    assert await store.add(PICS) is False
    assert store.locations == before
    assert failures == ["read-only filesystem"]
    assert services.saved_locations == [DOCS]


@pytest.mark.asyncio
async def test_remove(store, services):
    await store.add(DOCS)
    await store.add(PICS)
    assert await store.remove(DOCS.path) is True
    assert store.locations == (PICS,)
    assert services.saved_locations == [PICS]


@pytest.mark.asyncio
async def test_remove_unknown_is_noop(store, services):
    await store.add(DOCS)
    assert await store.remove("/nowhere") is False
    assert store.locations == (DOCS,)


@pytest.mark.asyncio
async def test_failed_save_rolls_back_remove(store, services):
    await store.add(DOCS)
    services.save_error = "quota exceeded"
    assert await store.remove(DOCS.path) is False
    assert store.locations == (DOCS,)


@pytest.mark.asyncio
async def test_concurrent_adds_are_serialized(store, services):
    results = await asyncio.gather(store.add(DOCS), store.add(PICS), store.add(DOCS))
    assert results == [True, True, False]
    assert store.locations == (DOCS, PICS)
    assert services.saved_locations == [DOCS, PICS]


@pytest.mark.asyncio
async def test_locations_changed_signal_covers_rollback(store, services):
    changes = []
    store.locationsChanged.connect(lambda: changes.append(store.locations))
    services.save_error = "nope"
    await store.add(DOCS)
    assert changes == [(DOCS,), ()]


def test_sidebar_items_skip_standard_duplicates(store):
    store._set_locations([DOCS, CustomLocation("/home", "My home")])
    standard = [CustomLocation("/home", "Home")]
    items = store.sidebar_items(standard)
    assert [i.path for i in items] == ["/home", "/home/docs"]
    assert items[0].label == "Home"


# -------------------------------------------------------------------------
# apply_optimistic
# -------------------------------------------------------------------------

class Box:
    def __init__(self, value):
        self.value = value

    def set(self, value):
        self.value = value


@pytest.mark.asyncio
async def test_apply_optimistic_success():
    box = Box([1])
    seen = []

    async def persist(value):
        seen.append(list(box.value))

    assert await apply_optimistic(lambda: box.value, box.set, [1, 2], persist) is True
    assert box.value == [1, 2]
    assert seen == [[1, 2]]


@pytest.mark.asyncio
async def test_apply_optimistic_rollback():
    box = Box("before")
    errors = []

    async def persist(value):
        raise LocationStorageError("boom")

    ok = await apply_optimistic(lambda: box.value, box.set, "after", persist, errors.append)
    assert ok is False
    assert box.value == "before"
    assert isinstance(errors[0], PlatformError)


@pytest.mark.asyncio
async def test_apply_optimistic_unexpected_error_rolls_back_and_raises():
    box = Box(1)

    async def persist(value):
        raise RuntimeError("bug")

    with pytest.raises(RuntimeError):
        await apply_optimistic(lambda: box.value, box.set, 2, persist)
    assert box.value == 1
