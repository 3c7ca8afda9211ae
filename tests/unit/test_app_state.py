import json

from infrastructure.blob_store import JsonBlobStore, MemoryBlobStore
from reservations.app_state import ApplicationState
from reservations.store import BookingRepository, BookingStore
from tests.helpers import FailingBlobStore


def test_initialize_from_missing_blob_starts_empty(tmp_path):
    state = ApplicationState.initialize(JsonBlobStore(str(tmp_path / 'storage.json')))

    assert state.store.hydrated is True
    assert state.store.snapshot() == ()
    assert state.is_admin is False


def test_initialize_loads_persisted_bookings():
    record = {
        'id': 'a1', 'date': '2025-11-29', 'time': '10:00',
        'name': 'Yebin', 'message': '', 'password': '1234',
    }
    state = ApplicationState.initialize(MemoryBlobStore({'bookings': json.dumps([record])}))

    assert [booking.id for booking in state.store.snapshot()] == ['a1']
    assert state.slots.count('2025-11-29', '10:00') == 1


def test_states_sharing_a_store_keep_admin_local():
    store = BookingStore(BookingRepository(MemoryBlobStore()))
    first = ApplicationState.initialize(None, store=store)
    second = ApplicationState.initialize(None, store=store)

    first.admin_session.login('0921')
    booking = first.controller.create('2025-11-29', '10:00', 'Yebin', '', '1234')

    assert first.is_admin is True
    assert second.is_admin is False
    assert second.store.get(booking.id) == booking


def test_teardown_logs_out_cancels_and_flushes():
    blob_store = MemoryBlobStore()
    state = ApplicationState.initialize(blob_store)
    booking = state.controller.create('2025-11-29', '10:00', 'Yebin', '', '1234')
    state.admin_session.login('0921')
    state.controller.stage_delete(booking.id, '1234')
    blob_store.set('bookings', '[]')

    state.teardown()

    assert state.is_admin is False
    assert state.controller.staged_delete is None
    assert [record['id'] for record in json.loads(blob_store.get('bookings'))] == [booking.id]


def test_teardown_survives_failed_flush():
    state = ApplicationState.initialize(FailingBlobStore())
    state.controller.create('2025-11-29', '10:00', 'Yebin', '', '1234')

    state.teardown()

    assert state.store.last_persist_ok is False
