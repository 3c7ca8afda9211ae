import json

from infrastructure.blob_store import JsonBlobStore, MemoryBlobStore
from reservations.models import Booking
from reservations.store import BookingRepository
from tests.helpers import DummyLogger, FailingBlobStore


def _booking(booking_id='a1', **overrides):
    fields = dict(date='2025-11-29', time='10:00', name='Yebin', message='', password='1234')
    fields.update(overrides)
    return Booking(id=booking_id, **fields)


def test_load_from_missing_blob_returns_empty_list(tmp_path):
    repository = BookingRepository(JsonBlobStore(str(tmp_path / 'storage.json')))

    assert repository.load() == []


def test_persist_and_load_round_trip(tmp_path):
    blob_store = JsonBlobStore(str(tmp_path / 'storage.json'))
    repository = BookingRepository(blob_store)
    bookings = [_booking('a1', message='안녕하세요'), _booking('b2', time='10:30')]

    assert repository.persist(bookings) is True

    assert BookingRepository(JsonBlobStore(str(tmp_path / 'storage.json'))).load() == bookings


def test_stored_value_is_a_json_list_under_bookings_key():
    blob_store = MemoryBlobStore()
    BookingRepository(blob_store).persist([_booking()])

    records = json.loads(blob_store.get('bookings'))
    assert records == [{
        'id': 'a1',
        'date': '2025-11-29',
        'time': '10:00',
        'name': 'Yebin',
        'message': '',
        'password': '1234',
    }]


def test_invalid_json_loads_empty_with_warning():
    logger = DummyLogger()
    repository = BookingRepository(MemoryBlobStore({'bookings': '{oops'}), logger=logger)

    assert repository.load() == []
    assert logger.last('warning') is not None


def test_non_list_payload_loads_empty():
    logger = DummyLogger()
    repository = BookingRepository(MemoryBlobStore({'bookings': '{"id": "a1"}'}), logger=logger)

    assert repository.load() == []
    assert any('expected list' in str(message) for _, message in logger.messages)


def test_malformed_and_duplicate_records_are_skipped():
    good = _booking('a1').to_payload()
    records = [good, {'id': 'x'}, 'garbage', dict(good, name='Copy')]
    logger = DummyLogger()
    repository = BookingRepository(MemoryBlobStore({'bookings': json.dumps(records)}), logger=logger)

    loaded = repository.load()

    assert [booking.id for booking in loaded] == ['a1']
    assert loaded[0].name == 'Yebin'
    warnings = [message for level, message in logger.messages if level == 'warning']
    assert len(warnings) == 3
    assert any('duplicate id a1' in message for message in warnings)


def test_read_failure_is_logged_and_loads_empty():
    logger = DummyLogger()
    repository = BookingRepository(FailingBlobStore(fail_get=True), logger=logger)

    assert repository.load() == []
    assert logger.last('error') is not None


def test_persist_failure_returns_false_and_logs():
    logger = DummyLogger()
    repository = BookingRepository(FailingBlobStore(), logger=logger)

    assert repository.persist([_booking()]) is False
    level, args, _ = logger.last('error')
    assert 'Failed to persist' in args[0]
    assert all('1234' not in str(arg) for arg in args)
