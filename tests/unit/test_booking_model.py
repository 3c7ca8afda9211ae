import pytest

from reservations.models import Booking, SlotKey


def _payload(**overrides):
    payload = {
        'id': 'abc',
        'date': '2025-11-29',
        'time': '10:00',
        'name': 'Yebin',
        'message': 'hello',
        'password': '1234',
    }
    payload.update(overrides)
    return payload


def test_new_generates_distinct_ids():
    first = Booking.new('2025-11-29', '10:00', 'Yebin', '', '1234')
    second = Booking.new('2025-11-29', '10:00', 'Yebin', '', '1234')

    assert first.id and second.id
    assert first.id != second.id
    assert first.slot == SlotKey('2025-11-29', '10:00')


def test_with_details_keeps_identity_fields():
    booking = Booking.from_payload(_payload())

    updated = booking.with_details(name='Hyejung')

    assert updated.name == 'Hyejung'
    assert updated.message == 'hello'
    assert (updated.id, updated.date, updated.time, updated.password) == ('abc', '2025-11-29', '10:00', '1234')
    assert booking.name == 'Yebin'
    assert booking.with_details() is booking


def test_message_preview_truncates_long_messages():
    booking = Booking.from_payload(_payload(message='0123456789abc'))

    assert booking.message_preview(10) == '0123456789...'
    assert booking.with_details(message='short').message_preview(10) == 'short'


def test_payload_round_trip():
    booking = Booking.from_payload(_payload())

    assert Booking.from_payload(booking.to_payload()) == booking


def test_missing_message_defaults_to_empty():
    payload = _payload()
    del payload['message']

    assert Booking.from_payload(payload).message == ''
    assert Booking.from_payload(_payload(message=None)).message == ''


@pytest.mark.parametrize('field', ['id', 'date', 'time', 'name', 'password'])
def test_missing_required_field_is_rejected(field):
    with pytest.raises(ValueError):
        Booking.from_payload(_payload(**{field: ''}))


def test_non_mapping_payload_is_rejected():
    with pytest.raises(ValueError):
        Booking.from_payload(['not', 'a', 'record'])
