import pytest

from reservations.errors import AuthError, BookingError, CapacityError, ValidationError
from reservations.validation import (
    ensure_known_slot,
    ensure_name,
    ensure_password,
    ensure_password_matches,
    ensure_slot_available,
)


def test_known_slot_accepts_calendar_cells():
    ensure_known_slot('2025-11-29', '10:00')
    ensure_known_slot('2025-12-02', '17:30')


@pytest.mark.parametrize('date, time', [
    ('2025-11-28', '10:00'),
    ('2025-11-29', '18:00'),
    ('2025-11-29', '10:15'),
])
def test_unknown_slot_is_rejected(date, time):
    with pytest.raises(ValidationError) as excinfo:
        ensure_known_slot(date, time)
    assert excinfo.value.reason == 'unknown slot'


def test_name_is_trimmed():
    assert ensure_name('  Yebin ') == 'Yebin'


@pytest.mark.parametrize('name', [None, '', '   '])
def test_blank_name_is_rejected(name):
    with pytest.raises(ValidationError) as excinfo:
        ensure_name(name)
    assert excinfo.value.reason == 'missing name'


def test_password_must_be_present():
    assert ensure_password(' 1 ') == ' 1 '
    with pytest.raises(ValidationError) as excinfo:
        ensure_password('')
    assert excinfo.value.reason == 'missing password'


def test_capacity_check():
    ensure_slot_available(2, 3)
    with pytest.raises(CapacityError) as excinfo:
        ensure_slot_available(3, 3)
    assert excinfo.value.kind == 'capacity'


def test_password_comparison_is_exact():
    ensure_password_matches('Secret', 'Secret')
    for supplied in ('secret', 'Secret ', None):
        with pytest.raises(AuthError):
            ensure_password_matches('Secret', supplied)


def test_errors_share_a_base_class():
    assert issubclass(AuthError, BookingError)
    assert str(ValidationError('missing name')) == 'ValidationError: missing name'
