from datetime import date

from botapp.messages import strings
from botapp.ui import callback_data
from botapp.ui.calendar import (
    create_day_keyboard,
    create_home_keyboard,
    create_slot_keyboard,
    format_booking_button_label,
    format_home_message,
    format_slot_message,
)
from infrastructure.constants import CALENDAR_DATES, TIME_SLOTS
from reservations.models import Booking


def _buttons(markup):
    return [button for row in markup.inline_keyboard for button in row]


def _booking(booking_id, name='Yebin', message=''):
    return Booking(id=booking_id, date='2025-11-29', time='10:00', name=name, message=message, password='pw')


def test_home_keyboard_lists_dates_and_admin_toggle():
    buttons = _buttons(create_home_keyboard(is_admin=False))

    assert [button.callback_data for button in buttons[:-1]] == [
        callback_data.day(day.strftime('%Y-%m-%d')) for day in CALENDAR_DATES
    ]
    assert buttons[0].text == '11월 29일 (토)'
    assert buttons[-1].callback_data == callback_data.ADMIN_LOGIN

    admin_buttons = _buttons(create_home_keyboard(is_admin=True))
    assert admin_buttons[-1].callback_data == callback_data.ADMIN_LOGOUT


def test_home_keyboard_marks_today():
    buttons = _buttons(create_home_keyboard(today=date(2025, 11, 30)))

    assert buttons[1].text.startswith(strings.LABEL_TODAY)
    assert not buttons[0].text.startswith(strings.LABEL_TODAY)


def test_home_message_mentions_admin_mode_only_for_admins():
    assert strings.LABEL_ADMIN_MODE in format_home_message(is_admin=True)
    assert strings.LABEL_ADMIN_MODE not in format_home_message(is_admin=False)


def test_day_keyboard_shows_occupancy_and_full_marker():
    occupancy = [(time, 3 if time == '10:00' else 0) for time in TIME_SLOTS]

    buttons = _buttons(create_day_keyboard('2025-11-29', occupancy, 3))

    assert buttons[0].text == f"10:00  3/3 {strings.BUTTON_FULL_SUFFIX}"
    assert buttons[1].text == '10:30  0/3'
    assert buttons[0].callback_data == callback_data.slot('2025-11-29', '10:00')
    assert len(buttons) == len(TIME_SLOTS) + 1
    assert buttons[-1].callback_data == callback_data.HOME


def test_slot_keyboard_hides_reserve_when_full():
    bookings = [_booking('a'), _booking('b'), _booking('c')]

    full = [button.callback_data for button in _buttons(create_slot_keyboard('2025-11-29', '10:00', bookings, 3))]
    open_ = [button.callback_data for button in _buttons(create_slot_keyboard('2025-11-29', '10:00', bookings[:1], 3))]

    assert callback_data.reserve('2025-11-29', '10:00') not in full
    assert full[:3] == ['open_a', 'open_b', 'open_c']
    assert callback_data.reserve('2025-11-29', '10:00') in open_
    assert open_[-1] == callback_data.day('2025-11-29')


def test_booking_labels_show_preview_to_admin_only():
    booking = _booking('a', message='0123456789 and more')

    assert format_booking_button_label(booking, is_admin=False) == 'Yebin'
    assert format_booking_button_label(booking, is_admin=True) == 'Yebin (0123456789...)'


def test_slot_message_escapes_names_and_flags_full_slots():
    bookings = [_booking('a', name='*bold*'), _booking('b'), _booking('c')]

    text = format_slot_message('2025-11-29', '10:00', bookings, 3, notice='done')

    assert text.startswith('done')
    assert '\\*bold\\*' in text
    assert '3/3' in text
    assert strings.SLOT_FULL_TITLE in text
    assert strings.LABEL_NO_BOOKINGS in format_slot_message('2025-11-29', '10:00', [], 3)
