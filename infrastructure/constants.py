"""
Constants Module - Centralized configuration values
===================================================

PURPOSE: Single source of truth for the fixed exhibition calendar and booking rules
PATTERN: Modular constants organized by category
SCOPE: Application-wide configuration values

These values are fixed at build time and are not read from the environment.
"""
from datetime import date
from typing import List, Tuple

# Authentication
ADMIN_PASSWORD = '0921'  # Compared in cleartext

# Booking Configuration
MAX_BOOKINGS_PER_SLOT = 3
BOOKINGS_KEY = 'bookings'  # Blob store key holding the serialized booking list

# Calendar Configuration
CALENDAR_DATES: Tuple[date, ...] = (
    date(2025, 11, 29),
    date(2025, 11, 30),
    date(2025, 12, 1),
    date(2025, 12, 2),
)

TIME_SLOTS: Tuple[str, ...] = (
    '10:00', '10:30', '11:00', '11:30', '12:00', '12:30',
    '13:00', '13:30', '14:00', '14:30', '15:00', '15:30',
    '16:00', '16:30', '17:00', '17:30',
)

DATE_FORMAT = '%Y-%m-%d'

# Korean weekday abbreviations, Monday first to match date.weekday()
WEEKDAYS_KO = ['월', '화', '수', '목', '금', '토', '일']

# Exhibition texts
TITLE = '예빈&혜정 졸업전시 개봉박두|・ω・'
SUBTITLE = (
    '방문 예정 시간대를 선택해주시면 저희가 소정의 선물(?)과 함께 '
    '기다리고 있겠습니다! ε=ε=┌( >_<)┘'
)
FOOTER_TEXT = '메시지는 저희만 확인 가능하니 편하게 작성해주세요!'

MESSAGE_PREVIEW_LENGTH = 10  # Characters of a message shown to the admin in slot lists


def calendar_date_keys() -> List[str]:
    """Return the calendar dates as ``YYYY-MM-DD`` strings."""
    return [day.strftime(DATE_FORMAT) for day in CALENDAR_DATES]


def is_known_slot(date_key: str, time_slot: str) -> bool:
    """Check that a (date, time) pair belongs to the fixed calendar."""
    return date_key in calendar_date_keys() and time_slot in TIME_SLOTS


def format_date_label(day: date) -> str:
    """
    Format a calendar date the way the exhibition page shows it.

    Args:
        day: Calendar date

    Returns:
        Label such as ``11월 29일 (토)``
    """
    return f"{day.month}월 {day.day}일 ({WEEKDAYS_KO[day.weekday()]})"
