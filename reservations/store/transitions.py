"""Pure transformations over booking collections.

Each helper returns a new tuple and leaves its input untouched so the store
can swap snapshots in one assignment.
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from reservations.models import Booking


def _index_of(bookings: Tuple[Booking, ...], booking_id: str) -> int:
    for index, booking in enumerate(bookings):
        if booking.id == booking_id:
            return index
    raise KeyError(booking_id)


def add_booking(bookings: Iterable[Booking], booking: Booking) -> Tuple[Booking, ...]:
    """Append ``booking``; raise ``ValueError`` if its id is already present."""

    current = tuple(bookings)
    if any(existing.id == booking.id for existing in current):
        raise ValueError(f"duplicate booking id {booking.id}")
    return current + (booking,)


def replace_booking(
    bookings: Iterable[Booking],
    booking_id: str,
    *,
    name: Optional[str] = None,
    message: Optional[str] = None,
) -> Tuple[Booking, ...]:
    """Return a copy with the editable fields of one booking replaced."""

    current = tuple(bookings)
    index = _index_of(current, booking_id)
    updated = current[index].with_details(name=name, message=message)
    return current[:index] + (updated,) + current[index + 1:]


def remove_booking(bookings: Iterable[Booking], booking_id: str) -> Tuple[Booking, ...]:
    """Drop the booking with ``booking_id``; raise ``KeyError`` if it is unknown."""

    current = tuple(bookings)
    index = _index_of(current, booking_id)
    return current[:index] + current[index + 1:]
