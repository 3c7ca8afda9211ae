"""Exception taxonomy for booking operations.

Every rejection raised by the booking core derives from :class:`BookingError`
so callers can surface it to the visitor without crashing the session.
"""

from __future__ import annotations


class BookingError(Exception):
    """Base class for recoverable booking rejections."""

    kind = 'booking_error'

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason

    def __str__(self) -> str:
        return f"{type(self).__name__}: {self.reason}"


class ValidationError(BookingError):
    """A required field is missing or a value is outside the calendar."""

    kind = 'validation'


class CapacityError(BookingError):
    """The requested slot already holds the maximum number of bookings."""

    kind = 'capacity'


class AuthError(BookingError):
    """A password did not match the stored credential."""

    kind = 'auth'


class PersistenceError(BookingError):
    """The blob store could not be read or written."""

    kind = 'persistence'


__all__ = [
    'AuthError',
    'BookingError',
    'CapacityError',
    'PersistenceError',
    'ValidationError',
]
