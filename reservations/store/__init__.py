"""Booking store package exports."""

from .booking_repository import BookingRepository
from .booking_store import BookingStore
from .transitions import add_booking, remove_booking, replace_booking

__all__ = [
    "BookingRepository",
    "BookingStore",
    "add_booking",
    "remove_booking",
    "replace_booking",
]
