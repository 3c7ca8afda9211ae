"""Domain model definitions for exhibition bookings."""

from .booking import BOOKING_FIELDS, Booking, SlotKey

__all__ = ["BOOKING_FIELDS", "Booking", "SlotKey"]
