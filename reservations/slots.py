"""Derived per-slot views over the booking store."""

from __future__ import annotations

from typing import List, Tuple

from infrastructure.constants import MAX_BOOKINGS_PER_SLOT, TIME_SLOTS
from reservations.models import Booking


class SlotIndex:
    """Group bookings by (date, time).

    Nothing is cached; each query reads the store's current snapshot.
    """

    def __init__(self, store, *, capacity: int = MAX_BOOKINGS_PER_SLOT) -> None:
        self._store = store
        self.capacity = capacity

    def bookings_for(self, date: str, time: str) -> List[Booking]:
        return [
            booking
            for booking in self._store.snapshot()
            if booking.date == date and booking.time == time
        ]

    def count(self, date: str, time: str) -> int:
        return len(self.bookings_for(date, time))

    def is_full(self, date: str, time: str) -> bool:
        return self.count(date, time) >= self.capacity

    def occupancy(self, date: str) -> List[Tuple[str, int]]:
        """Return ``(time, count)`` for every time slot of ``date``."""

        counts = {time_slot: 0 for time_slot in TIME_SLOTS}
        for booking in self._store.snapshot():
            if booking.date == date and booking.time in counts:
                counts[booking.time] += 1
        return [(time_slot, counts[time_slot]) for time_slot in TIME_SLOTS]

    def label(self, date: str, time: str) -> str:
        return f"{self.count(date, time)}/{self.capacity}"


__all__ = ['SlotIndex']
