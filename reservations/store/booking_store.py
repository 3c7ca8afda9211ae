"""In-memory booking collection with write-through persistence."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from reservations.models import Booking
from reservations.store.booking_repository import BookingRepository
from reservations.store.transitions import add_booking, remove_booking, replace_booking


class BookingStore:
    """Hold the authoritative booking snapshot and persist after every mutation.

    Mutations build a new tuple through the pure helpers in
    :mod:`reservations.store.transitions` and swap it in with a single
    assignment. A failed write is logged by the repository; the in-memory
    snapshot stays authoritative for the rest of the process.
    """

    def __init__(
        self,
        repository: BookingRepository,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._repository = repository
        self._logger = logger or logging.getLogger('BookingStore')
        self._bookings: Tuple[Booking, ...] = ()
        self._hydrated = False
        self.last_persist_ok = True

    @property
    def hydrated(self) -> bool:
        return self._hydrated

    def hydrate(self) -> Tuple[Booking, ...]:
        """Load persisted bookings once; later calls return the current snapshot."""

        if not self._hydrated:
            self._bookings = tuple(self._repository.load())
            self._hydrated = True
            self._logger.info("Booking store hydrated with %s bookings", len(self._bookings))
        return self._bookings

    def snapshot(self) -> Tuple[Booking, ...]:
        return self._bookings

    def get(self, booking_id: str) -> Optional[Booking]:
        for booking in self._bookings:
            if booking.id == booking_id:
                return booking
        return None

    def add(self, booking: Booking) -> Booking:
        self._commit(add_booking(self._bookings, booking))
        self._logger.info("Added booking %s for %s %s", booking.id, booking.date, booking.time)
        return booking

    def replace(
        self,
        booking_id: str,
        *,
        name: Optional[str] = None,
        message: Optional[str] = None,
    ) -> Booking:
        self._commit(replace_booking(self._bookings, booking_id, name=name, message=message))
        updated = self.get(booking_id)
        self._logger.info("Updated booking %s", booking_id)
        return updated

    def remove(self, booking_id: str) -> Booking:
        removed = self.get(booking_id)
        self._commit(remove_booking(self._bookings, booking_id))
        self._logger.info("Removed booking %s", booking_id)
        return removed

    def flush(self) -> bool:
        """Re-persist the current snapshot."""

        self.last_persist_ok = self._repository.persist(self._bookings)
        return self.last_persist_ok

    def _commit(self, bookings: Tuple[Booking, ...]) -> None:
        self._bookings = bookings
        self.last_persist_ok = self._repository.persist(bookings)
        if not self.last_persist_ok:
            self._logger.warning(
                "Continuing with %s bookings held in memory only", len(bookings)
            )


__all__ = ['BookingStore']
