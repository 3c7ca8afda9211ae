"""Persistence helpers for booking storage."""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable, List, Optional, Set

from infrastructure.constants import BOOKINGS_KEY
from reservations.errors import PersistenceError
from reservations.models import Booking


class BookingRepository:
    """Read/write bookings as a JSON list under one blob store key."""

    def __init__(
        self,
        blob_store: Any,
        *,
        key: str = BOOKINGS_KEY,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._blob_store = blob_store
        self._key = key
        self._logger = logger or logging.getLogger('BookingRepository')

    def load(self) -> List[Booking]:
        """Load bookings from the blob store, returning an empty list on failure."""

        try:
            raw = self._blob_store.get(self._key)
        except PersistenceError as exc:
            self._logger.error("Failed to read %r from blob store: %s", self._key, exc.reason)
            return []

        if raw is None:
            self._logger.debug("No stored value under %r; starting empty", self._key)
            return []

        try:
            payload = json.loads(raw)
        except ValueError as exc:
            self._logger.warning("Stored bookings under %r are not valid JSON: %s", self._key, exc)
            return []

        if not isinstance(payload, list):
            self._logger.warning(
                "Invalid bookings format under %r; expected list, received %s",
                self._key,
                type(payload).__name__,
            )
            return []

        bookings = self._hydrate_records(payload)
        self._logger.debug("Loaded %s bookings from %r", len(bookings), self._key)
        return bookings

    def persist(self, bookings: Iterable[Booking]) -> bool:
        """Serialize the full collection; return ``False`` when the write failed."""

        records = [booking.to_payload() for booking in bookings]
        try:
            self._blob_store.set(self._key, json.dumps(records, ensure_ascii=False))
        except PersistenceError as exc:
            self._logger.error(
                "Failed to persist %s bookings under %r: %s",
                len(records),
                self._key,
                exc.reason,
            )
            return False

        self._logger.debug("Persisted %s bookings under %r", len(records), self._key)
        return True

    def _hydrate_records(self, payload: List[Any]) -> List[Booking]:
        bookings: List[Booking] = []
        seen_ids: Set[str] = set()
        for index, record in enumerate(payload):
            try:
                booking = Booking.from_payload(record)
            except ValueError as exc:
                self._logger.warning("Skipping malformed booking record #%s: %s", index, exc)
                continue
            if booking.id in seen_ids:
                self._logger.warning(
                    "Skipping booking record #%s with duplicate id %s", index, booking.id
                )
                continue
            seen_ids.add(booking.id)
            bookings.append(booking)
        return bookings
