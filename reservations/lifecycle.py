"""Booking lifecycle controller.

The controller is the only place booking rules are enforced. Callers open an
:class:`EditSession` for a slot or an existing booking, feed it passwords and
form values, and receive either a :class:`~reservations.models.Booking` or a
:class:`~reservations.errors.BookingError` describing the rejection.

Deletes are two-phase: :meth:`BookingLifecycleController.stage_delete`
checks the password and holds a :class:`StagedDelete`;
:meth:`BookingLifecycleController.confirm_delete` performs the removal and
:meth:`BookingLifecycleController.cancel_delete` discards it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from infrastructure.constants import MAX_BOOKINGS_PER_SLOT
from reservations.errors import AuthError, ValidationError
from reservations.models import Booking
from reservations.slots import SlotIndex
from reservations.store import BookingStore
from reservations.validation import (
    ensure_known_slot,
    ensure_name,
    ensure_password,
    ensure_password_matches,
    ensure_slot_available,
)
from users.admin_session import AdminSession


class EditPhase(Enum):
    CLOSED = 'closed'
    VIEWING = 'viewing'
    PASSWORD_PENDING = 'password_pending'
    EDITABLE = 'editable'
    SUBMITTED = 'submitted'


@dataclass
class EditSession:
    """State of one booking dialog.

    ``booking_id`` is ``None`` for a new booking. ``message`` stays ``None``
    until the stored message may be shown to the actor.
    """

    phase: EditPhase
    date: str
    time: str
    booking_id: Optional[str] = None
    name: str = ''
    message: Optional[str] = None
    slot_full: bool = False
    verified_password: Optional[str] = None

    @property
    def is_new(self) -> bool:
        return self.booking_id is None

    @property
    def message_revealed(self) -> bool:
        return self.message is not None


@dataclass(frozen=True)
class StagedDelete:
    booking_id: str
    verified_password: str


class BookingLifecycleController:
    """Validate and apply create, update and delete intents."""

    def __init__(
        self,
        store: BookingStore,
        admin_session: AdminSession,
        *,
        capacity: int = MAX_BOOKINGS_PER_SLOT,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.store = store
        self.admin_session = admin_session
        self.slots = SlotIndex(store, capacity=capacity)
        self._capacity = capacity
        self._logger = logger or logging.getLogger('BookingLifecycle')
        self._staged_delete: Optional[StagedDelete] = None

    @property
    def staged_delete(self) -> Optional[StagedDelete]:
        return self._staged_delete

    # ------------------------------------------------------------------
    # Sessions
    # ------------------------------------------------------------------
    def open_slot(self, date: str, time: str) -> EditSession:
        """Start a new-booking session for the given slot."""

        ensure_known_slot(date, time)
        return EditSession(
            phase=EditPhase.VIEWING,
            date=date,
            time=time,
            slot_full=self.slots.is_full(date, time),
        )

    def open_booking(self, booking_id: str) -> EditSession:
        """Open an existing booking; admins see the message immediately."""

        booking = self._require_booking(booking_id)
        session = EditSession(
            phase=EditPhase.PASSWORD_PENDING,
            date=booking.date,
            time=booking.time,
            booking_id=booking.id,
            name=booking.name,
            slot_full=self.slots.is_full(booking.date, booking.time),
        )
        if self.admin_session.is_authenticated:
            session.phase = EditPhase.EDITABLE
            session.message = booking.message
        return session

    def verify_password(self, session: EditSession, password: Optional[str]) -> EditSession:
        if session.is_new:
            raise ValidationError("booking not found")

        booking = self._require_booking(session.booking_id)
        try:
            ensure_password_matches(booking.password, password)
        except AuthError:
            self._logger.warning("Password mismatch while opening booking %s", booking.id)
            raise

        session.phase = EditPhase.EDITABLE
        session.name = booking.name
        session.message = booking.message
        session.verified_password = password
        return session

    def close(self, session: EditSession) -> EditSession:
        session.phase = EditPhase.CLOSED
        session.message = None
        session.verified_password = None
        return session

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def create(
        self,
        date: str,
        time: str,
        name: Optional[str],
        message: Optional[str],
        password: Optional[str],
    ) -> Booking:
        ensure_known_slot(date, time)
        clean_name = ensure_name(name)
        ensure_password(password)
        ensure_slot_available(self.slots.count(date, time), self._capacity)

        booking = Booking.new(date, time, clean_name, (message or '').strip(), password)
        self.store.add(booking)
        return booking

    def update(
        self,
        booking_id: str,
        *,
        name: Optional[str] = None,
        message: Optional[str] = None,
        password: Optional[str] = None,
    ) -> Booking:
        """Change the name and/or message of a booking.

        Non-admin callers must supply the booking's password. Date, time,
        id and password are never changed.
        """

        booking = self._require_booking(booking_id)
        if not self.admin_session.is_authenticated:
            try:
                ensure_password_matches(booking.password, password)
            except AuthError:
                self._logger.warning("Password mismatch while updating booking %s", booking_id)
                raise

        clean_name = ensure_name(name) if name is not None else None
        clean_message = message.strip() if message is not None else None
        return self.store.replace(booking_id, name=clean_name, message=clean_message)

    def submit(
        self,
        session: EditSession,
        *,
        name: Optional[str],
        message: Optional[str],
        password: Optional[str] = None,
    ) -> Booking:
        """Apply a dialog's form values and mark the session submitted."""

        if session.is_new:
            booking = self.create(session.date, session.time, name, message, password)
        else:
            if session.phase is not EditPhase.EDITABLE:
                raise AuthError("password mismatch")
            booking = self.update(
                session.booking_id,
                name=name,
                message=message,
                password=password if password is not None else session.verified_password,
            )

        session.phase = EditPhase.SUBMITTED
        session.booking_id = booking.id
        session.name = booking.name
        session.message = booking.message
        return booking

    # ------------------------------------------------------------------
    # Two-phase delete
    # ------------------------------------------------------------------
    def stage_delete(self, booking_id: str, password: Optional[str]) -> StagedDelete:
        if not password:
            raise ValidationError("missing password")

        booking = self._require_booking(booking_id)
        try:
            ensure_password_matches(booking.password, password)
        except AuthError:
            self._logger.warning("Password mismatch while deleting booking %s", booking_id)
            raise

        self._staged_delete = StagedDelete(booking_id=booking_id, verified_password=password)
        self._logger.info("Staged delete of booking %s", booking_id)
        return self._staged_delete

    def confirm_delete(self) -> Booking:
        staged = self._staged_delete
        if staged is None:
            raise ValidationError("nothing staged")

        self._staged_delete = None
        booking = self.store.get(staged.booking_id)
        if booking is None:
            raise ValidationError("booking not found")
        ensure_password_matches(booking.password, staged.verified_password)
        return self.store.remove(staged.booking_id)

    def cancel_delete(self) -> None:
        if self._staged_delete is not None:
            self._logger.info("Cancelled delete of booking %s", self._staged_delete.booking_id)
        self._staged_delete = None

    def _require_booking(self, booking_id: Optional[str]) -> Booking:
        booking = self.store.get(booking_id) if booking_id else None
        if booking is None:
            raise ValidationError("booking not found")
        return booking


__all__ = [
    'BookingLifecycleController',
    'EditPhase',
    'EditSession',
    'StagedDelete',
]
