"""Explicit application state owning the booking core."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from infrastructure.constants import ADMIN_PASSWORD, MAX_BOOKINGS_PER_SLOT
from reservations.lifecycle import BookingLifecycleController
from reservations.slots import SlotIndex
from reservations.store import BookingRepository, BookingStore
from users.admin_session import AdminSession


@dataclass
class ApplicationState:
    """Store, admin session and controller for one actor.

    Several states may share a single :class:`BookingStore`; the admin
    session and any staged delete belong to the state alone.
    """

    store: BookingStore
    admin_session: AdminSession
    controller: BookingLifecycleController

    @classmethod
    def initialize(
        cls,
        blob_store,
        *,
        admin_password: str = ADMIN_PASSWORD,
        capacity: int = MAX_BOOKINGS_PER_SLOT,
        store: Optional[BookingStore] = None,
    ) -> "ApplicationState":
        if store is None:
            store = BookingStore(BookingRepository(blob_store))
        store.hydrate()

        admin_session = AdminSession(admin_password)
        controller = BookingLifecycleController(store, admin_session, capacity=capacity)
        return cls(store=store, admin_session=admin_session, controller=controller)

    @property
    def slots(self) -> SlotIndex:
        return self.controller.slots

    @property
    def is_admin(self) -> bool:
        return self.admin_session.is_authenticated

    def teardown(self) -> None:
        self.controller.cancel_delete()
        self.admin_session.logout()
        if not self.store.flush():
            logging.getLogger('BookingStore').warning("Final flush failed during teardown")


__all__ = ['ApplicationState']
