"""Typed per-chat modal state for the booking dialogs.

The modal is a tagged union: exactly one of :class:`Closed`,
:class:`BookingDialog`, :class:`AdminDialog` or :class:`ConfirmDelete` is
stored for a chat at any time. Replacing it with :class:`Closed` discards any
pending input.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from telegram.ext import ContextTypes

from reservations.lifecycle import EditSession


class BookingStep(Enum):
    NAME = 'name'
    MESSAGE = 'message'
    PASSWORD = 'password'
    VERIFY = 'verify'
    EDIT = 'edit'
    EDIT_NAME = 'edit_name'
    EDIT_MESSAGE = 'edit_message'
    DELETE_PASSWORD = 'delete_password'
    VIEW = 'view'


@dataclass
class Closed:
    """No dialog open."""


@dataclass
class BookingDialog:
    """New or existing booking dialog with the form values typed so far."""

    session: EditSession
    step: BookingStep
    draft_name: str = ""
    draft_message: str = ""
    error: Optional[str] = None

    @property
    def accepts_text(self) -> bool:
        return self.step not in (BookingStep.EDIT, BookingStep.VIEW)


@dataclass
class AdminDialog:
    """Admin login prompt."""

    error: Optional[str] = None


@dataclass
class ConfirmDelete:
    """A delete has been staged and awaits the second confirmation."""

    booking_id: str
    date: str
    time: str
    name: str


ModalState = Union[Closed, BookingDialog, AdminDialog, ConfirmDelete]

MODAL_KEY = "modal_state"


def get_modal_state(context: ContextTypes.DEFAULT_TYPE) -> ModalState:
    """Retrieve the modal state for the current chat, defaulting to closed."""

    state = context.chat_data.get(MODAL_KEY)
    if isinstance(state, (Closed, BookingDialog, AdminDialog, ConfirmDelete)):
        return state
    return Closed()


def set_modal_state(context: ContextTypes.DEFAULT_TYPE, state: ModalState) -> ModalState:
    context.chat_data[MODAL_KEY] = state
    return state


def close_modal(context: ContextTypes.DEFAULT_TYPE) -> ModalState:
    """Discard whatever dialog is open for the current chat."""

    return set_modal_state(context, Closed())


__all__ = [
    "AdminDialog",
    "BookingDialog",
    "BookingStep",
    "Closed",
    "ConfirmDelete",
    "ModalState",
    "close_modal",
    "get_modal_state",
    "set_modal_state",
]
