"""Calendar navigation: home screen, day grid and slot view."""

from __future__ import annotations

from typing import Optional

from telegram import Update
from telegram.ext import ContextTypes

from botapp.handlers.dependencies import CallbackDependencies
from botapp.handlers.mixins import CallbackResponseMixin
from botapp.handlers.state import close_modal
from botapp.messages import strings
from botapp.ui import callback_data
from botapp.ui.calendar import local_today
from botapp.ui.telegram_ui import TelegramUI
from infrastructure.constants import calendar_date_keys, is_known_slot


class CalendarHandler(CallbackResponseMixin):
    def __init__(self, deps: CallbackDependencies) -> None:
        self.deps = deps
        self.logger = deps.logger

    # ------------------------------------------------------------------
    # Views reused by the booking and admin handlers
    # ------------------------------------------------------------------
    async def show_home(self, update: Update, *, notice: Optional[str] = None) -> None:
        state = self._state(update)
        text = TelegramUI.format_home_message(is_admin=state.is_admin)
        if notice:
            text = f"{notice}\n\n{text}"
        await self._respond(
            update,
            text,
            reply_markup=TelegramUI.create_home_keyboard(
                is_admin=state.is_admin,
                today=local_today(self.deps.timezone),
            ),
        )

    async def show_day(self, update: Update, date_key: str) -> None:
        state = self._state(update)
        await self._respond(
            update,
            TelegramUI.format_day_message(date_key),
            reply_markup=TelegramUI.create_day_keyboard(
                date_key,
                state.slots.occupancy(date_key),
                state.slots.capacity,
            ),
        )

    async def show_slot(
        self,
        update: Update,
        date_key: str,
        time_slot: str,
        *,
        notice: Optional[str] = None,
    ) -> None:
        state = self._state(update)
        bookings = state.slots.bookings_for(date_key, time_slot)
        capacity = state.slots.capacity
        await self._respond(
            update,
            TelegramUI.format_slot_message(date_key, time_slot, bookings, capacity, notice=notice),
            reply_markup=TelegramUI.create_slot_keyboard(
                date_key,
                time_slot,
                bookings,
                capacity,
                is_admin=state.is_admin,
            ),
        )

    # ------------------------------------------------------------------
    # Callback entry points
    # ------------------------------------------------------------------
    def leave_dialog(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Navigating away discards the open dialog and any staged delete."""

        self._state(update).controller.cancel_delete()
        close_modal(context)

    async def handle_home(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        self.leave_dialog(update, context)
        await self.show_home(update)

    async def handle_day(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        date_key = callback_data.parse_day(update.callback_query.data or '')
        if date_key not in calendar_date_keys():
            self.logger.warning("Ignoring unknown calendar date %r", date_key)
            await self.show_home(update, notice=strings.STALE_ACTION)
            return

        self.leave_dialog(update, context)
        await self.show_day(update, date_key)

    async def handle_slot(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        parsed = callback_data.parse_slot(update.callback_query.data or '')
        if parsed is None or not is_known_slot(*parsed):
            self.logger.warning("Ignoring unknown slot callback %r", update.callback_query.data)
            await self.show_home(update, notice=strings.STALE_ACTION)
            return

        self.leave_dialog(update, context)
        await self.show_slot(update, *parsed)

    async def handle_unknown(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        query = update.callback_query
        self.logger.warning("Unhandled callback %r", query.data if query else None)
        self.leave_dialog(update, context)
        await self.show_home(update, notice=strings.STALE_ACTION)
