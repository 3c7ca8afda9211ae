"""Callback dispatcher wiring domain handlers and router."""

from __future__ import annotations

import logging
from typing import Callable

from telegram import Update
from telegram.ext import ContextTypes

from botapp.handlers.admin.handler import AdminHandler
from botapp.handlers.booking.handler import BookingHandler
from botapp.handlers.calendar.handler import CalendarHandler
from botapp.handlers.dependencies import CallbackDependencies
from botapp.handlers.mixins import chat_id_of
from botapp.handlers.router import CallbackRouter
from botapp.handlers.state import AdminDialog, BookingDialog, ConfirmDelete, close_modal, get_modal_state
from botapp.messages import strings
from botapp.ui import callback_data
from reservations.app_state import ApplicationState


class CallbackHandler:
    """Main entrypoint invoked by Telegram callback queries and typed text."""

    def __init__(
        self,
        state_provider: Callable[[int], ApplicationState],
        *,
        timezone: str = "Asia/Seoul",
    ) -> None:
        self.logger = logging.getLogger('CallbackHandler')

        self.deps = CallbackDependencies(
            logger=self.logger,
            state_provider=state_provider,
            timezone=timezone,
        )

        self.calendar = CalendarHandler(self.deps)
        self.booking = BookingHandler(self.deps, self.calendar)
        self.admin = AdminHandler(self.deps, self.calendar)

        self.router = CallbackRouter(self.calendar.handle_unknown)
        self._register_routes()

    def _register_routes(self) -> None:
        """Register exact and prefix routes with the router."""

        add = self.router.add_exact
        add(callback_data.HOME, self.calendar.handle_home)
        add(callback_data.ADMIN_LOGIN, self.admin.handle_admin_login)
        add(callback_data.ADMIN_LOGOUT, self.admin.handle_admin_logout)
        add(callback_data.CLOSE_DIALOG, self.booking.handle_close)
        add(callback_data.SKIP_MESSAGE, self.booking.handle_skip_message)
        add(callback_data.EDIT_NAME, self.booking.handle_edit_name)
        add(callback_data.EDIT_MESSAGE, self.booking.handle_edit_message)
        add(callback_data.SAVE_BOOKING, self.booking.handle_save)
        add(callback_data.DELETE_BOOKING, self.booking.handle_delete)
        add(callback_data.CONFIRM_DELETE, self.booking.handle_confirm_delete)
        add(callback_data.CANCEL_DELETE, self.booking.handle_cancel_delete)

        # Prefix-based routes
        self.router.add_prefix(callback_data.DAY_PREFIX, self.calendar.handle_day)
        self.router.add_prefix(callback_data.SLOT_PREFIX, self.calendar.handle_slot)
        self.router.add_prefix(callback_data.RESERVE_PREFIX, self.booking.handle_reserve)
        self.router.add_prefix(callback_data.OPEN_PREFIX, self.booking.handle_open_booking)

    async def handle_callback(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Answer query and delegate to the registered handler."""

        query = update.callback_query
        if query:
            try:
                await query.answer()
            except Exception as exc:  # pragma: no cover
                self.logger.warning("Failed to answer callback query: %s", exc)

            self.logger.info(
                "Received callback %s from user %s",
                query.data,
                update.effective_user.id if update.effective_user else 'Unknown',
            )

        await self.router.dispatch(update, context)

    async def handle_text(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Feed typed text to whichever dialog is open in this chat."""

        if not update.message:
            return

        modal = get_modal_state(context)
        if isinstance(modal, BookingDialog):
            await self.booking.handle_text(update, context, modal)
        elif isinstance(modal, AdminDialog):
            await self.admin.handle_text(update, context, modal)
        elif isinstance(modal, ConfirmDelete):
            await update.message.reply_text(strings.CONFIRM_DELETE_QUESTION)
        else:
            await self.calendar.show_home(update, notice=strings.NO_ACTIVE_DIALOG)

    async def handle_cancel(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Close any open dialog, discarding a staged delete."""

        modal = get_modal_state(context)
        state = self.deps.state_for(chat_id_of(update))
        state.controller.cancel_delete()
        if isinstance(modal, BookingDialog):
            state.controller.close(modal.session)
        close_modal(context)
        await self.calendar.show_home(update, notice=strings.DIALOG_CLOSED)


__all__ = ["CallbackHandler"]
