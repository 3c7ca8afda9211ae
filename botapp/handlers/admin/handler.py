"""Admin login and logout handlers."""


from __future__ import annotations

from telegram import Update
from telegram.ext import ContextTypes

from botapp.handlers.calendar import CalendarHandler
from botapp.handlers.dependencies import CallbackDependencies
from botapp.handlers.mixins import CallbackResponseMixin
from botapp.handlers.state import AdminDialog, close_modal, set_modal_state
from botapp.messages import strings
from botapp.messages.message_handlers import MessageHandlers
from botapp.ui.telegram_ui import TelegramUI


class AdminHandler(CallbackResponseMixin):
    def __init__(self, deps: CallbackDependencies, calendar: CalendarHandler) -> None:
        self.deps = deps
        self.logger = deps.logger
        self.calendar = calendar

    async def handle_admin_login(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """
        Open the admin login dialog

        Any staged delete of this chat is discarded, since the login dialog
        replaces whatever dialog was open.

        Args:
            update: The telegram update containing the callback query or /admin command
            context: The callback context

        Returns:
            None
        """
        state = self._state(update)
        if state.is_admin:
            self.calendar.leave_dialog(update, context)
            await self.calendar.show_home(update, notice=strings.ADMIN_LOGIN_SUCCESS)
            return

        state.controller.cancel_delete()
        dialog = set_modal_state(context, AdminDialog())
        await self._show_prompt(update, dialog)

    async def handle_admin_logout(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        state = self._state(update)
        state.admin_session.logout()
        state.controller.cancel_delete()
        close_modal(context)
        await self.calendar.show_home(update, notice=strings.ADMIN_LOGGED_OUT)

    async def handle_text(self, update: Update, context: ContextTypes.DEFAULT_TYPE, dialog: AdminDialog) -> None:
        """Treat the typed text as the admin password."""

        password = update.message.text or ""
        await MessageHandlers.delete_message_safe(update.message)

        state = self._state(update)
        if state.admin_session.login(password):
            self.logger.info("Admin login succeeded in chat %s", self._chat_id(update))
            close_modal(context)
            await self.calendar.show_home(update, notice=strings.ADMIN_LOGIN_SUCCESS)
            return

        self.logger.warning("Admin login failed in chat %s", self._chat_id(update))
        dialog.error = strings.ADMIN_LOGIN_FAILURE
        await self._show_prompt(update, dialog)

    async def _show_prompt(self, update: Update, dialog: AdminDialog) -> None:
        await self._respond(
            update,
            TelegramUI.format_admin_login_prompt(dialog.error),
            reply_markup=TelegramUI.create_admin_login_keyboard(),
        )
