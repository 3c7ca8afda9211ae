"""Booking dialog handlers: create, verify, edit and two-phase delete."""

from __future__ import annotations

from typing import Optional

from telegram import Update
from telegram.ext import ContextTypes

from botapp.handlers.calendar import CalendarHandler
from botapp.handlers.dependencies import CallbackDependencies
from botapp.handlers.mixins import CallbackResponseMixin
from botapp.handlers.state import (
    BookingDialog,
    BookingStep,
    ConfirmDelete,
    close_modal,
    get_modal_state,
    set_modal_state,
)
from botapp.messages import strings
from botapp.messages.message_handlers import MessageHandlers
from botapp.ui import callback_data
from botapp.ui.telegram_ui import TelegramUI
from reservations.errors import AuthError, BookingError, CapacityError, ValidationError
from reservations.validation import ensure_name

# Steps whose text input is a password and is removed from the chat
PASSWORD_STEPS = (BookingStep.PASSWORD, BookingStep.VERIFY, BookingStep.DELETE_PASSWORD)

STEP_PROMPTS = {
    BookingStep.NAME: strings.PROMPT_NAME,
    BookingStep.MESSAGE: strings.PROMPT_MESSAGE,
    BookingStep.PASSWORD: strings.PROMPT_PASSWORD,
    BookingStep.VERIFY: strings.PROMPT_VERIFY_PASSWORD,
    BookingStep.EDIT_NAME: strings.PROMPT_NEW_NAME,
    BookingStep.EDIT_MESSAGE: strings.PROMPT_NEW_MESSAGE,
    BookingStep.DELETE_PASSWORD: strings.PROMPT_DELETE_PASSWORD,
}


class BookingHandler(CallbackResponseMixin):
    def __init__(self, deps: CallbackDependencies, calendar: CalendarHandler) -> None:
        self.deps = deps
        self.logger = deps.logger
        self.calendar = calendar

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    async def _show_prompt(self, update: Update, dialog: BookingDialog) -> None:
        session = dialog.session
        title = strings.TITLE_NEW_BOOKING if session.is_new else strings.TITLE_EDIT_BOOKING
        keyboard = (
            TelegramUI.create_skip_message_keyboard()
            if dialog.step is BookingStep.MESSAGE
            else TelegramUI.create_dialog_cancel_keyboard()
        )
        await self._respond(
            update,
            TelegramUI.format_dialog_prompt(
                title,
                session.date,
                session.time,
                STEP_PROMPTS[dialog.step],
                error=dialog.error,
            ),
            reply_markup=keyboard,
        )

    async def _show_details(self, update: Update, dialog: BookingDialog, *, notice: Optional[str] = None) -> None:
        session = dialog.session
        read_only = dialog.step is BookingStep.VIEW
        await self._respond(
            update,
            TelegramUI.format_booking_details(
                session.date,
                session.time,
                dialog.draft_name,
                dialog.draft_message,
                is_admin=read_only,
                notice=notice or dialog.error,
            ),
            reply_markup=TelegramUI.create_edit_keyboard(read_only=read_only),
        )

    async def _show_dialog(self, update: Update, dialog: BookingDialog) -> None:
        if dialog.step in (BookingStep.EDIT, BookingStep.VIEW):
            await self._show_details(update, dialog)
        else:
            await self._show_prompt(update, dialog)

    def _active_dialog(self, context: ContextTypes.DEFAULT_TYPE) -> Optional[BookingDialog]:
        modal = get_modal_state(context)
        return modal if isinstance(modal, BookingDialog) else None

    async def _stale(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        self.calendar.leave_dialog(update, context)
        await self.calendar.show_home(update, notice=strings.STALE_ACTION)

    # ------------------------------------------------------------------
    # Opening dialogs
    # ------------------------------------------------------------------
    async def handle_reserve(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        parsed = callback_data.parse_slot(update.callback_query.data or '', callback_data.RESERVE_PREFIX)
        if parsed is None:
            await self._stale(update, context)
            return

        state = self._state(update)
        try:
            session = state.controller.open_slot(*parsed)
        except ValidationError as exc:
            self.logger.warning("Reserve rejected for %s: %s", parsed, exc.reason)
            await self._stale(update, context)
            return

        if session.slot_full:
            close_modal(context)
            await self.calendar.show_slot(
                update,
                session.date,
                session.time,
                notice=strings.rejection_text(CapacityError("slot full")),
            )
            return

        dialog = set_modal_state(context, BookingDialog(session=session, step=BookingStep.NAME))
        await self._show_prompt(update, dialog)

    async def handle_open_booking(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        booking_id = callback_data.parse_open_booking(update.callback_query.data or '')
        state = self._state(update)
        try:
            session = state.controller.open_booking(booking_id)
        except ValidationError as exc:
            self.logger.info("Open booking %s rejected: %s", booking_id, exc.reason)
            await self._stale(update, context)
            return

        if session.message_revealed:
            dialog = BookingDialog(
                session=session,
                step=BookingStep.VIEW,
                draft_name=session.name,
                draft_message=session.message,
            )
        else:
            dialog = BookingDialog(session=session, step=BookingStep.VERIFY, draft_name=session.name)
        set_modal_state(context, dialog)
        await self._show_dialog(update, dialog)

    # ------------------------------------------------------------------
    # Dialog buttons
    # ------------------------------------------------------------------
    async def handle_skip_message(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        dialog = self._active_dialog(context)
        if dialog is None or dialog.step is not BookingStep.MESSAGE:
            await self._stale(update, context)
            return

        dialog.draft_message = ""
        dialog.step = BookingStep.PASSWORD
        dialog.error = None
        await self._show_prompt(update, dialog)

    async def handle_edit_name(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        await self._switch_edit_step(update, context, BookingStep.EDIT_NAME)

    async def handle_edit_message(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        await self._switch_edit_step(update, context, BookingStep.EDIT_MESSAGE)

    async def handle_delete(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        await self._switch_edit_step(update, context, BookingStep.DELETE_PASSWORD)

    async def _switch_edit_step(self, update: Update, context: ContextTypes.DEFAULT_TYPE, step: BookingStep) -> None:
        dialog = self._active_dialog(context)
        if dialog is None or dialog.step is not BookingStep.EDIT:
            await self._stale(update, context)
            return

        dialog.step = step
        dialog.error = None
        await self._show_prompt(update, dialog)

    async def handle_save(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        dialog = self._active_dialog(context)
        if dialog is None or dialog.step is not BookingStep.EDIT:
            await self._stale(update, context)
            return

        state = self._state(update)
        session = dialog.session
        try:
            state.controller.submit(session, name=dialog.draft_name, message=dialog.draft_message)
        except BookingError as exc:
            self.logger.info("Update of booking %s rejected: %s", session.booking_id, exc.reason)
            if isinstance(exc, ValidationError) and exc.reason == "booking not found":
                close_modal(context)
                await self.calendar.show_slot(update, session.date, session.time, notice=strings.rejection_text(exc))
                return
            dialog.error = strings.rejection_text(exc)
            await self._show_details(update, dialog)
            return

        close_modal(context)
        await self.calendar.show_slot(update, session.date, session.time, notice=strings.BOOKING_UPDATED)

    async def handle_confirm_delete(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        modal = get_modal_state(context)
        state = self._state(update)
        if not isinstance(modal, ConfirmDelete):
            await self._stale(update, context)
            return

        close_modal(context)
        try:
            state.controller.confirm_delete()
        except BookingError as exc:
            self.logger.info("Confirmed delete of %s rejected: %s", modal.booking_id, exc.reason)
            await self.calendar.show_slot(update, modal.date, modal.time, notice=strings.rejection_text(exc))
            return

        await self.calendar.show_slot(update, modal.date, modal.time, notice=strings.BOOKING_DELETED)

    async def handle_cancel_delete(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        modal = get_modal_state(context)
        state = self._state(update)
        state.controller.cancel_delete()
        close_modal(context)
        if isinstance(modal, ConfirmDelete):
            await self.calendar.show_slot(update, modal.date, modal.time, notice=strings.DELETE_CANCELLED)
        else:
            await self.calendar.show_home(update)

    async def handle_close(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Close whichever dialog is open and return to the view beneath it."""

        modal = get_modal_state(context)
        state = self._state(update)
        state.controller.cancel_delete()
        close_modal(context)

        if isinstance(modal, BookingDialog):
            state.controller.close(modal.session)
            await self.calendar.show_slot(update, modal.session.date, modal.session.time)
        elif isinstance(modal, ConfirmDelete):
            await self.calendar.show_slot(update, modal.date, modal.time)
        else:
            await self.calendar.show_home(update)

    # ------------------------------------------------------------------
    # Typed input
    # ------------------------------------------------------------------
    async def handle_text(self, update: Update, context: ContextTypes.DEFAULT_TYPE, dialog: BookingDialog) -> None:
        text = update.message.text or ""
        if dialog.step in PASSWORD_STEPS:
            await MessageHandlers.delete_message_safe(update.message)

        if not dialog.accepts_text:
            await self._show_dialog(update, dialog)
            return

        dialog.error = None
        step = dialog.step
        if step is BookingStep.NAME:
            await self._accept_name(update, dialog, text, next_step=BookingStep.MESSAGE)
        elif step is BookingStep.MESSAGE:
            dialog.draft_message = text.strip()
            dialog.step = BookingStep.PASSWORD
            await self._show_prompt(update, dialog)
        elif step is BookingStep.PASSWORD:
            await self._create(update, context, dialog, text)
        elif step is BookingStep.VERIFY:
            await self._verify(update, dialog, text)
        elif step is BookingStep.EDIT_NAME:
            await self._accept_name(update, dialog, text, next_step=BookingStep.EDIT)
        elif step is BookingStep.EDIT_MESSAGE:
            dialog.draft_message = text.strip()
            dialog.step = BookingStep.EDIT
            await self._show_details(update, dialog)
        elif step is BookingStep.DELETE_PASSWORD:
            await self._stage_delete(update, context, dialog, text)

    async def _accept_name(self, update: Update, dialog: BookingDialog, text: str, *, next_step: BookingStep) -> None:
        try:
            dialog.draft_name = ensure_name(text)
        except ValidationError as exc:
            dialog.error = strings.rejection_text(exc)
            await self._show_prompt(update, dialog)
            return

        dialog.step = next_step
        await self._show_dialog(update, dialog)

    async def _create(self, update: Update, context: ContextTypes.DEFAULT_TYPE, dialog: BookingDialog, password: str) -> None:
        state = self._state(update)
        session = dialog.session
        try:
            state.controller.submit(
                session,
                name=dialog.draft_name,
                message=dialog.draft_message,
                password=password,
            )
        except CapacityError as exc:
            close_modal(context)
            await self.calendar.show_slot(update, session.date, session.time, notice=strings.rejection_text(exc))
            return
        except BookingError as exc:
            dialog.error = strings.rejection_text(exc)
            if exc.reason == "missing name":
                dialog.step = BookingStep.NAME
            await self._show_prompt(update, dialog)
            return

        close_modal(context)
        await self.calendar.show_slot(update, session.date, session.time, notice=strings.BOOKING_CREATED)

    async def _verify(self, update: Update, dialog: BookingDialog, password: str) -> None:
        state = self._state(update)
        try:
            state.controller.verify_password(dialog.session, password)
        except BookingError as exc:
            dialog.error = strings.rejection_text(exc)
            await self._show_prompt(update, dialog)
            return

        dialog.step = BookingStep.EDIT
        dialog.draft_name = dialog.session.name
        dialog.draft_message = dialog.session.message or ""
        await self._show_details(update, dialog)

    async def _stage_delete(self, update: Update, context: ContextTypes.DEFAULT_TYPE, dialog: BookingDialog, password: str) -> None:
        state = self._state(update)
        session = dialog.session
        try:
            state.controller.stage_delete(session.booking_id, password)
        except AuthError:
            dialog.step = BookingStep.EDIT
            dialog.error = f"⚠️ {strings.DELETE_PASSWORD_MISMATCH}"
            await self._show_details(update, dialog)
            return
        except BookingError as exc:
            dialog.error = strings.rejection_text(exc)
            await self._show_prompt(update, dialog)
            return

        modal = set_modal_state(
            context,
            ConfirmDelete(
                booking_id=session.booking_id,
                date=session.date,
                time=session.time,
                name=session.name,
            ),
        )
        await self._respond(
            update,
            TelegramUI.format_confirm_delete_message(modal.date, modal.time, modal.name),
            reply_markup=TelegramUI.create_confirm_delete_keyboard(),
        )


__all__ = ["BookingHandler"]
