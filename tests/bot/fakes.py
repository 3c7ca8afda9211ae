"""Lightweight stand-ins for Telegram objects used by the handler tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional


class _Recorder:
    def __init__(self, records: List[Dict[str, Any]]) -> None:
        self._records = records

    def _record(self, action: str, **payload: Any) -> None:
        entry = {"action": action}
        entry.update(payload)
        self._records.append(entry)


@dataclass
class FakeUser:
    """Minimal user representation carrying the identifiers handlers expect."""

    id: int
    first_name: str = "Test"
    username: str = "test_user"


@dataclass
class FakeChat:
    id: int


class FakeMessage(_Recorder):
    """Collect replies emitted during a scenario."""

    def __init__(self, chat_id: int, records: List[Dict[str, Any]], text: Optional[str] = None) -> None:
        super().__init__(records)
        self.chat_id = chat_id
        self.text = text
        self.deleted = False

    async def reply_text(self, text: str, **kwargs: Any) -> None:
        self._record(
            "reply_text",
            chat_id=self.chat_id,
            text=text,
            kwargs=kwargs,
        )

    async def delete(self) -> bool:
        self.deleted = True
        self._record("delete", chat_id=self.chat_id, text=self.text)
        return True


class FakeCallbackQuery(_Recorder):
    """Simulate the subset of telegram.CallbackQuery used by the handlers."""

    def __init__(
        self,
        *,
        data: str,
        user: FakeUser,
        records: List[Dict[str, Any]],
    ) -> None:
        super().__init__(records)
        self.data = data
        self.from_user = user
        self.message = FakeMessage(chat_id=user.id, records=records)

    async def answer(self, *args: Any, **kwargs: Any) -> None:
        self._record("answer", data=self.data, kwargs=kwargs)

    async def edit_message_text(self, text: str, **kwargs: Any) -> None:
        self._record(
            "edit_message_text",
            data=self.data,
            text=text,
            kwargs=kwargs,
        )


class FakeUpdate:
    """Simplified telegram.Update analogue for the handler tests."""

    def __init__(
        self,
        *,
        user: FakeUser,
        message: Optional[FakeMessage] = None,
        callback_query: Optional[FakeCallbackQuery] = None,
    ) -> None:
        self._effective_user = user
        self.message = message
        self.callback_query = callback_query

    @property
    def effective_user(self) -> FakeUser:
        return self._effective_user

    @property
    def effective_chat(self) -> FakeChat:
        return FakeChat(id=self._effective_user.id)


class FakeContext:
    """Plain object mirroring the telegram.ext callback context."""

    def __init__(self) -> None:
        self.user_data: Dict[str, Any] = {}
        self.chat_data: Dict[str, Any] = {}
        self.bot_data: Dict[str, Any] = {}
        self.application = None
        self.error: Optional[BaseException] = None


class ChatSession:
    """One chat talking to a handler: builds updates and keeps its context."""

    def __init__(self, handler, *, user_id: int = 1) -> None:
        self.handler = handler
        self.user = FakeUser(id=user_id)
        self.context = FakeContext()
        self.records: List[Dict[str, Any]] = []

    async def press(self, data: str) -> Dict[str, Any]:
        query = FakeCallbackQuery(data=data, user=self.user, records=self.records)
        await self.handler.handle_callback(FakeUpdate(user=self.user, callback_query=query), self.context)
        return self.last_output()

    async def type(self, text: str) -> Dict[str, Any]:
        message = FakeMessage(chat_id=self.user.id, records=self.records, text=text)
        await self.handler.handle_text(FakeUpdate(user=self.user, message=message), self.context)
        return self.last_output()

    def last_output(self) -> Optional[Dict[str, Any]]:
        for entry in reversed(self.records):
            if entry["action"] in {"edit_message_text", "reply_text"}:
                return entry
        return None

    def callbacks(self) -> List[str]:
        """Callback data of every button in the last rendered keyboard."""

        markup = self.last_output()["kwargs"]["reply_markup"]
        return [button.callback_data for row in markup.inline_keyboard for button in row]

    def button_labels(self) -> List[str]:
        markup = self.last_output()["kwargs"]["reply_markup"]
        return [button.text for row in markup.inline_keyboard for button in row]
