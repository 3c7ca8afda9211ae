"""Domain dataclasses for exhibition bookings."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, NamedTuple, Optional, Tuple

BOOKING_FIELDS: Tuple[str, ...] = ('id', 'date', 'time', 'name', 'message', 'password')
REQUIRED_PAYLOAD_FIELDS: Tuple[str, ...] = ('id', 'date', 'time', 'name', 'password')


class SlotKey(NamedTuple):
    """A (date, time) pair identifying one calendar cell."""

    date: str
    time: str


@dataclass(frozen=True)
class Booking:
    """One visitor reservation for a calendar slot."""

    id: str
    date: str
    time: str
    name: str
    message: str
    password: str

    @property
    def slot(self) -> SlotKey:
        return SlotKey(self.date, self.time)

    @classmethod
    def new(
        cls,
        date: str,
        time: str,
        name: str,
        message: str,
        password: str,
        *,
        booking_id: Optional[str] = None,
    ) -> "Booking":
        """Create a booking with a freshly generated identifier."""

        return cls(
            id=booking_id or uuid.uuid4().hex,
            date=date,
            time=time,
            name=name,
            message=message,
            password=password,
        )

    def with_details(self, *, name: Optional[str] = None, message: Optional[str] = None) -> "Booking":
        """Return a copy with the editable fields replaced."""

        changes: Dict[str, str] = {}
        if name is not None:
            changes['name'] = name
        if message is not None:
            changes['message'] = message
        return replace(self, **changes) if changes else self

    def message_preview(self, length: int) -> str:
        if len(self.message) <= length:
            return self.message
        return f"{self.message[:length]}..."

    def to_payload(self) -> Dict[str, str]:
        return {field_name: getattr(self, field_name) for field_name in BOOKING_FIELDS}

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Booking":
        """Hydrate a stored record, raising ``ValueError`` when it is malformed."""

        if not isinstance(payload, Mapping):
            raise ValueError(f"expected an object, received {type(payload).__name__}")

        for field_name in REQUIRED_PAYLOAD_FIELDS:
            value = payload.get(field_name)
            if not isinstance(value, str) or not value:
                raise ValueError(f"field {field_name!r} is missing or not a string")

        message = payload.get('message', '')
        if message is None:
            message = ''
        if not isinstance(message, str):
            raise ValueError("field 'message' is not a string")

        return cls(
            id=payload['id'],
            date=payload['date'],
            time=payload['time'],
            name=payload['name'],
            message=message,
            password=payload['password'],
        )


__all__ = ['BOOKING_FIELDS', 'Booking', 'SlotKey']
