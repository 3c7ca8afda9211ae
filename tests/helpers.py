"""Shared fakes and utilities for unit tests."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from infrastructure.blob_store import MemoryBlobStore
from reservations.errors import PersistenceError


class DummyLogger:
    """Lightweight stand-in for ``logging.Logger`` that records calls."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, Tuple[Any, ...], Dict[str, Any]]] = []

    def _record(self, level: str, *args: Any, **kwargs: Any) -> None:
        self.records.append((level, args, kwargs))

    def debug(self, *args: Any, **kwargs: Any) -> None:
        self._record("debug", *args, **kwargs)

    def info(self, *args: Any, **kwargs: Any) -> None:
        self._record("info", *args, **kwargs)

    def warning(self, *args: Any, **kwargs: Any) -> None:
        self._record("warning", *args, **kwargs)

    def error(self, *args: Any, **kwargs: Any) -> None:
        self._record("error", *args, **kwargs)

    def exception(self, *args: Any, **kwargs: Any) -> None:
        self._record("exception", *args, **kwargs)

    @property
    def messages(self) -> List[Tuple[str, Any]]:
        """Return formatted messages for quick assertions."""

        formatted: List[Tuple[str, Any]] = []
        for level, args, kwargs in self.records:
            message: Any = kwargs.get("msg")
            if args:
                template = args[0]
                if isinstance(template, str) and len(args) > 1:
                    try:
                        message = template % args[1:]
                    except (TypeError, ValueError):
                        message = template
                else:
                    message = template
            formatted.append((level, message))
        return formatted

    def levels(self) -> List[str]:
        return [level for level, _, _ in self.records]

    def last(self, level: Optional[str] = None) -> Optional[Tuple[str, Tuple[Any, ...], Dict[str, Any]]]:
        """Return the most recent record, optionally filtered by level."""

        if not self.records:
            return None
        if level is None:
            return self.records[-1]
        for entry in reversed(self.records):
            if entry[0] == level:
                return entry
        return None


class FailingBlobStore(MemoryBlobStore):
    """Blob store whose reads and/or writes raise ``PersistenceError``."""

    def __init__(self, *, fail_get: bool = False, fail_set: bool = True, initial=None) -> None:
        super().__init__(initial)
        self.fail_get = fail_get
        self.fail_set = fail_set
        self.set_calls = 0

    def get(self, key: str):
        if self.fail_get:
            raise PersistenceError("disk unavailable")
        return super().get(key)

    def set(self, key: str, value: str) -> None:
        self.set_calls += 1
        if self.fail_set:
            raise PersistenceError("disk full")
        super().set(key, value)
