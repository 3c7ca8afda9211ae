"""Key-value blob storage backing the booking store.

The store keeps string values under string keys, mirroring the get/set
semantics of per-browser local storage. ``JsonBlobStore`` keeps every key in
a single JSON object on disk.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Dict, Optional, Protocol

from reservations.errors import PersistenceError


class BlobStore(Protocol):
    """Minimal contract shared by blob store implementations."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class JsonBlobStore:
    """Read/write string blobs to a JSON backing file."""

    def __init__(self, file_path: str, *, logger: Optional[logging.Logger] = None) -> None:
        self._path = Path(file_path)
        self._logger = logger or logging.getLogger('BlobStore')

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> Optional[str]:
        """Return the blob stored under ``key`` or ``None`` when absent."""

        value = self._read_all().get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise PersistenceError(f"value under {key!r} is not a string")
        return value

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, rewriting the backing file atomically."""

        payload = self._read_all_for_write()
        payload[key] = value
        self._write_all(payload)
        self._logger.debug("Stored %s characters under %r in %s", len(value), key, self._path)

    def _read_all(self) -> Dict[str, object]:
        if not self._path.exists():
            self._logger.debug("Blob file %s does not exist; treating as empty", self._path)
            return {}

        try:
            with self._path.open('r', encoding='utf-8') as handle:
                raw = handle.read()
        except OSError as exc:
            raise PersistenceError(f"failed to read {self._path}: {exc}") from exc

        if not raw.strip():
            return {}

        try:
            data = json.loads(raw)
        except ValueError as exc:
            raise PersistenceError(f"invalid JSON in {self._path}: {exc}") from exc

        if not isinstance(data, dict):
            raise PersistenceError(
                f"invalid blob format in {self._path}; expected object, received {type(data).__name__}"
            )
        return data

    def _read_all_for_write(self) -> Dict[str, object]:
        # An unreadable file must not block writes; the new payload replaces it.
        try:
            return self._read_all()
        except PersistenceError as exc:
            self._logger.warning("Overwriting unreadable blob file %s: %s", self._path, exc.reason)
            return {}

    def _write_all(self, payload: Dict[str, object]) -> None:
        tmp_path: Optional[Path] = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with NamedTemporaryFile(
                'w', encoding='utf-8', dir=self._path.parent, delete=False
            ) as handle:
                tmp_path = Path(handle.name)
                json.dump(payload, handle, indent=2, ensure_ascii=False)
                handle.write("\n")
                handle.flush()
            tmp_path.replace(self._path)
        except OSError as exc:
            if tmp_path is not None:
                try:
                    tmp_path.unlink()
                except OSError:
                    pass
            raise PersistenceError(f"failed to write {self._path}: {exc}") from exc


class MemoryBlobStore:
    """Dict-backed blob store with the same contract as :class:`JsonBlobStore`."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


__all__ = ['BlobStore', 'JsonBlobStore', 'MemoryBlobStore']
