"""Key-value backends: the only I/O boundary of the store core.

A backend maps string keys to opaque text. There are no transactions across
keys. When a quota is set, a write that would push the total stored size over
it is rejected before anything changes, so the previous value stays readable.
"""

from __future__ import annotations

import errno
import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol, runtime_checkable

from .errors import MalformedPersistedData, StorageError, StorageQuotaExceeded

logger = logging.getLogger(__name__)


@runtime_checkable
class KeyValueBackend(Protocol):
    """Minimal get/set contract every repository is built on."""

    def read(self, key: str) -> str | None:
        """Return the text stored under key, or None if never written."""
        ...

    def write(self, key: str, text: str) -> None:
        """Replace the text stored under key."""
        ...


def entry_size(key: str, text: str) -> int:
    """Size an entry counts against the quota (UTF-8 key + value)."""
    return len(key.encode("utf-8")) + len(text.encode("utf-8"))


class MemoryBackend:
    """Dict-backed backend, one per process. Used by tests and ephemeral demos."""

    def __init__(self, quota_bytes: int | None = None) -> None:
        self._data: dict[str, str] = {}
        self._quota = quota_bytes

    def read(self, key: str) -> str | None:
        return self._data.get(key)

    def write(self, key: str, text: str) -> None:
        if self._quota:
            required = entry_size(key, text) + sum(
                entry_size(k, v) for k, v in self._data.items() if k != key
            )
            if required > self._quota:
                logger.warning(
                    "Rejected write to %s: %d bytes exceeds quota of %d",
                    key,
                    required,
                    self._quota,
                )
                raise StorageQuotaExceeded(key, required, self._quota)
        self._data[key] = text

    def keys(self) -> list[str]:
        """Keys written so far, in insertion order."""
        return list(self._data)


class FileBackend:
    """Directory-backed backend storing one UTF-8 file per key.

    Writes go to a temp file in the same directory and are moved into place
    with os.replace, so a reader sees either the old or the new value.
    """

    def __init__(self, directory: str | Path, quota_bytes: int | None = None) -> None:
        self._dir = Path(directory)
        self._dir.mkdir(parents=True, exist_ok=True)
        self._quota = quota_bytes

    @property
    def directory(self) -> Path:
        return self._dir

    def _path(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key in (".", ".."):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self._dir / key

    def read(self, key: str) -> str | None:
        """Return the file's text, or None if the key was never written.

        Raises:
            MalformedPersistedData: If the file is not valid UTF-8.
        """
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except UnicodeDecodeError as e:
            raise MalformedPersistedData(key, f"not valid UTF-8 ({e.reason})") from e

    def _used_bytes(self, exclude: str) -> int:
        total = 0
        for path in self._dir.iterdir():
            if path.name == exclude or path.name.startswith(".") or not path.is_file():
                continue
            total += len(path.name.encode("utf-8")) + path.stat().st_size
        return total

    def write(self, key: str, text: str) -> None:
        path = self._path(key)

        if self._quota:
            required = entry_size(key, text) + self._used_bytes(exclude=key)
            if required > self._quota:
                logger.warning(
                    "Rejected write to %s: %d bytes exceeds quota of %d",
                    key,
                    required,
                    self._quota,
                )
                raise StorageQuotaExceeded(key, required, self._quota)

        fd, tmp_name = tempfile.mkstemp(prefix=f".{key}.", dir=self._dir)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp_name, path)
        except OSError as e:
            Path(tmp_name).unlink(missing_ok=True)
            if e.errno == errno.ENOSPC:
                raise StorageQuotaExceeded(
                    key, entry_size(key, text), self._quota or 0
                ) from e
            raise StorageError(f"Failed to write '{key}': {e}") from e

        logger.debug("Wrote %d bytes to %s", len(text), path)
