"""Typed collection persisted as one JSON array under one key."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Generic, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from .backend import KeyValueBackend
from .errors import MalformedPersistedData, StorageQuotaExceeded

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class Collection(Generic[T]):
    """Full read-modify-write access to a list of models stored under `key`.

    Every mutation reads the whole list, changes it in memory and writes the
    whole list back. Mutations through the same instance are serialized by a
    lock; other instances or processes sharing the backend are not, and the
    last writer wins.
    """

    def __init__(self, backend: KeyValueBackend, key: str, model: type[T]) -> None:
        self._backend = backend
        self._key = key
        self._adapter: TypeAdapter[list[T]] = TypeAdapter(list[model])
        self._lock = threading.RLock()

    @property
    def key(self) -> str:
        return self._key

    def decode(self, text: str) -> list[T]:
        """Parse stored text.

        Raises:
            MalformedPersistedData: If text is not a JSON array of valid items.
        """
        try:
            return self._adapter.validate_json(text)
        except ValidationError as e:
            raise MalformedPersistedData(self._key, f"{e.error_count()} error(s)") from e

    def encode(self, items: list[T]) -> str:
        return self._adapter.dump_json(items, by_alias=True, exclude_none=True).decode(
            "utf-8"
        )

    def load(self) -> list[T]:
        """Return the stored items; an absent or malformed key reads as empty."""
        try:
            text = self._backend.read(self._key)
            if text is None:
                return []
            return self.decode(text)
        except MalformedPersistedData as e:
            logger.warning("Ignoring stored data: %s", e)
            return []

    def save(self, items: list[T]) -> None:
        """Write the whole list back.

        Raises:
            StorageQuotaExceeded: If the backend has no room. The previous
                value is left in place.
            StorageError: For any other backend failure.
        """
        self._write(self.encode(items), len(items))

    def _write(self, text: str, count: int) -> None:
        try:
            self._backend.write(self._key, text)
        except StorageQuotaExceeded:
            logger.warning("Could not save %d item(s) to %s: quota exceeded", count, self._key)
            raise
        logger.debug("Saved %d item(s) to %s", count, self._key)

    @contextmanager
    def editing(self) -> Iterator[list[T]]:
        """Yield the current list for in-place changes, then persist it.

        Items may be replaced, added, removed or mutated in place. Nothing is
        written if the body raises or the encoded list is unchanged.
        """
        with self._lock:
            items = self.load()
            before = self.encode(items)
            yield items
            after = self.encode(items)
            if after != before:
                self._write(after, len(items))
