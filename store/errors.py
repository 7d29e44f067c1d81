"""Exceptions raised by the store core.

Lookups that find nothing return None and duplicate registrations return
False, so neither has an exception type here.
"""

from __future__ import annotations


class StoreError(Exception):
    """Base class for all store failures."""


class ValidationFailed(StoreError):
    """Creation input was rejected before anything was persisted."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class StorageError(StoreError):
    """The backing medium failed to write for a reason other than quota."""


class StorageQuotaExceeded(StorageError):
    """The backing medium has no room for the write.

    Usually caused by embedded images. Nothing was written.
    """

    def __init__(self, key: str, required: int, quota: int) -> None:
        super().__init__(
            f"Not enough storage to save '{key}' ({required} of {quota} bytes). "
            "Try using fewer or smaller images, or external image URLs."
        )
        self.key = key
        self.required = required
        self.quota = quota


class MalformedPersistedData(StoreError):
    """Text stored under a key is not a valid serialized collection."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"Malformed data under '{key}': {reason}")
        self.key = key
        self.reason = reason
