"""
Durable key-value backend port.

Mirrors a browser-style local storage area: string keys, string payloads,
one shared namespace per application.

Invariants:
- set_item either stores the full payload or raises StorageError
- get_item returns None for keys that were never written
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol


class KeyValueBackendPort(Protocol):
    """Process-external storage behind the durable store."""

    def get_item(self, key: str) -> str | None:
        """Return the stored text for key, or None if absent."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """
        Store text under key, replacing any previous value.

        Raises:
            StorageError: If the backend cannot persist the value
        """
        ...

    def remove_item(self, key: str) -> bool:
        """Remove key. Returns True if it existed."""
        ...

    def keys(self) -> Iterator[str]:
        """Iterate over stored keys."""
        ...


class StorageError(Exception):
    """Base class for storage errors."""


class StorageQuotaExceeded(StorageError):
    """Raised when a write would exceed the backend's capacity."""

    def __init__(self, key: str, size: int, quota: int) -> None:
        self.key = key
        self.size = size
        self.quota = quota
        super().__init__(f"Quota exceeded writing {key!r}: {size} bytes > {quota} bytes")


class StorageCorrupt(StorageError):
    """A stored payload exists but cannot be parsed or validated."""

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"Corrupt payload under {key!r}: {reason}")


class StorageWriteFailed(StorageError):
    """Writing a value back to the durable backend failed."""

    def __init__(self, key: str, cause: BaseException) -> None:
        self.key = key
        self.cause = cause
        super().__init__(f"Could not persist {key!r}: {cause}")
