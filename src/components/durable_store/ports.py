"""
Durable store component port definitions.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

from src.ports.storage import KeyValueBackendPort, StorageWriteFailed

__all__ = ["KeyValueBackendPort", "SlotPort", "WarningSinkPort"]

T_co = TypeVar("T_co", covariant=True)


class WarningSinkPort(Protocol):
    """Receives non-blocking durability warnings."""

    def report(self, failure: StorageWriteFailed) -> None:
        """Surface a failed write without interrupting the caller."""
        ...


class SlotPort(Protocol[T_co]):
    """Read/replace access to one persisted record."""

    @property
    def value(self) -> T_co: ...

    def set(self, value: Any) -> Any: ...
