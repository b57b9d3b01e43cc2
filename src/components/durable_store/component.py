"""
DurableStore - in-memory state mirrored to a key-value backend.

Key behaviors:
- load() falls back to the caller's default when a key is absent or its
  payload is unparseable; the default is not written back
- subscribe() persists synchronously before returning; failures are
  reported to a warning sink and never raised
- Pending failures are kept (newest max_warnings) until clear_warnings()
  hands them to the caller that surfaces them
- PersistedSlot keeps the in-memory value authoritative even when
  durability is lost

Invariants:
- In-memory and durable values are reconciled on every mutation
- Each key is owned by at most one slot
"""

from __future__ import annotations

import copy
import json
import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from src.ports.storage import StorageCorrupt, StorageError, StorageWriteFailed

from .ports import KeyValueBackendPort, WarningSinkPort

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAX_PENDING_WARNINGS = 50


class LoggingWarningSink:
    """Default sink: log the failure and keep going."""

    def report(self, failure: StorageWriteFailed) -> None:
        logger.warning("Durability lost for %r: %s", failure.key, failure.cause)


class DurableStore:
    """
    Generic key -> JSON value persistence over a KeyValueBackendPort.

    Values are plain JSON-compatible data unless a pydantic TypeAdapter is
    supplied, in which case payloads are validated on read and dumped with
    camelCase aliases on write.
    """

    def __init__(
        self,
        backend: KeyValueBackendPort,
        warning_sink: WarningSinkPort | None = None,
        *,
        max_warnings: int = MAX_PENDING_WARNINGS,
    ) -> None:
        self._backend = backend
        self._sink = warning_sink or LoggingWarningSink()
        self._max_warnings = max_warnings
        self._slots: dict[str, PersistedSlot[Any]] = {}
        self.warnings: list[StorageWriteFailed] = []

    @property
    def backend(self) -> KeyValueBackendPort:
        return self._backend

    def load(self, key: str, default: T, *, adapter: TypeAdapter[T] | None = None) -> T:
        """
        Read the durable value for key.

        Returns default (without writing it back) when the key is absent,
        unreadable, or holds a payload that does not parse/validate.
        """
        try:
            raw = self._backend.get_item(key)
        except StorageError as e:
            logger.warning("Reading %r failed, using default: %s", key, e)
            return default

        if raw is None:
            return default

        try:
            if adapter is None:
                return json.loads(raw)  # type: ignore[no-any-return]
            return adapter.validate_json(raw)
        except (ValidationError, ValueError) as e:
            logger.warning("%s; using default", StorageCorrupt(key, _short_reason(e)))
            return default

    def subscribe(self, key: str, value: Any, *, adapter: TypeAdapter[Any] | None = None) -> bool:
        """
        Serialize value and write it durably before returning.

        Returns False (after reporting) if serialization or the write failed.
        """
        try:
            if adapter is None:
                payload = json.dumps(value)
            else:
                payload = adapter.dump_json(value, by_alias=True).decode("utf-8")
            self._backend.set_item(key, payload)
        except (TypeError, ValueError, PydanticSerializationError, StorageError, OSError) as e:
            failure = StorageWriteFailed(key, e)
            self.warnings.append(failure)
            # Oldest entries go first once the cap is hit
            del self.warnings[: -self._max_warnings]
            self._sink.report(failure)
            return False
        return True

    def slot(self, key: str, default: T, *, model: Any = None) -> PersistedSlot[T]:
        """
        Open the persisted slot for key.

        Args:
            key: Durable key (must not be owned by another slot)
            default: Value used when nothing valid is stored
            model: Optional type (e.g. list[Order]) validated via pydantic

        Raises:
            ValueError: If key is already owned by another slot
        """
        if key in self._slots:
            raise ValueError(f"Storage key already in use: {key!r}")
        adapter: TypeAdapter[T] | None = TypeAdapter(model) if model is not None else None
        slot = PersistedSlot(self, key, default, adapter)
        self._slots[key] = slot
        return slot

    def clear_warnings(self) -> list[StorageWriteFailed]:
        """Hand over the pending write failures and start a fresh list."""
        pending, self.warnings = self.warnings, []
        return pending

    @property
    def durable(self) -> bool:
        """True when every slot's last write reached the backend."""
        return all(slot.durable for slot in self._slots.values())


class PersistedSlot(Generic[T]):
    """A named record whose every change is written through to the store."""

    def __init__(
        self,
        store: DurableStore,
        key: str,
        default: T,
        adapter: TypeAdapter[T] | None = None,
    ) -> None:
        self._store = store
        self._adapter = adapter
        self.key = key
        self._value: T = store.load(key, copy.deepcopy(default), adapter=adapter)
        self.durable = True

    @property
    def value(self) -> T:
        return self._value

    def set(self, value: T) -> T:
        """Replace the value, then persist it."""
        self._value = value
        self.durable = self._store.subscribe(self.key, value, adapter=self._adapter)
        return value

    def update(self, fn: Callable[[T], T]) -> T:
        """Read-modify-write-then-persist in one synchronous step."""
        return self.set(fn(self._value))


def _short_reason(exc: Exception) -> str:
    if isinstance(exc, ValidationError):
        return f"{exc.error_count()} validation error(s)"
    return str(exc)
