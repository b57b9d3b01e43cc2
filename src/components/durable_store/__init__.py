"""
Durable store component - persistent application state.
"""

from .component import DurableStore, LoggingWarningSink, PersistedSlot
from .models import (
    StorageCorrupt,
    StorageError,
    StorageQuotaExceeded,
    StorageWriteFailed,
)
from .ports import KeyValueBackendPort, SlotPort, WarningSinkPort

__all__ = [
    # Store
    "DurableStore",
    "PersistedSlot",
    "LoggingWarningSink",
    # Errors
    "StorageCorrupt",
    "StorageError",
    "StorageQuotaExceeded",
    "StorageWriteFailed",
    # Ports
    "KeyValueBackendPort",
    "SlotPort",
    "WarningSinkPort",
]
