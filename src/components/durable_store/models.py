"""
Durable store component - error types.

StorageCorrupt is recovered by falling back to defaults; StorageWriteFailed
is reported as a warning while the in-memory value stays authoritative.
"""

from src.ports.storage import (
    StorageCorrupt,
    StorageError,
    StorageQuotaExceeded,
    StorageWriteFailed,
)

__all__ = [
    "StorageCorrupt",
    "StorageError",
    "StorageQuotaExceeded",
    "StorageWriteFailed",
]
