"""
Local key-value storage adapters.

Implements KeyValueBackendPort for the durable store:
- JsonFileBackend: one JSON document per key under a namespace directory
- InMemoryBackend: process-local dict, optionally quota-limited (tests, demos)

Invariants:
- A key maps to exactly one file (unsafe keys are rejected, never rewritten);
  writes replace it atomically
- Keys share one namespace; callers keep them disjoint
"""

from __future__ import annotations

import os
import re
import tempfile
from collections.abc import Iterator
from pathlib import Path

from src.ports.storage import StorageError, StorageQuotaExceeded

_SAFE_KEY = re.compile(r"[A-Za-z0-9_-][A-Za-z0-9._-]*")


class JsonFileBackend:
    """
    Filesystem implementation of KeyValueBackendPort.

    Directory structure: {base_path}/{namespace}/{key}.json
    """

    def __init__(
        self,
        base_path: str | Path,
        *,
        namespace: str = "restro-pos",
        create_dirs: bool = True,
    ) -> None:
        """
        Initialize file backend.

        Args:
            base_path: Root data directory
            namespace: Sub-directory shared by every slot of one application
            create_dirs: Whether to create directories if they don't exist
        """
        self.root = Path(base_path) / namespace

        if create_dirs:
            self.root.mkdir(parents=True, exist_ok=True)

    def _key_to_path(self, key: str) -> Path:
        """
        Convert storage key to a file path.

        Raises:
            StorageError: If the key is not a plain file-name-safe token
        """
        if not _SAFE_KEY.fullmatch(key) or ".." in key:
            raise StorageError(f"Invalid storage key: {key!r}")
        return self.root / f"{key}.json"

    def get_item(self, key: str) -> str | None:
        path = self._key_to_path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Could not read {key!r}: {e}") from e

    def set_item(self, key: str, value: str) -> None:
        path = self._key_to_path(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.stem}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(value)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(f"Could not write {key!r}: {e}") from e

    def remove_item(self, key: str) -> bool:
        path = self._key_to_path(key)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise StorageError(f"Could not remove {key!r}: {e}") from e
        return True

    def keys(self) -> Iterator[str]:
        if not self.root.exists():
            return iter(())
        return (p.stem for p in sorted(self.root.glob("*.json")))


class InMemoryBackend:
    """In-memory backend for testing/dev, with an optional byte quota."""

    def __init__(self, quota_bytes: int | None = None) -> None:
        self._items: dict[str, str] = {}
        self.quota_bytes = quota_bytes
        self.write_count = 0

    def _size_with(self, key: str, value: str) -> int:
        others = sum(len(k) + len(v) for k, v in self._items.items() if k != key)
        return others + len(key) + len(value)

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self.quota_bytes is not None:
            size = self._size_with(key, value)
            if size > self.quota_bytes:
                raise StorageQuotaExceeded(key, size, self.quota_bytes)
        self._items[key] = value
        self.write_count += 1

    def remove_item(self, key: str) -> bool:
        return self._items.pop(key, None) is not None

    def keys(self) -> Iterator[str]:
        return iter(list(self._items))


def create_local_storage(
    base_path: str | Path | None = None,
    *,
    env_var: str = "POS_DATA_DIR",
    default_path: str = "./data",
    namespace: str = "restro-pos",
) -> JsonFileBackend:
    """
    Factory function to create JsonFileBackend from config.

    Args:
        base_path: Explicit base path (overrides env var)
        env_var: Environment variable name for the data directory
        default_path: Default path if not configured
        namespace: Shared key namespace

    Returns:
        Configured JsonFileBackend instance
    """
    if base_path is None:
        base_path = os.environ.get(env_var, default_path)

    return JsonFileBackend(base_path, namespace=namespace)
