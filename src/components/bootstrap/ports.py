"""Bootstrap component port definitions."""

from __future__ import annotations

from typing import Protocol

from src.components.durable_store import SlotPort
from src.domain.entities import StaffMember

StaffDirectoryPort = SlotPort[list[StaffMember]]


class AuthAdapterPort(Protocol):
    """Authentication operations adapter."""

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password for storage."""
        ...
