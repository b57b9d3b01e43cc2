from typing import Protocol

from src.components.durable_store import SlotPort
from src.domain.entities import SessionUser, StaffMember


class AuthAdapterPort(Protocol):
    def verify_password(self, plain: str, hashed: str) -> bool: ...
    def hash_password(self, plain: str) -> str: ...
    def needs_rehash(self, hashed: str) -> bool: ...


StaffDirectoryPort = SlotPort[list[StaffMember]]
CurrentUserPort = SlotPort[SessionUser | None]
