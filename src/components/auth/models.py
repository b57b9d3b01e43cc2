from dataclasses import dataclass, field

from src.domain.entities import RoleType


class AuthenticationFailed(Exception):
    """Username/secret did not match a staff directory entry."""

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__("Invalid username or password")


@dataclass
class LoginInput:
    username: str
    password: str


@dataclass
class CreateStaffInput:
    name: str
    username: str
    password: str
    role: RoleType = "CASHIER"
    assigned_branch_ids: list[str] = field(default_factory=list)
    permissions: list[str] = field(default_factory=list)
