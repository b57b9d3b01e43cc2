"""
Auth component - credential check against the staff directory.

Secrets are stored as argon2 hashes and checked with the hasher's
verification primitive. Unknown usernames still pay for one verification
so response time does not reveal which usernames exist.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from src.domain.entities import SessionUser, StaffMember

from .models import AuthenticationFailed, CreateStaffInput, LoginInput
from .ports import AuthAdapterPort, CurrentUserPort, StaffDirectoryPort

logger = logging.getLogger(__name__)

_TIMING_DUMMY_SECRET = "restro-pos-timing-dummy"


def find_staff(directory: Sequence[StaffMember], username: str) -> StaffMember | None:
    for member in directory:
        if member.username == username:
            return member
    return None


def authenticate(
    inp: LoginInput,
    directory: Sequence[StaffMember],
    auth_adapter: AuthAdapterPort,
    dummy_hash: str | None = None,
) -> SessionUser:
    """
    Match credentials against the directory.

    Raises:
        AuthenticationFailed: On unknown username or wrong secret
    """
    member = find_staff(directory, inp.username)
    if member is None:
        if dummy_hash is not None:
            auth_adapter.verify_password(inp.password, dummy_hash)
        raise AuthenticationFailed(inp.username)

    if not auth_adapter.verify_password(inp.password, member.password_hash):
        raise AuthenticationFailed(inp.username)

    return member.to_session_user()


def run_create_staff(
    inp: CreateStaffInput,
    directory: Sequence[StaffMember],
    auth_adapter: AuthAdapterPort,
) -> StaffMember:
    if not inp.username.strip():
        raise ValueError("Username is required")
    if not inp.password:
        raise ValueError("Password is required")
    if find_staff(directory, inp.username) is not None:
        raise ValueError("Username already in use")

    return StaffMember(
        name=inp.name,
        role=inp.role,
        username=inp.username,
        password_hash=auth_adapter.hash_password(inp.password),
        assigned_branch_ids=list(inp.assigned_branch_ids),
        permissions=list(inp.permissions),
    )


class AuthService:
    """Login/logout over the staff-list and current-user slots."""

    def __init__(
        self,
        staff: StaffDirectoryPort,
        current_user: CurrentUserPort,
        auth_adapter: AuthAdapterPort,
    ) -> None:
        self.staff = staff
        self.current_user = current_user
        self.auth_adapter = auth_adapter
        self._dummy_hash: str | None = None

    def _timing_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = self.auth_adapter.hash_password(_TIMING_DUMMY_SECRET)
        return self._dummy_hash

    def login(self, username: str, password: str) -> SessionUser:
        try:
            user = authenticate(
                LoginInput(username=username, password=password),
                self.staff.value,
                self.auth_adapter,
                dummy_hash=self._timing_hash(),
            )
        except AuthenticationFailed:
            logger.info("Login rejected for %r", username)
            raise
        self._upgrade_hash(username, password)
        self.current_user.set(user)
        logger.info("Login accepted for %r", username)
        return user

    def _upgrade_hash(self, username: str, password: str) -> None:
        """Re-hash a verified secret stored under older hasher parameters."""
        member = find_staff(self.staff.value, username)
        if member is None or not self.auth_adapter.needs_rehash(member.password_hash):
            return
        upgraded = member.model_copy(
            update={"password_hash": self.auth_adapter.hash_password(password)}
        )
        self.staff.set([upgraded if m.id == member.id else m for m in self.staff.value])
        logger.info("Upgraded password hash for %r", username)

    def logout(self) -> None:
        self.current_user.set(None)

    def current(self) -> SessionUser | None:
        return self.current_user.value

    def create_staff(self, inp: CreateStaffInput) -> StaffMember:
        member = run_create_staff(inp, self.staff.value, self.auth_adapter)
        self.staff.set([*self.staff.value, member])
        return member
