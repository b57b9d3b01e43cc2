from typing import Any

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError


class Argon2AuthAdapter:
    """Password hashing for the staff directory (argon2id)."""

    def __init__(self, **hasher_options: Any) -> None:
        self.ph = PasswordHasher(**hasher_options)

    def hash_password(self, password: str) -> str:
        return str(self.ph.hash(password))

    def verify_password(self, plain: str, hashed: str) -> bool:
        try:
            self.ph.verify(hashed, plain)
            return True
        except (VerificationError, InvalidHashError):
            return False

    def needs_rehash(self, hashed: str) -> bool:
        return bool(self.ph.check_needs_rehash(hashed))
