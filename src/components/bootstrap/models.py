"""Bootstrap component data models.

Frozen dataclasses for inputs and outputs.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.entities import StaffMember


@dataclass(frozen=True)
class BootstrapInput:
    """Input parameters for bootstrap operation."""

    username: str
    name: str
    password: str | None
    enabled_if_no_staff: bool = True


@dataclass(frozen=True)
class BootstrapOutput:
    """Result of bootstrap operation."""

    member: StaffMember | None
    created: bool
    skipped_reason: str | None

    @classmethod
    def skipped(cls, reason: str) -> BootstrapOutput:
        return cls(member=None, created=False, skipped_reason=reason)
