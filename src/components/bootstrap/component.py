"""Bootstrap component implementation.

Handles Day 0 seeding: creates the super-admin staff entry when the staff
directory is empty and an admin password is configured.
"""

from __future__ import annotations

import logging

from src.domain.entities import NAV_PERMISSIONS, StaffMember

from .models import BootstrapInput, BootstrapOutput
from .ports import AuthAdapterPort, StaffDirectoryPort

logger = logging.getLogger(__name__)


def run_bootstrap(
    bootstrap_input: BootstrapInput,
    staff: StaffDirectoryPort,
    auth_adapter: AuthAdapterPort,
    branch_ids: list[str] | None = None,
) -> BootstrapOutput:
    """Execute the bootstrap process.

    Args:
        bootstrap_input: Admin identity and password.
        staff: The staff-list slot.
        auth_adapter: Adapter for password hashing.
        branch_ids: Branches the admin is assigned to.

    Returns:
        BootstrapOutput with the result of the operation.
    """
    if not bootstrap_input.enabled_if_no_staff:
        return BootstrapOutput.skipped("Bootstrap is not enabled in config")

    if staff.value:
        return BootstrapOutput.skipped("Staff directory is not empty")

    if not bootstrap_input.password:
        logger.info("Staff directory is empty but no admin password is configured")
        return BootstrapOutput.skipped("Admin password not provided")

    admin = StaffMember(
        id="admin-1",
        name=bootstrap_input.name,
        role="SUPER_ADMIN",
        username=bootstrap_input.username,
        password_hash=auth_adapter.hash_password(bootstrap_input.password),
        assigned_branch_ids=list(branch_ids or []),
        permissions=list(NAV_PERMISSIONS),
    )
    staff.set([admin])
    logger.info("Created bootstrap admin %r", admin.username)
    return BootstrapOutput(member=admin, created=True, skipped_reason=None)
