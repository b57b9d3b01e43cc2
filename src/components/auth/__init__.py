"""
Auth component - staff sign-in and directory maintenance.
"""

from .component import AuthService, authenticate, find_staff, run_create_staff
from .models import AuthenticationFailed, CreateStaffInput, LoginInput
from .ports import AuthAdapterPort, CurrentUserPort, StaffDirectoryPort

__all__ = [
    # Entry points
    "authenticate",
    "run_create_staff",
    "find_staff",
    "AuthService",
    # Models
    "AuthenticationFailed",
    "LoginInput",
    "CreateStaffInput",
    # Ports
    "AuthAdapterPort",
    "StaffDirectoryPort",
    "CurrentUserPort",
]
