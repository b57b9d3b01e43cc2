"""
Bootstrap component - Day 0 staff directory seeding.
"""

from .component import run_bootstrap
from .models import BootstrapInput, BootstrapOutput
from .ports import AuthAdapterPort, StaffDirectoryPort

__all__ = [
    "run_bootstrap",
    "BootstrapInput",
    "BootstrapOutput",
    "AuthAdapterPort",
    "StaffDirectoryPort",
]
