"""
Settings component - application settings management.
"""

from .component import DEFAULT_RULES, SettingsService, validate_settings
from .models import UpdateSettingsOutput, ValidationError, ValidationRule
from .ports import SettingsSlotPort

__all__ = [
    # Service
    "SettingsService",
    "validate_settings",
    # Models
    "UpdateSettingsOutput",
    "ValidationError",
    "ValidationRule",
    # Ports
    "SettingsSlotPort",
    # Constants
    "DEFAULT_RULES",
]
