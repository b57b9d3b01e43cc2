"""
Settings component - application settings management.

Provides settings read/write with validation and fallback defaults.

Key behaviors:
- get() always returns settings (the slot already fell back to defaults)
- update() validates before persisting; nothing is written on error
- reset() writes the defaults back
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from src.domain.entities import AppSettings, get_default_settings

from .models import UpdateSettingsOutput, ValidationError, ValidationRule
from .ports import SettingsSlotPort

# --- Default Validation Rules ---

DEFAULT_RULES = [
    ValidationRule(field_name="app_name", min_length=1, max_length=60, required=True),
    ValidationRule(field_name="currency_symbol", min_length=1, max_length=4, required=True),
    ValidationRule(field_name="tax_rate", min_value=0, max_value=100),
    ValidationRule(field_name="service_charge", min_value=0, max_value=100),
    ValidationRule(field_name="receipt_footer", max_length=200),
]


# --- Validation Functions ---


def validate_settings(
    settings: AppSettings,
    rules: list[ValidationRule] | None = None,
) -> list[ValidationError]:
    """Validate settings against rules."""
    rules = rules or DEFAULT_RULES
    errors: list[ValidationError] = []

    for rule in rules:
        value = getattr(settings, rule.field_name, None)

        # Required check
        if rule.required and (value is None or value == ""):
            errors.append(
                ValidationError(
                    field=rule.field_name,
                    code="required",
                    message=f"Field '{rule.field_name}' is required",
                )
            )
            continue

        # Skip further validation if empty and not required
        if value is None or value == "":
            continue

        # Length checks (for strings)
        if isinstance(value, str):
            if rule.min_length is not None and len(value) < rule.min_length:
                errors.append(
                    ValidationError(
                        field=rule.field_name,
                        code="min_length",
                        message=(
                            f"Field '{rule.field_name}' must be at least "
                            f"{rule.min_length} characters"
                        ),
                    )
                )

            if rule.max_length is not None and len(value) > rule.max_length:
                errors.append(
                    ValidationError(
                        field=rule.field_name,
                        code="max_length",
                        message=(
                            f"Field '{rule.field_name}' must not exceed "
                            f"{rule.max_length} characters"
                        ),
                    )
                )

        # Range checks (for numbers)
        elif rule.min_value is not None and value < rule.min_value:
            errors.append(
                ValidationError(
                    field=rule.field_name,
                    code="min_value",
                    message=f"Field '{rule.field_name}' must be at least {rule.min_value}",
                )
            )
        elif rule.max_value is not None and value > rule.max_value:
            errors.append(
                ValidationError(
                    field=rule.field_name,
                    code="max_value",
                    message=f"Field '{rule.field_name}' must not exceed {rule.max_value}",
                )
            )

    return errors


def _parse_pydantic_errors(exc: PydanticValidationError) -> list[ValidationError]:
    """Map pydantic errors to field-specific validation errors."""
    errors: list[ValidationError] = []
    for error in exc.errors():
        loc = error.get("loc", ())
        field = ".".join(str(part) for part in loc) if loc else "_schema"
        errors.append(
            ValidationError(
                field=field,
                code="invalid_value",
                message=f"Field '{field}': {error.get('msg', 'Invalid value')}",
            )
        )
    return errors


# --- Settings Service ---


class SettingsService:
    """Application settings over the app-settings slot."""

    def __init__(
        self,
        slot: SettingsSlotPort,
        rules: list[ValidationRule] | None = None,
    ) -> None:
        self._slot = slot
        self._rules = rules or DEFAULT_RULES

    def get(self) -> AppSettings:
        return self._slot.value

    def update(self, updates: dict[str, Any]) -> UpdateSettingsOutput:
        """
        Apply a partial update.

        If the returned output carries errors, nothing was saved.
        """
        current = self.get()
        merged = current.model_dump()
        merged.update({k: v for k, v in updates.items() if v is not None})

        try:
            new_settings = AppSettings.model_validate(merged)
        except PydanticValidationError as e:
            return UpdateSettingsOutput(settings=current, errors=_parse_pydantic_errors(e))

        errors = validate_settings(new_settings, self._rules)
        if errors:
            return UpdateSettingsOutput(settings=current, errors=errors)

        self._slot.set(new_settings)
        return UpdateSettingsOutput(settings=new_settings)

    def reset(self) -> AppSettings:
        """Reset settings to defaults and persist them."""
        defaults = get_default_settings()
        self._slot.set(defaults)
        return defaults
