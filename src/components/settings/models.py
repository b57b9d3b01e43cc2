"""
Settings component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from src.domain.entities import AppSettings


@dataclass(frozen=True)
class ValidationError:
    """Validation error with actionable message."""

    field: str
    code: str
    message: str


@dataclass(frozen=True)
class UpdateSettingsOutput:
    """Output from updating settings."""

    settings: AppSettings
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors


@dataclass
class ValidationRule:
    """Validation rule for one settings field."""

    field_name: str
    min_length: int | None = None
    max_length: int | None = None
    required: bool = False
    min_value: Decimal | None = None
    max_value: Decimal | None = None
