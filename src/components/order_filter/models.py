"""
Order filter component - criteria value types.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

ALL_BRANCHES = "ALL"


class WindowKind(str, Enum):
    """Reporting granularity applied to an order's creation time."""

    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"
    CUSTOM = "CUSTOM"


class FilterCriteria(BaseModel):
    """
    Branch + time window selection. Immutable; rebuild to change.

    start/end only apply to CUSTOM windows. They accept dates, datetimes or
    ISO-8601 strings; an empty string means "no bound".
    """

    model_config = ConfigDict(frozen=True)

    branch: str = ALL_BRANCHES
    window: WindowKind = WindowKind.DAILY
    start: datetime | date | None = None
    end: datetime | date | None = None

    @field_validator("branch", mode="before")
    @classmethod
    def _blank_branch_means_all(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return ALL_BRANCHES
        return value

    @field_validator("window", mode="before")
    @classmethod
    def _upper_window(cls, value: Any) -> Any:
        return value.strip().upper() if isinstance(value, str) else value

    @field_validator("start", "end", mode="before")
    @classmethod
    def _parse_bound(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_bound(value)
        return value

    @property
    def all_branches(self) -> bool:
        return self.branch == ALL_BRANCHES


def parse_bound(text: str) -> date | datetime | None:
    """
    Parse an ISO-8601 bound.

    "2024-06-01" -> date (interpreted as a local calendar day)
    "2024-06-01T10:30:00" / "...Z" -> datetime
    "" -> None
    """
    text = text.strip()
    if not text:
        return None
    if len(text) == 10:
        return date.fromisoformat(text)
    return datetime.fromisoformat(text)
