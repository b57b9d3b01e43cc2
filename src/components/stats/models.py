"""
Stats component - snapshot value types.

A snapshot is derived data: recomputed from the current order log and
criteria, never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

ZERO = Decimal("0")
CENTS = Decimal("0.01")
UNKNOWN_BRANCH = "Unknown branch"


class BucketType(str, Enum):
    """Chart bucket granularity."""

    TOTAL = "total"
    DAY = "day"
    MONTH = "month"


@dataclass(frozen=True)
class SeriesPoint:
    """One chart bucket."""

    label: str
    sales: Decimal
    orders: int
    start: date | None = None


@dataclass(frozen=True)
class BranchTotal:
    """Revenue and order count for one branch reference."""

    branch_id: str
    name: str
    revenue: Decimal
    orders: int


@dataclass(frozen=True)
class StatsSnapshot:
    """Totals and chart series for a filtered order subset."""

    total_revenue: Decimal
    total_orders: int
    bucket_type: BucketType
    series: tuple[SeriesPoint, ...] = ()
    by_branch: tuple[BranchTotal, ...] = field(default_factory=tuple)

    @property
    def average_order_value(self) -> Decimal:
        if self.total_orders == 0:
            return ZERO
        return (self.total_revenue / self.total_orders).quantize(CENTS, rounding=ROUND_HALF_UP)
