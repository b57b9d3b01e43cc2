"""
StatsAggregator - totals and time buckets for a filtered order subset.

Key behaviors:
- Revenue is accumulated as Decimal so repeated additions never drift
- Series granularity follows the active window (see BUCKET_BY_WINDOW)
- Orders pointing at a branch that no longer exists are reported under
  UNKNOWN_BRANCH rather than failing
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date, tzinfo
from decimal import Decimal

from src.components.order_filter import WindowKind
from src.domain.calendar import to_local
from src.domain.entities import Branch, Order

from .models import (
    UNKNOWN_BRANCH,
    ZERO,
    BranchTotal,
    BucketType,
    SeriesPoint,
    StatsSnapshot,
)

TODAY_LABEL = "Today"

BUCKET_BY_WINDOW: dict[WindowKind, BucketType] = {
    WindowKind.DAILY: BucketType.TOTAL,
    WindowKind.WEEKLY: BucketType.DAY,
    WindowKind.MONTHLY: BucketType.DAY,
    WindowKind.CUSTOM: BucketType.DAY,
    WindowKind.YEARLY: BucketType.MONTH,
}


def total_revenue(orders: Iterable[Order]) -> Decimal:
    return sum((Decimal(order.total) for order in orders), ZERO)


def calculate_bucket_start(order: Order, bucket_type: BucketType, tz: tzinfo | None) -> date:
    """Calendar day or month start that an order falls into."""
    day = to_local(order.created_at, tz).date()
    if bucket_type == BucketType.MONTH:
        return day.replace(day=1)
    return day


def _bucket_label(start: date, bucket_type: BucketType) -> str:
    if bucket_type == BucketType.MONTH:
        return start.strftime("%Y-%m")
    return start.isoformat()


def build_series(
    orders: Sequence[Order],
    bucket_type: BucketType,
    tz: tzinfo | None = None,
) -> tuple[SeriesPoint, ...]:
    """Group orders into chart buckets, sorted by bucket start."""
    if bucket_type == BucketType.TOTAL:
        return (SeriesPoint(label=TODAY_LABEL, sales=total_revenue(orders), orders=len(orders)),)

    sales: dict[date, Decimal] = {}
    counts: dict[date, int] = {}
    for order in orders:
        start = calculate_bucket_start(order, bucket_type, tz)
        sales[start] = sales.get(start, ZERO) + Decimal(order.total)
        counts[start] = counts.get(start, 0) + 1

    return tuple(
        SeriesPoint(
            label=_bucket_label(start, bucket_type),
            sales=sales[start],
            orders=counts[start],
            start=start,
        )
        for start in sorted(sales)
    )


def branch_breakdown(
    orders: Iterable[Order],
    branches: Iterable[Branch] | None = None,
) -> tuple[BranchTotal, ...]:
    """Per-branch totals, in first-seen order."""
    names = {b.id: b.name for b in branches} if branches is not None else None
    revenue: dict[str, Decimal] = {}
    counts: dict[str, int] = {}
    for order in orders:
        revenue[order.branch_id] = revenue.get(order.branch_id, ZERO) + Decimal(order.total)
        counts[order.branch_id] = counts.get(order.branch_id, 0) + 1

    return tuple(
        BranchTotal(
            branch_id=branch_id,
            name=branch_id if names is None else names.get(branch_id, UNKNOWN_BRANCH),
            revenue=revenue[branch_id],
            orders=counts[branch_id],
        )
        for branch_id in revenue
    )


def aggregate(
    orders: Sequence[Order],
    window: WindowKind = WindowKind.DAILY,
    *,
    branches: Iterable[Branch] | None = None,
    tz: tzinfo | None = None,
) -> StatsSnapshot:
    """
    Build the statistics snapshot for an already-filtered order subset.

    Args:
        orders: Output of filter_orders
        window: Active window kind (selects chart granularity)
        branches: Current branch list, used to name the breakdown rows
        tz: Timezone for calendar bucketing (naive timestamps are kept as-is)

    Returns:
        StatsSnapshot (pure function of its inputs)
    """
    bucket_type = BUCKET_BY_WINDOW[WindowKind(window)]
    return StatsSnapshot(
        total_revenue=total_revenue(orders),
        total_orders=len(orders),
        bucket_type=bucket_type,
        series=build_series(orders, bucket_type, tz),
        by_branch=branch_breakdown(orders, branches),
    )
