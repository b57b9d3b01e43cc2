"""
Order filter component - branch/time-window predicates over the order log.

The evaluator is a pure function of (orders, criteria, now): the reference
instant is always passed in, never read from the wall clock here.

Window semantics (relative to now, in now's timezone):
- DAILY: same calendar day
- WEEKLY: created at or after now - 7 days (rolling, not calendar aligned)
- MONTHLY: same calendar month and year
- YEARLY: same calendar year
- CUSTOM: created_at >= start (if any) and <= 23:59:59.999 of end's day (if any)
"""

from __future__ import annotations

from collections.abc import Collection, Iterable
from datetime import datetime, timedelta

from src.domain.calendar import end_of_day, start_of, to_local
from src.domain.entities import Order

from .models import ALL_BRANCHES, FilterCriteria, WindowKind

WEEKLY_LOOKBACK = timedelta(days=7)


def matches_branch(
    order: Order,
    branch: str,
    known_branch_ids: Collection[str] | None = None,
) -> bool:
    """
    Branch predicate.

    With a specific selector, the order must reference it and (when the
    branch list is known) the reference must still resolve.
    """
    if branch == ALL_BRANCHES:
        return True
    if order.branch_id != branch:
        return False
    return known_branch_ids is None or order.branch_id in known_branch_ids


def matches_window(created_at: datetime, criteria: FilterCriteria, now: datetime) -> bool:
    """Time-window predicate for one creation instant."""
    tz = now.tzinfo
    moment = to_local(created_at, tz)
    window = criteria.window

    if window == WindowKind.DAILY:
        return moment.date() == now.date()
    if window == WindowKind.WEEKLY:
        return moment >= now - WEEKLY_LOOKBACK
    if window == WindowKind.MONTHLY:
        return (moment.year, moment.month) == (now.year, now.month)
    if window == WindowKind.YEARLY:
        return moment.year == now.year

    # CUSTOM
    if criteria.start is not None and moment < start_of(criteria.start, tz):
        return False
    if criteria.end is not None and moment > end_of_day(criteria.end, tz):
        return False
    return True


def filter_orders(
    orders: Iterable[Order],
    criteria: FilterCriteria,
    now: datetime,
    *,
    known_branch_ids: Collection[str] | None = None,
) -> list[Order]:
    """
    Return the orders satisfying every predicate, preserving log order.

    Args:
        orders: Full order log
        criteria: Branch and window selection
        now: Reference instant for DAILY/WEEKLY/MONTHLY/YEARLY
        known_branch_ids: Ids of branches that still exist, if known

    Returns:
        Matching orders in their original order
    """
    return [
        order
        for order in orders
        if matches_branch(order, criteria.branch, known_branch_ids)
        and matches_window(order.created_at, criteria, now)
    ]
