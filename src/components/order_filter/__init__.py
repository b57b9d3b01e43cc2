"""
Order filter component - select orders by branch and time window.
"""

from .component import WEEKLY_LOOKBACK, filter_orders, matches_branch, matches_window
from .models import ALL_BRANCHES, FilterCriteria, WindowKind, parse_bound

__all__ = [
    "filter_orders",
    "matches_branch",
    "matches_window",
    "FilterCriteria",
    "WindowKind",
    "ALL_BRANCHES",
    "WEEKLY_LOOKBACK",
    "parse_bound",
]
