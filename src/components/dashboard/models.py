from __future__ import annotations

from dataclasses import dataclass

from src.components.order_filter import FilterCriteria
from src.components.stats import StatsSnapshot
from src.domain.entities import Order


@dataclass(frozen=True)
class DashboardView:
    """Everything the dashboard shows for one branch/window selection."""

    criteria: FilterCriteria
    orders: list[Order]
    snapshot: StatsSnapshot
    currency_symbol: str
