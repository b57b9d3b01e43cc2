"""
Tests for the dashboard controller (filter + aggregate + advisory wiring).
"""

from __future__ import annotations

import asyncio
from datetime import timedelta
from decimal import Decimal

import pytest

from src.components.advisory import UNAVAILABLE_MESSAGE, AdvisoryUnavailable
from src.components.order_filter import FilterCriteria
from src.components.orders import RecordOrderInput
from src.components.stats import UNKNOWN_BRANCH


def record(ctx, clock, branch_id: str, total: str, days_ago: int = 0):
    current = clock.now()
    clock.set(current - timedelta(days=days_ago))
    order = ctx.order_service.record(RecordOrderInput(branch_id=branch_id, total=Decimal(total)))
    clock.set(current)
    return order


@pytest.fixture
def seeded(test_ctx, clock):
    record(test_ctx, clock, "b1", "100")
    record(test_ctx, clock, "b2", "50", days_ago=8)
    return test_ctx


def test_all_branches_daily(seeded):
    view = seeded.dashboard.view(FilterCriteria(branch="ALL", window="DAILY"))

    assert len(view.orders) == 1
    assert view.snapshot.total_revenue == Decimal("100")
    assert view.snapshot.total_orders == 1
    assert view.currency_symbol == "$"


def test_single_branch_weekly(seeded):
    view = seeded.dashboard.view(FilterCriteria(branch="b1", window="WEEKLY"))
    assert view.snapshot.total_revenue == Decimal("100")
    assert view.snapshot.total_orders == 1


def test_monthly_includes_older_order(seeded):
    view = seeded.dashboard.view(FilterCriteria(window="MONTHLY"))
    assert view.snapshot.total_orders == 2
    assert [p.label for p in view.snapshot.series] == ["2024-06-07", "2024-06-15"]


def test_deleted_branch(seeded):
    seeded.branch_service.delete("b2")

    assert seeded.dashboard.filtered_orders(FilterCriteria(branch="b2", window="YEARLY")) == []

    view = seeded.dashboard.view(FilterCriteria(window="YEARLY"))
    names = {row.branch_id: row.name for row in view.snapshot.by_branch}
    assert names == {"b1": "Main Branch", "b2": UNKNOWN_BRANCH}


def test_currency_symbol_follows_settings(seeded):
    seeded.settings_service.update({"currency_symbol": "₹"})
    assert seeded.dashboard.view(FilterCriteria()).currency_symbol == "₹"


def test_generate_insight(seeded, advisory):
    panel = seeded.dashboard.open_insight_panel()

    result = asyncio.run(seeded.dashboard.generate_insight(panel, FilterCriteria()))

    assert result.ok
    assert panel.insight == advisory.text
    assert "$100" in advisory.prompts[0]
    assert "Main Branch, City Center Cafe" in advisory.prompts[0]


def test_generate_insight_fallback(seeded, advisory):
    advisory.error = AdvisoryUnavailable("no key")
    panel = seeded.dashboard.open_insight_panel()

    result = asyncio.run(seeded.dashboard.generate_insight(panel, FilterCriteria()))

    assert result.ok is False
    assert result.text == UNAVAILABLE_MESSAGE
