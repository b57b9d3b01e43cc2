"""
Dashboard component - wires state, filtering, aggregation and advisory.

Owns no rules of its own: the reference instant comes from the clock, the
data from the persisted slots, and the numbers from filter_orders/aggregate.
"""

from __future__ import annotations

from src.components.advisory import (
    SYSTEM_INSTRUCTION,
    AdvisoryPort,
    InsightPanel,
    InsightResult,
)
from src.components.durable_store import SlotPort
from src.components.order_filter import FilterCriteria, filter_orders
from src.components.stats import aggregate
from src.domain.entities import AppSettings, Branch, Order
from src.ports.clock import ClockPort

from .models import DashboardView


class DashboardController:
    def __init__(
        self,
        orders: SlotPort[list[Order]],
        branches: SlotPort[list[Branch]],
        settings: SlotPort[AppSettings],
        clock: ClockPort,
        advisory: AdvisoryPort,
        *,
        system_instruction: str | None = None,
    ) -> None:
        self._orders = orders
        self._branches = branches
        self._settings = settings
        self._clock = clock
        self._advisory = advisory
        self._system_instruction = system_instruction or SYSTEM_INSTRUCTION

    def filtered_orders(self, criteria: FilterCriteria) -> list[Order]:
        return filter_orders(
            self._orders.value,
            criteria,
            self._clock.now(),
            known_branch_ids={b.id for b in self._branches.value},
        )

    def view(self, criteria: FilterCriteria) -> DashboardView:
        now = self._clock.now()
        branches = self._branches.value
        matched = filter_orders(
            self._orders.value,
            criteria,
            now,
            known_branch_ids={b.id for b in branches},
        )
        snapshot = aggregate(matched, criteria.window, branches=branches, tz=now.tzinfo)
        return DashboardView(
            criteria=criteria,
            orders=matched,
            snapshot=snapshot,
            currency_symbol=self._settings.value.currency_symbol,
        )

    def open_insight_panel(self) -> InsightPanel:
        return InsightPanel(self._advisory, system_instruction=self._system_instruction)

    async def generate_insight(self, panel: InsightPanel, criteria: FilterCriteria) -> InsightResult:
        view = self.view(criteria)
        return await panel.generate(view.snapshot, self._settings.value, self._branches.value)
