"""
Orders component - appends sales to the order log.

The log is append-only from this component's point of view; recorded
orders are never edited.
"""

from __future__ import annotations

from decimal import Decimal

from src.components.branches import BranchNotFound
from src.components.durable_store import SlotPort
from src.domain.entities import Branch, Order
from src.ports.clock import ClockPort

from .models import RecordOrderInput


def order_total(inp: RecordOrderInput) -> Decimal:
    if inp.total is not None:
        return inp.total
    return sum((item.line_total for item in inp.items), Decimal("0"))


class OrderService:
    def __init__(
        self,
        orders: SlotPort[list[Order]],
        branches: SlotPort[list[Branch]],
        clock: ClockPort,
    ) -> None:
        self._orders = orders
        self._branches = branches
        self._clock = clock

    def list(self) -> list[Order]:
        return list(self._orders.value)

    def get(self, order_id: str) -> Order | None:
        return next((o for o in self._orders.value if o.id == order_id), None)

    def record(self, inp: RecordOrderInput) -> Order:
        """
        Append a new order stamped with the current instant.

        Raises:
            BranchNotFound: If branch_id is not in the branch list
            ValueError: If the total is negative
        """
        if all(b.id != inp.branch_id for b in self._branches.value):
            raise BranchNotFound(inp.branch_id)

        total = order_total(inp)
        if total < 0:
            raise ValueError("Order total must not be negative")

        order = Order(
            branch_id=inp.branch_id,
            items=list(inp.items),
            total=total,
            created_at=self._clock.now(),
            status=inp.status,
            payment_method=inp.payment_method,
            customer_name=inp.customer_name,
            created_by=inp.created_by,
        )
        self._orders.update(lambda log: [*log, order])
        return order
