from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from src.domain.entities import OrderItem, OrderStatus, PaymentMethod


@dataclass(frozen=True)
class RecordOrderInput:
    """A sale rung up at a branch. total defaults to the sum of line totals."""

    branch_id: str
    items: list[OrderItem] = field(default_factory=list)
    total: Decimal | None = None
    status: OrderStatus = "COMPLETED"
    payment_method: PaymentMethod = "CASH"
    customer_name: str | None = None
    created_by: str | None = None
