"""
Orders component - order log writes.
"""

from .component import OrderService, order_total
from .models import RecordOrderInput

__all__ = ["OrderService", "RecordOrderInput", "order_total"]
