"""
Domain models of the sales context.

Order (aggregate root), OrderLineItem, OrderState, ProductId.
"""

from src.sales.domain.order import (
    OPEN_STATES,
    TERMINAL_STATES,
    TRANSITIONS,
    Order,
    OrderState,
)
from src.sales.domain.order_line_item import OrderLineItem
from src.sales.domain.product_id import ProductId

__all__ = [
    # Aggregate
    "Order",
    "OrderState",
    "OPEN_STATES",
    "TERMINAL_STATES",
    "TRANSITIONS",
    # Entities / value objects
    "OrderLineItem",
    "ProductId",
]
