"""
Domain Layer

Read models of the commerce engine consumed by the assistant.
"""

from .entities import Cart, CartLine, Order, OrderDetail, OrderStatusHistory, Product, as_utc
from .value_objects import OrderPortalStatus

__all__ = [
    "Cart",
    "CartLine",
    "Order",
    "OrderDetail",
    "OrderStatusHistory",
    "OrderPortalStatus",
    "Product",
    "as_utc",
]
