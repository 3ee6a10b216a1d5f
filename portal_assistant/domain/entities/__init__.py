from .cart import Cart, CartLine
from .order import Order, OrderDetail, OrderStatusHistory, as_utc
from .product import Product

__all__ = [
    "Cart",
    "CartLine",
    "Order",
    "OrderDetail",
    "OrderStatusHistory",
    "Product",
    "as_utc",
]
