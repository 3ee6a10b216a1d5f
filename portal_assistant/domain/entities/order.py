"""
Order Entities

Read model of a customer order with its lines and status history.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal

from ..value_objects.order_status import OrderPortalStatus


@dataclass
class OrderDetail:
    """
    Individual line item of an order.
    """

    product_id: int
    product_name: str
    unit_price: Decimal
    quantity: int
    discount: float = 0.0  # Fraction, 0.05 == 5%

    @property
    def line_total(self) -> Decimal:
        """Unit price x quantity with the line discount applied."""
        return self.unit_price * self.quantity * (Decimal("1") - Decimal(str(self.discount)))


@dataclass
class OrderStatusHistory:
    """A status change recorded by the portal."""

    status: OrderPortalStatus
    changed_at: datetime
    changed_by_user_id: str | None = None
    comment: str | None = None


@dataclass
class Order:
    """
    Customer order.

    Example:
        ```python
        order = Order(order_id=10248, customer_id="VINET", order_date=datetime(2024, 7, 4))
        order.details.append(OrderDetail(11, "Queso Cabrales", Decimal("14.00"), 12))
        order.total  # Decimal('168.00')
        ```
    """

    order_id: int
    customer_id: str | None = None
    order_date: datetime | None = None
    required_date: datetime | None = None
    shipped_date: datetime | None = None
    freight: Decimal | None = None
    tracking_number: str | None = None
    shipper_name: str | None = None
    details: list[OrderDetail] = field(default_factory=list)
    status_history: list[OrderStatusHistory] = field(default_factory=list)

    @property
    def current_status(self) -> OrderPortalStatus:
        """Latest status history entry, SUBMITTED when there is no history."""
        if not self.status_history:
            return OrderPortalStatus.SUBMITTED
        latest = max(self.status_history, key=lambda entry: as_utc(entry.changed_at))
        return latest.status

    @property
    def item_count(self) -> int:
        return len(self.details)

    @property
    def subtotal(self) -> Decimal:
        return sum((detail.line_total for detail in self.details), Decimal("0"))

    @property
    def total(self) -> Decimal:
        return self.subtotal + (self.freight or Decimal("0"))

    def sort_key(self) -> datetime:
        """Key for newest-first ordering; undated orders sort last."""
        return as_utc(self.order_date) or datetime.min.replace(tzinfo=UTC)


def as_utc(value: datetime | None) -> datetime | None:
    """Treat naive timestamps as UTC so they compare with aware ones."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)

