"""
Cart Entities

Read model of a customer's cart, owned by the cart collaborator.
"""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass
class CartLine:
    """Single product line in a cart."""

    line_id: int
    product_id: int
    product_name: str
    quantity: int
    unit_price: Decimal = Decimal("0")


@dataclass
class Cart:
    """Customer cart."""

    cart_id: int
    lines: list[CartLine] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def find_line_by_product(self, product_id: int) -> CartLine | None:
        """Return the line holding product_id, if any."""
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    def find_line_by_name(self, name: str) -> CartLine | None:
        """
        Return the first line whose product name contains name (case-insensitive).
        """
        needle = name.lower().strip()
        if not needle:
            return None
        for line in self.lines:
            if needle in line.product_name.lower():
                return line
        return None
