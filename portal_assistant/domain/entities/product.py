"""
Product Entity

Catalog product as returned by the catalog and embedding collaborators.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass
class Product:
    """
    Catalog product.

    Only the fields the assistant reads are modelled; the catalog owns the rest.
    """

    product_id: int
    product_name: str
    unit_price: Decimal | None = None
    units_in_stock: int | None = None
    category_id: int | None = None
    category_name: str | None = None
    quantity_per_unit: str | None = None
    discontinued: bool = False

    @property
    def description(self) -> str:
        """Short description shown with cart notifications."""
        parts = [p for p in (self.category_name, self.quantity_per_unit) if p]
        return " - ".join(parts)

    @property
    def is_available(self) -> bool:
        """In stock and not discontinued."""
        return not self.discontinued and (self.units_in_stock or 0) > 0

    def format_price(self) -> str:
        return f"${(self.unit_price or Decimal('0')):.2f}"

    def to_summary_line(self) -> str:
        """One catalog line: name, id, price and stock."""
        return (
            f"• {self.product_name} (ID: {self.product_id}) - {self.format_price()} "
            f"- {self.units_in_stock or 0} in stock"
        )
