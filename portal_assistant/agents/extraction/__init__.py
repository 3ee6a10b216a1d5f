"""
Slot Extractors

Regex based extraction of product, quantity, order and search slots.
"""

from .order_reference import OrderReference, OrderReferenceExtractor
from .product_reference import ProductReference, ProductReferenceExtractor
from .quantity import QuantityExtractor
from .search_term import SearchTermExtractor

__all__ = [
    "ProductReference",
    "ProductReferenceExtractor",
    "QuantityExtractor",
    "OrderReference",
    "OrderReferenceExtractor",
    "SearchTermExtractor",
]
