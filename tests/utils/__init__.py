"""Test utilities and helpers."""

from tests.utils.builders import CartBuilder, OrderBuilder, ProductBuilder
from tests.utils.fakes import (
    DictCustomerMapping,
    DictTenantContext,
    InMemoryCartService,
    InMemoryCatalogService,
    InMemoryOrderService,
)

__all__ = [
    # Builders
    "ProductBuilder",
    "OrderBuilder",
    "CartBuilder",
    # Fakes
    "InMemoryCatalogService",
    "InMemoryCartService",
    "InMemoryOrderService",
    "DictTenantContext",
    "DictCustomerMapping",
]
