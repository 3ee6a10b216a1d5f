"""
Fixtures shared by the intent handler tests.
"""

from datetime import UTC, datetime

import pytest

from portal_assistant.agents.context import ChatContext
from portal_assistant.application.use_cases import AddToCartUseCase, SearchProductsUseCase


@pytest.fixture
def make_context(customer_resolver):
    """Factory for per-call contexts of user-1 (customer ALFKI)."""

    def _make(message: str, user_id: str | None = "user-1", request_time: datetime | None = None, resolver=...):
        return ChatContext(
            message=message,
            user_id=user_id,
            request_time=request_time or datetime.now(UTC),
            customer_resolver=customer_resolver if resolver is ... else resolver,
        )

    return _make


@pytest.fixture
def search_products(catalog_service) -> SearchProductsUseCase:
    return SearchProductsUseCase(catalog_service)


@pytest.fixture
def add_to_cart(cart_service, catalog_service) -> AddToCartUseCase:
    return AddToCartUseCase(cart_service, catalog_service)
