"""
Shared pytest fixtures for all tests.

Provides the sample catalog, in-memory collaborators, mock services and a
fully wired ChatProcessor.
"""

import os
from unittest.mock import AsyncMock

import pytest

from portal_assistant.agents import ChatProcessor
from portal_assistant.application.services import CustomerResolver
from tests.utils import (
    DictCustomerMapping,
    DictTenantContext,
    InMemoryCartService,
    InMemoryCatalogService,
    InMemoryOrderService,
    ProductBuilder,
)

# Ensure test environment
os.environ["ENVIRONMENT"] = "test"

USER_ID = "user-1"
CUSTOMER_ID = "ALFKI"


# ============================================================================
# CONFIGURATION FIXTURES
# ============================================================================


@pytest.fixture
def assistant_config() -> dict:
    """Handler tuning values, independent of the environment."""
    return {
        "search_result_limit": 5,
        "order_history_default_limit": 5,
        "order_history_max_limit": 20,
        "reorder_max_failed_display": 3,
        "suggestion_candidate_limit": 5,
        "suggestion_display_limit": 3,
        "system_prompt": "You are a test assistant.",
    }


# ============================================================================
# DOMAIN DATA FIXTURES
# ============================================================================


@pytest.fixture
def products() -> list:
    """A small Northwind-style catalog."""
    return [
        ProductBuilder().build(),  # Chai, id 1, $18.00, 39 in stock, Beverages
        ProductBuilder().with_id(2).with_name("Chang").with_price("19.00").with_stock(17)
        .with_quantity_per_unit("24 - 12 oz bottles").build(),
        ProductBuilder().with_id(3).with_name("Aniseed Syrup").with_price("10.00").with_stock(13)
        .in_category(2, "Condiments").with_quantity_per_unit("12 - 550 ml bottles").build(),
        ProductBuilder().with_id(14).with_name("Tofu").with_price("23.25").with_stock(35)
        .in_category(7, "Produce").with_quantity_per_unit("40 - 100 g pkgs.").build(),
        ProductBuilder().with_id(9).with_name("Mishi Kobe Niku").with_price("97.00").with_stock(29)
        .in_category(6, "Meat/Poultry").discontinued().build(),
        ProductBuilder().with_id(5).with_name("Chef Anton's Gumbo Mix").with_price("21.35")
        .in_category(2, "Condiments").out_of_stock().build(),
        ProductBuilder().with_id(39).with_name("Chartreuse verte").with_price("18.00").with_stock(69)
        .with_quantity_per_unit("750 cc per bottle").build(),
    ]


# ============================================================================
# COLLABORATOR FIXTURES
# ============================================================================


@pytest.fixture
def catalog_service(products) -> InMemoryCatalogService:
    return InMemoryCatalogService(products)


@pytest.fixture
def cart_service(catalog_service) -> InMemoryCartService:
    return InMemoryCartService(catalog_service)


@pytest.fixture
def order_service() -> InMemoryOrderService:
    return InMemoryOrderService()


@pytest.fixture
def customer_resolver() -> CustomerResolver:
    """Resolver where the session knows user-1 as ALFKI."""
    return CustomerResolver(
        tenant_context=DictTenantContext({USER_ID: CUSTOMER_ID}),
        customer_mapping=DictCustomerMapping({"user-2": "BONAP"}),
    )


@pytest.fixture
def mock_chat_service() -> AsyncMock:
    """Mock upstream chat service."""
    mock = AsyncMock()
    mock.chat.return_value = "Happy to help!"
    return mock


@pytest.fixture
def processor(catalog_service, cart_service, order_service, customer_resolver, assistant_config) -> ChatProcessor:
    """ChatProcessor wired to the in-memory collaborators, no upstream LLM."""
    return ChatProcessor(
        catalog_service=catalog_service,
        cart_service=cart_service,
        order_service=order_service,
        customer_resolver=customer_resolver,
        config=assistant_config,
    )
