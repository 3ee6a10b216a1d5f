"""
Assistant Application Ports

Interface definitions (ports) for the commerce collaborators the assistant calls.
Uses Protocol for structural typing; implementations live with the host portal.
"""

from typing import Protocol, runtime_checkable

from portal_assistant.domain.entities import Cart, Order, Product


@runtime_checkable
class IChatService(Protocol):
    """
    Upstream free-text responder (LLM).
    """

    async def chat(self, message: str, system_prompt: str | None = None) -> str:
        """Return a free-text reply for message"""
        ...


@runtime_checkable
class ICatalogService(Protocol):
    """
    Interface for the product catalog.
    """

    async def search_products(self, term: str) -> list[Product]:
        """
        Case-insensitive name search, first page of 10,
        only in-stock and non-discontinued products.
        """
        ...

    async def get_product_by_id(self, product_id: int) -> Product | None:
        """Get product by ID"""
        ...

    async def list_by_category(
        self, category_id: int, exclude_id: int | None = None, limit: int = 5
    ) -> list[Product]:
        """Get products of a category"""
        ...


@runtime_checkable
class ICartService(Protocol):
    """
    Interface for the customer cart.
    """

    async def get_cart(self, customer_id: str) -> Cart | None:
        """Get the customer's cart"""
        ...

    async def add_to_cart(self, customer_id: str, product_id: int, quantity: int) -> bool:
        """Add quantity of a product; False when the product cannot be added"""
        ...

    async def update_quantity(self, customer_id: str, line_id: int, quantity: int) -> bool:
        """Set the quantity of a cart line"""
        ...


@runtime_checkable
class IOrderService(Protocol):
    """
    Interface for order history.
    """

    async def get_orders_by_customer(self, customer_id: str) -> list[Order]:
        """Get all orders of a customer"""
        ...

    async def get_order_by_id(self, order_id: int, customer_id: str | None = None) -> Order | None:
        """Get an order, restricted to customer_id when given"""
        ...


@runtime_checkable
class ITenantContext(Protocol):
    """
    Session-backed tenant context of the signed-in user.
    """

    async def get_current_customer_id(self, user_id: str) -> str | None:
        """Customer id bound to the user's session"""
        ...


@runtime_checkable
class ICustomerMapping(Protocol):
    """
    Direct user to customer mapping store.
    """

    async def get_customer_id(self, user_id: str) -> str | None:
        """Customer id mapped to the user"""
        ...


@runtime_checkable
class ICustomerResolver(Protocol):
    """
    Resolves the commerce customer id of an authenticated user.
    """

    async def resolve_customer_id(self, user_id: str | None) -> str | None:
        """Customer id or None when the user has no customer account"""
        ...


@runtime_checkable
class IProductEmbeddingService(Protocol):
    """
    Vector search over product embeddings.
    """

    async def search_products(self, query: str, top_k: int = 5) -> list[Product]:
        """Nearest products to query"""
        ...


__all__ = [
    "IChatService",
    "ICatalogService",
    "ICartService",
    "IOrderService",
    "ITenantContext",
    "ICustomerMapping",
    "ICustomerResolver",
    "IProductEmbeddingService",
]
