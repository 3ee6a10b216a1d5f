"""
In-memory collaborators implementing the application ports.

They behave like the portal services closely enough for end-to-end tests:
catalog search filters in-stock, non-discontinued products and pages to 10.
"""

from portal_assistant.domain import Cart, CartLine, Order, Product

CATALOG_PAGE_SIZE = 10


class InMemoryCatalogService:
    def __init__(self, products: list[Product] | None = None):
        self.products = list(products or [])
        self.search_calls: list[str] = []

    async def search_products(self, term: str) -> list[Product]:
        self.search_calls.append(term)
        needle = term.lower()
        matches = [p for p in self.products if needle in p.product_name.lower() and p.is_available]
        return matches[:CATALOG_PAGE_SIZE]

    async def get_product_by_id(self, product_id: int) -> Product | None:
        return next((p for p in self.products if p.product_id == product_id), None)

    async def list_by_category(self, category_id: int, exclude_id: int | None = None, limit: int = 5) -> list[Product]:
        matches = [p for p in self.products if p.category_id == category_id and p.product_id != exclude_id]
        return matches[:limit]


class InMemoryCartService:
    """Cart store; refuses unknown, out-of-stock and discontinued products."""

    def __init__(self, catalog: InMemoryCatalogService | None = None, carts: dict[str, Cart] | None = None):
        self.catalog = catalog
        self.carts: dict[str, Cart] = carts or {}
        self.added: list[tuple[str, int, int]] = []
        self.updated: list[tuple[str, int, int]] = []

    async def get_cart(self, customer_id: str) -> Cart | None:
        return self.carts.get(customer_id)

    async def add_to_cart(self, customer_id: str, product_id: int, quantity: int) -> bool:
        product = await self.catalog.get_product_by_id(product_id) if self.catalog else None
        if product is None or not product.is_available:
            return False

        cart = self.carts.setdefault(customer_id, Cart(cart_id=len(self.carts) + 1))
        if line := cart.find_line_by_product(product_id):
            line.quantity += quantity
        else:
            cart.lines.append(CartLine(len(cart.lines) + 1, product_id, product.product_name, quantity))
        self.added.append((customer_id, product_id, quantity))
        return True

    async def update_quantity(self, customer_id: str, line_id: int, quantity: int) -> bool:
        cart = self.carts.get(customer_id)
        if cart is None:
            return False
        for line in cart.lines:
            if line.line_id == line_id:
                line.quantity = quantity
                self.updated.append((customer_id, line_id, quantity))
                return True
        return False


class InMemoryOrderService:
    def __init__(self, orders: list[Order] | None = None):
        self.orders = list(orders or [])

    async def get_orders_by_customer(self, customer_id: str) -> list[Order]:
        return [o for o in self.orders if o.customer_id == customer_id]

    async def get_order_by_id(self, order_id: int, customer_id: str | None = None) -> Order | None:
        for order in self.orders:
            if order.order_id == order_id and (customer_id is None or order.customer_id == customer_id):
                return order
        return None


class DictTenantContext:
    def __init__(self, customers: dict[str, str] | None = None):
        self.customers = customers or {}

    async def get_current_customer_id(self, user_id: str) -> str | None:
        return self.customers.get(user_id)


class DictCustomerMapping:
    def __init__(self, customers: dict[str, str] | None = None):
        self.customers = customers or {}

    async def get_customer_id(self, user_id: str) -> str | None:
        return self.customers.get(user_id)
