"""
Smart Suggest Handler

Suggests products from the same category as a target product.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from portal_assistant.agents.extraction import ProductReferenceExtractor
from portal_assistant.agents.intent import Intent
from portal_assistant.application.dto import HandlerOutcome
from portal_assistant.application.ports import ICartService, ICatalogService
from portal_assistant.application.use_cases import SearchProductsRequest, SearchProductsUseCase
from portal_assistant.domain import Product

from .base import ActionHandler

if TYPE_CHECKING:
    from portal_assistant.agents.context import ChatContext

logger = logging.getLogger(__name__)


class SmartSuggestHandler(ActionHandler):
    """
    Target product: extracted id, else extracted name via search, else the
    first product in the customer's cart.
    """

    intent = Intent.SMART_SUGGEST
    action_description = "find suggestions"

    def __init__(
        self,
        catalog_service: ICatalogService | None,
        search_products: SearchProductsUseCase,
        cart_service: ICartService | None = None,
        candidate_limit: int = 5,
        display_limit: int = 3,
        product_extractor: ProductReferenceExtractor | None = None,
    ):
        self.catalog_service = catalog_service
        self.search_products = search_products
        self.cart_service = cart_service
        self.candidate_limit = candidate_limit
        self.display_limit = display_limit
        self.product_extractor = product_extractor or ProductReferenceExtractor()

    async def handle(self, context: ChatContext) -> HandlerOutcome:
        catalog = self._require(self.catalog_service, "catalog service")

        target = await self._resolve_target(catalog, context)
        if target is None:
            return HandlerOutcome(
                '💡 I could not identify a product to base suggestions on. Try "suggest products for chai".'
            )

        candidates: list[Product] = []
        if target.category_id is not None:
            candidates = await catalog.list_by_category(
                target.category_id, exclude_id=target.product_id, limit=self.candidate_limit
            )
        suggestions = [p for p in candidates if p.product_id != target.product_id][: self.display_limit]

        if not suggestions:
            return HandlerOutcome(f"💡 I found no complementary products for {target.product_name}.")

        lines = [f"💡 Customers who buy {target.product_name} might also like:"]
        lines.extend(product.to_summary_line() for product in suggestions)
        return HandlerOutcome("\n".join(lines))

    async def _resolve_target(self, catalog: ICatalogService, context: ChatContext) -> Product | None:
        reference = self.product_extractor.extract_suggestion_target(context.message)

        if reference.product_id is not None:
            return await catalog.get_product_by_id(reference.product_id)

        if reference.product_name:
            response = await self.search_products.execute(SearchProductsRequest(query=reference.product_name))
            if response.first is not None:
                return response.first
            logger.debug(f"No product found for suggestion target '{reference.product_name}'")

        return await self._first_cart_product(catalog, context)

    async def _first_cart_product(self, catalog: ICatalogService, context: ChatContext) -> Product | None:
        if self.cart_service is None:
            return None
        customer_id = await context.get_customer_id()
        if not customer_id:
            return None
        cart = await self.cart_service.get_cart(customer_id)
        if cart is None or cart.is_empty:
            return None
        return await catalog.get_product_by_id(cart.lines[0].product_id)
