"""
Add To Cart Handler

Handles "add 2 chai to my cart" style requests.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from portal_assistant.agents.extraction import ProductReferenceExtractor, QuantityExtractor
from portal_assistant.agents.intent import Intent
from portal_assistant.application.dto import ActionType, HandlerOutcome, SideEffect
from portal_assistant.application.use_cases import (
    AddToCartRequest,
    AddToCartUseCase,
    SearchProductsRequest,
    SearchProductsUseCase,
)

from .base import ActionHandler

if TYPE_CHECKING:
    from portal_assistant.agents.context import ChatContext

logger = logging.getLogger(__name__)


class AddToCartHandler(ActionHandler):
    """Resolves the product by id or by name search, then adds it to the cart."""

    intent = Intent.ADD_TO_CART
    action_description = "add that product to your cart"

    def __init__(
        self,
        add_to_cart: AddToCartUseCase,
        search_products: SearchProductsUseCase,
        product_extractor: ProductReferenceExtractor | None = None,
        quantity_extractor: QuantityExtractor | None = None,
    ):
        self.add_to_cart = add_to_cart
        self.search_products = search_products
        self.product_extractor = product_extractor or ProductReferenceExtractor()
        self.quantity_extractor = quantity_extractor or QuantityExtractor()

    async def handle(self, context: ChatContext) -> HandlerOutcome:
        reference = self.product_extractor.extract(context.message)
        quantity = self.quantity_extractor.extract(context.message)
        if quantity is None:
            quantity = 1

        if reference.product_id is not None:
            product_id = reference.product_id
        elif reference.product_name:
            search = await self.search_products.execute(SearchProductsRequest(query=reference.product_name))
            if not search.success:
                return HandlerOutcome(f"❌ Could not add {reference.product_name} to your cart: {search.error}")
            if search.first is None:
                return HandlerOutcome(
                    f'❌ I couldn\'t find a product matching "{reference.product_name}". '
                    "Try searching the catalog first."
                )
            product_id = search.first.product_id
        else:
            logger.info(f"Could not extract product info from message: {context.message!r}")
            return HandlerOutcome.empty()

        result = await self.add_to_cart.execute(
            AddToCartRequest(
                customer_id=await context.get_customer_id(),
                product_id=product_id,
                quantity=quantity,
            )
        )

        if not result.success:
            return HandlerOutcome(f"❌ Could not add {result.product_name} to your cart: {result.error}")

        return HandlerOutcome(
            f"✅ Added {result.quantity} x {result.product_name} to your cart.",
            SideEffect(
                ActionType.PRODUCT_ADDED,
                {"productName": result.product_name, "description": result.description},
            ),
        )
