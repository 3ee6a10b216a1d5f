"""
Cart Modify Handler

Changes the quantity of a line already in the cart.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from portal_assistant.agents.extraction import ProductReference, ProductReferenceExtractor, QuantityExtractor
from portal_assistant.agents.intent import Intent
from portal_assistant.application.dto import ActionType, HandlerOutcome, SideEffect
from portal_assistant.application.ports import ICartService
from portal_assistant.domain import Cart, CartLine

from .base import ActionHandler

if TYPE_CHECKING:
    from portal_assistant.agents.context import ChatContext

logger = logging.getLogger(__name__)

EMPTY_CART_MESSAGE = "🛒 Your cart is empty."


class CartModifyHandler(ActionHandler):
    intent = Intent.CART_MODIFY
    action_description = "change your cart"

    def __init__(
        self,
        cart_service: ICartService | None,
        product_extractor: ProductReferenceExtractor | None = None,
        quantity_extractor: QuantityExtractor | None = None,
    ):
        self.cart_service = cart_service
        self.product_extractor = product_extractor or ProductReferenceExtractor()
        self.quantity_extractor = quantity_extractor or QuantityExtractor()

    async def handle(self, context: ChatContext) -> HandlerOutcome:
        cart_service = self._require(self.cart_service, "cart service")
        self._require(context.customer_resolver, "customer resolver")

        customer_id = await context.get_customer_id()
        cart = await cart_service.get_cart(customer_id) if customer_id else None
        if cart is None or cart.is_empty:
            return HandlerOutcome(EMPTY_CART_MESSAGE)

        quantity = self.quantity_extractor.extract_target(context.message)
        if quantity is None:
            return HandlerOutcome('🛒 What quantity would you like? Try "change chai quantity to 3".')

        reference = self.product_extractor.extract_cart_item(context.message)
        line = self._find_line(cart, reference, context.text)
        if line is None:
            target = reference.product_name or (f"product {reference.product_id}" if reference.product_id else None)
            if target:
                return HandlerOutcome(f'🛒 I couldn\'t find "{target}" in your cart.')
            return HandlerOutcome("🛒 Which item in your cart would you like to change?")

        updated = await cart_service.update_quantity(customer_id, line.line_id, quantity)
        if not updated:
            logger.info(f"Cart refused quantity {quantity} for line {line.line_id} of customer {customer_id}")
            return HandlerOutcome(f"❌ Could not change the quantity of {line.product_name} in your cart.")

        return HandlerOutcome(
            f"✅ Updated {line.product_name} quantity to {quantity} in your cart.",
            SideEffect(ActionType.CART_UPDATED, {"productName": line.product_name, "quantity": quantity}),
        )

    @staticmethod
    def _find_line(cart: Cart, reference: ProductReference, text: str) -> CartLine | None:
        """Match by product id, then by extracted name, then by any line name mentioned in the message."""
        if reference.product_id is not None:
            return cart.find_line_by_product(reference.product_id)
        if reference.product_name:
            if line := cart.find_line_by_name(reference.product_name):
                return line
        for line in cart.lines:
            if line.product_name.lower() in text:
                return line
        return None
