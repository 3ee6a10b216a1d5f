"""
Reorder Handler

Puts the lines of previous orders back into the cart.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import TYPE_CHECKING

from portal_assistant.agents.extraction import OrderReference, OrderReferenceExtractor
from portal_assistant.agents.intent import Intent
from portal_assistant.application.dto import ActionType, HandlerOutcome, SideEffect
from portal_assistant.application.ports import ICartService, IOrderService
from portal_assistant.application.use_cases import AddToCartRequest, AddToCartUseCase
from portal_assistant.domain import Order, as_utc

from .base import NO_CUSTOMER_MESSAGE, ActionHandler

if TYPE_CHECKING:
    from portal_assistant.agents.context import ChatContext

logger = logging.getLogger(__name__)

NO_ORDERS_MESSAGE = "No orders found matching your request."


class ReorderHandler(ActionHandler):
    """
    Resolves the orders to repeat, then adds every line through the add-to-cart use case.

    Order selection: explicit order id (must belong to the customer), else every
    order inside the requested time window, else the single most recent order.
    """

    intent = Intent.REORDER
    action_description = "reorder those items"

    def __init__(
        self,
        order_service: IOrderService | None,
        cart_service: ICartService | None,
        add_to_cart: AddToCartUseCase,
        max_failed_display: int = 3,
        order_extractor: OrderReferenceExtractor | None = None,
    ):
        self.order_service = order_service
        self.cart_service = cart_service
        self.add_to_cart = add_to_cart
        self.max_failed_display = max_failed_display
        self.order_extractor = order_extractor or OrderReferenceExtractor()

    async def handle(self, context: ChatContext) -> HandlerOutcome:
        order_service = self._require(self.order_service, "order service")
        self._require(self.cart_service, "cart service")
        self._require(context.customer_resolver, "customer resolver")

        customer_id = await context.get_customer_id()
        if not customer_id:
            return HandlerOutcome(f"🔄 {NO_CUSTOMER_MESSAGE}")

        reference = self.order_extractor.extract(context.message)
        orders = await self._resolve_orders(order_service, customer_id, reference, context)
        if not orders:
            return HandlerOutcome(NO_ORDERS_MESSAGE)

        added = 0
        failed: list[str] = []
        for order in orders:
            for detail in order.details:
                result = await self.add_to_cart.execute(
                    AddToCartRequest(customer_id=customer_id, product_id=detail.product_id, quantity=detail.quantity)
                )
                if result.success:
                    added += 1
                else:
                    failed.append(detail.product_name or result.product_name)

        logger.info(f"Reorder for customer {customer_id}: {added} added, {len(failed)} failed")
        return self._build_outcome(orders, added, failed)

    async def _resolve_orders(
        self,
        order_service: IOrderService,
        customer_id: str,
        reference: OrderReference,
        context: ChatContext,
    ) -> list[Order]:
        if reference.order_id is not None:
            order = await order_service.get_order_by_id(reference.order_id, customer_id)
            if order is None or (order.customer_id and order.customer_id != customer_id):
                return []
            return [order]

        orders = sorted(await order_service.get_orders_by_customer(customer_id), key=Order.sort_key, reverse=True)

        if reference.time_window_days is not None:
            cutoff = as_utc(context.request_time) - timedelta(days=reference.time_window_days)
            return [order for order in orders if order.order_date and as_utc(order.order_date) >= cutoff]

        return orders[:1]

    def _build_outcome(self, orders: list[Order], added: int, failed: list[str]) -> HandlerOutcome:
        lines: list[str] = []
        if added:
            lines.append(f"✅ Reorder complete: {added} item(s) from {len(orders)} order(s) are now in your cart.")
        else:
            lines.append(f"❌ None of the items from {len(orders)} order(s) could be put back in your cart.")

        if failed:
            shown = ", ".join(failed[: self.max_failed_display])
            if len(failed) > self.max_failed_display:
                shown += f" and {len(failed) - self.max_failed_display} more"
            lines.append(f"⚠️ Could not reorder: {shown} (may be discontinued or out of stock).")

        side_effect = None
        if added:
            side_effect = SideEffect(
                ActionType.ITEMS_REORDERED,
                {
                    "itemsAdded": added,
                    "orderIds": [order.order_id for order in orders],
                    "failedProducts": failed,
                },
            )
        return HandlerOutcome("\n".join(lines), side_effect)
