"""
Order History Handler

Lists the customer's most recent orders ("show my last 3 orders").
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from portal_assistant.agents.extraction import OrderReferenceExtractor
from portal_assistant.agents.intent import Intent
from portal_assistant.application.dto import HandlerOutcome
from portal_assistant.application.ports import IOrderService
from portal_assistant.domain import Order

from .base import NO_CUSTOMER_MESSAGE, ActionHandler

if TYPE_CHECKING:
    from portal_assistant.agents.context import ChatContext


class OrderHistoryHandler(ActionHandler):
    intent = Intent.ORDER_HISTORY
    action_description = "load your order history"

    def __init__(
        self,
        order_service: IOrderService | None,
        default_limit: int = 5,
        max_limit: int = 20,
        order_extractor: OrderReferenceExtractor | None = None,
    ):
        self.order_service = order_service
        self.default_limit = default_limit
        self.max_limit = max_limit
        self.order_extractor = order_extractor or OrderReferenceExtractor()

    async def handle(self, context: ChatContext) -> HandlerOutcome:
        order_service = self._require(self.order_service, "order service")
        self._require(context.customer_resolver, "customer resolver")

        customer_id = await context.get_customer_id()
        if not customer_id:
            return HandlerOutcome(f"📦 {NO_CUSTOMER_MESSAGE}")

        limit = self.order_extractor.extract_limit(context.message, self.default_limit, self.max_limit)
        orders = await order_service.get_orders_by_customer(customer_id)
        if not orders:
            return HandlerOutcome("📦 You don't have any orders yet.")

        recent = sorted(orders, key=Order.sort_key, reverse=True)[:limit]
        blocks = [f"📦 Your {len(recent)} most recent order(s):"]
        blocks.extend(self._format_order(order) for order in recent)
        return HandlerOutcome("\n\n".join(blocks))

    def _format_order(self, order: Order) -> str:
        lines = [
            f"Order #{order.order_id}",
            f"  Date: {self._format_date(order.order_date)}",
            f"  Status: {order.current_status.display_name}",
            f"  Items: {order.item_count}",
            f"  Total: ${order.total:.2f}",
        ]
        if order.shipped_date:
            lines.append(f"  Shipped: {self._format_date(order.shipped_date)}")
        if order.tracking_number:
            lines.append(f"  Tracking: {order.tracking_number}")
        return "\n".join(lines)
