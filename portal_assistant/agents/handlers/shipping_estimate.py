"""
Shipping Estimate Handler

Reports shipping status and delivery dates of an order.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from portal_assistant.agents.extraction import OrderReferenceExtractor
from portal_assistant.agents.intent import Intent
from portal_assistant.application.dto import HandlerOutcome
from portal_assistant.application.ports import IOrderService
from portal_assistant.domain import Order, as_utc

from .base import NO_CUSTOMER_MESSAGE, ActionHandler

if TYPE_CHECKING:
    from portal_assistant.agents.context import ChatContext


class ShippingEstimateHandler(ActionHandler):
    """Uses the order named in the message, else the customer's most recent order."""

    intent = Intent.SHIPPING_ESTIMATE
    action_description = "check the shipping status"

    def __init__(self, order_service: IOrderService | None, order_extractor: OrderReferenceExtractor | None = None):
        self.order_service = order_service
        self.order_extractor = order_extractor or OrderReferenceExtractor()

    async def handle(self, context: ChatContext) -> HandlerOutcome:
        order_service = self._require(self.order_service, "order service")
        self._require(context.customer_resolver, "customer resolver")

        customer_id = await context.get_customer_id()
        if not customer_id:
            return HandlerOutcome(f"🚚 {NO_CUSTOMER_MESSAGE}")

        order_id = self.order_extractor.extract_order_id(context.message)
        if order_id is not None:
            order = await order_service.get_order_by_id(order_id, customer_id)
            if order is None:
                return HandlerOutcome(f"🚚 Order not found (#{order_id}).")
        else:
            orders = await order_service.get_orders_by_customer(customer_id)
            if not orders:
                return HandlerOutcome("🚚 Order not found. You don't have any orders yet.")
            order = max(orders, key=Order.sort_key)

        return HandlerOutcome(self._format_status(order, context.request_time))

    def _format_status(self, order: Order, now: datetime) -> str:
        lines = [
            f"🚚 Shipping status for order #{order.order_id}",
            f"Status: {order.current_status.display_name}",
        ]

        if order.shipped_date and order.required_date:
            delta = self._days_between(order.shipped_date, order.required_date)
            lines.append(f"Shipped: {self._format_date(order.shipped_date)}")
            if delta >= 0:
                timing = f"{delta} day(s) before the required date"
            else:
                timing = f"{-delta} day(s) after the required date"
            lines.append(f"Required by: {self._format_date(order.required_date)} (shipped {timing})")
        elif order.shipped_date:
            lines.append(f"Shipped: {self._format_date(order.shipped_date)}")
        elif order.required_date:
            delta = self._days_between(now, order.required_date)
            if delta > 0:
                timing = f"in {delta} day(s)"
            elif delta == 0:
                timing = "today"
            else:
                timing = f"{-delta} day(s) ago"
            lines.append(f"Expected delivery: {self._format_date(order.required_date)} ({timing})")
        else:
            lines.append("Expected delivery: not yet determined")

        if order.tracking_number:
            lines.append(f"Tracking number: {order.tracking_number}")
        if order.shipper_name:
            lines.append(f"Carrier: {order.shipper_name}")
        return "\n".join(lines)

    @staticmethod
    def _days_between(start: datetime, end: datetime) -> int:
        return (as_utc(end).date() - as_utc(start).date()).days
