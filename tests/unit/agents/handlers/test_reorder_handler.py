"""
Unit Tests for ReorderHandler

Order selection: explicit id, then time window, then the most recent order.
"""

import pytest

from portal_assistant.agents.handlers import ReorderHandler
from portal_assistant.agents.handlers.base import NO_CUSTOMER_MESSAGE
from portal_assistant.agents.handlers.reorder import NO_ORDERS_MESSAGE
from portal_assistant.application.dto import ActionType
from portal_assistant.core.exceptions import CollaboratorUnavailableException
from tests.utils import InMemoryOrderService, OrderBuilder


@pytest.fixture
def orders():
    return [
        OrderBuilder().with_id(100).placed_days_ago(3).with_line(1, "Chai", "18.00", 2)
        .with_line(14, "Tofu", "23.25", 1).build(),
        OrderBuilder().with_id(101).placed_days_ago(40).with_line(2, "Chang", "19.00", 5).build(),
        OrderBuilder().with_id(102).placed_days_ago(120).with_line(3, "Aniseed Syrup", "10.00", 1).build(),
        OrderBuilder().with_id(200).for_customer("BONAP").with_line(1, "Chai", "18.00", 9).build(),
    ]


@pytest.fixture
def handler(orders, cart_service, add_to_cart):
    return ReorderHandler(InMemoryOrderService(orders), cart_service, add_to_cart)


class TestReorderHandler:
    @pytest.mark.asyncio
    async def test_most_recent_order_by_default(self, handler, make_context, cart_service):
        outcome = await handler.handle(make_context("reorder my last order"))

        assert outcome.reply_fragment == "✅ Reorder complete: 2 item(s) from 1 order(s) are now in your cart."
        assert outcome.side_effect.type == ActionType.ITEMS_REORDERED
        assert outcome.side_effect.payload == {"itemsAdded": 2, "orderIds": [100], "failedProducts": []}
        assert cart_service.added == [("ALFKI", 1, 2), ("ALFKI", 14, 1)]

    @pytest.mark.asyncio
    async def test_explicit_order_id(self, handler, make_context, cart_service):
        outcome = await handler.handle(make_context("reorder order #101"))

        assert outcome.reply_fragment == "✅ Reorder complete: 1 item(s) from 1 order(s) are now in your cart."
        assert cart_service.added == [("ALFKI", 2, 5)]

    @pytest.mark.asyncio
    async def test_time_window_selects_every_order_inside_it(self, handler, make_context):
        outcome = await handler.handle(make_context("reorder everything from the last 2 months"))

        assert outcome.reply_fragment == "✅ Reorder complete: 3 item(s) from 2 order(s) are now in your cart."
        assert outcome.side_effect.payload["orderIds"] == [100, 101]

    @pytest.mark.asyncio
    async def test_empty_time_window(self, handler, make_context, cart_service):
        outcome = await handler.handle(make_context("reorder what i bought in the last 2 days"))

        assert outcome.reply_fragment == NO_ORDERS_MESSAGE
        assert outcome.side_effect is None
        assert cart_service.added == []

    @pytest.mark.asyncio
    async def test_order_of_another_customer_is_not_found(self, handler, make_context, cart_service):
        outcome = await handler.handle(make_context("reorder order 200"))

        assert outcome.reply_fragment == NO_ORDERS_MESSAGE
        assert cart_service.added == []

    @pytest.mark.asyncio
    async def test_nonexistent_order(self, handler, make_context):
        outcome = await handler.handle(make_context("reorder order 999"))

        assert outcome.reply_fragment == "No orders found matching your request."

    @pytest.mark.asyncio
    async def test_partial_failure_lists_failed_products(self, cart_service, add_to_cart, make_context):
        order = (
            OrderBuilder().with_id(300).with_line(1, "Chai", "18.00", 1)
            .with_line(9, "Mishi Kobe Niku", "97.00", 1).with_line(5, "Chef Anton's Gumbo Mix", "21.35", 2)
            .build()
        )
        handler = ReorderHandler(InMemoryOrderService([order]), cart_service, add_to_cart)

        outcome = await handler.handle(make_context("reorder"))

        assert outcome.reply_fragment == (
            "✅ Reorder complete: 1 item(s) from 1 order(s) are now in your cart.\n"
            "⚠️ Could not reorder: Mishi Kobe Niku, Chef Anton's Gumbo Mix (may be discontinued or out of stock)."
        )
        assert outcome.side_effect.payload["failedProducts"] == ["Mishi Kobe Niku", "Chef Anton's Gumbo Mix"]

    @pytest.mark.asyncio
    async def test_failed_list_is_truncated(self, cart_service, add_to_cart, make_context):
        builder = OrderBuilder().with_id(301)
        for product_id in range(90, 95):
            builder.with_line(product_id, f"Retired {product_id}", "1.00", 1)
        handler = ReorderHandler(InMemoryOrderService([builder.build()]), cart_service, add_to_cart)

        outcome = await handler.handle(make_context("reorder"))

        assert outcome.reply_fragment == (
            "❌ None of the items from 1 order(s) could be put back in your cart.\n"
            "⚠️ Could not reorder: Retired 90, Retired 91, Retired 92 and 2 more "
            "(may be discontinued or out of stock)."
        )
        assert outcome.side_effect is None

    @pytest.mark.asyncio
    async def test_unknown_customer(self, handler, make_context):
        outcome = await handler.handle(make_context("reorder", user_id="ghost"))

        assert outcome.reply_fragment == f"🔄 {NO_CUSTOMER_MESSAGE}"

    @pytest.mark.asyncio
    async def test_requires_cart_service(self, orders, add_to_cart, make_context):
        handler = ReorderHandler(InMemoryOrderService(orders), None, add_to_cart)

        with pytest.raises(CollaboratorUnavailableException):
            await handler.handle(make_context("reorder"))
