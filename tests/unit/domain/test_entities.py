"""
Unit tests for the order, product and cart read models.
"""

from datetime import UTC, datetime
from decimal import Decimal

from portal_assistant.domain import Cart, CartLine, Order, OrderDetail, OrderPortalStatus, OrderStatusHistory, as_utc
from tests.utils import OrderBuilder, ProductBuilder


class TestOrder:
    def test_total_includes_discount_and_freight(self):
        order = Order(order_id=10248, freight=Decimal("32.38"))
        order.details.append(OrderDetail(11, "Queso Cabrales", Decimal("14.00"), 12))
        order.details.append(OrderDetail(42, "Singaporean Hokkien Fried Mee", Decimal("9.80"), 10, discount=0.1))

        assert order.subtotal == Decimal("256.20")
        assert order.total == Decimal("288.58")
        assert order.item_count == 2

    def test_total_without_freight(self):
        order = OrderBuilder().with_line(1, "Chai", "18.00", 2).build()

        assert order.total == Decimal("36.00")

    def test_status_defaults_to_submitted(self):
        assert Order(order_id=1).current_status == OrderPortalStatus.SUBMITTED

    def test_latest_status_wins_regardless_of_insertion_order(self):
        order = Order(order_id=1)
        order.status_history.append(OrderStatusHistory(OrderPortalStatus.SHIPPED, datetime(2024, 7, 9, tzinfo=UTC)))
        order.status_history.append(OrderStatusHistory(OrderPortalStatus.APPROVED, datetime(2024, 7, 5)))

        assert order.current_status == OrderPortalStatus.SHIPPED
        assert order.current_status.display_name == "Shipped"

    def test_sort_key_mixes_naive_and_aware_dates(self):
        naive = Order(order_id=1, order_date=datetime(2024, 7, 4))
        aware = Order(order_id=2, order_date=datetime(2024, 7, 5, tzinfo=UTC))
        undated = Order(order_id=3)

        newest_first = sorted([naive, undated, aware], key=Order.sort_key, reverse=True)

        assert [o.order_id for o in newest_first] == [2, 1, 3]


def test_as_utc():
    assert as_utc(None) is None
    assert as_utc(datetime(2024, 1, 1)).tzinfo is UTC
    aware = datetime(2024, 1, 1, tzinfo=UTC)
    assert as_utc(aware) is aware


class TestProduct:
    def test_summary_line(self):
        assert ProductBuilder().build().to_summary_line() == "• Chai (ID: 1) - $18.00 - 39 in stock"

    def test_availability(self):
        assert ProductBuilder().build().is_available
        assert not ProductBuilder().out_of_stock().build().is_available
        assert not ProductBuilder().discontinued().build().is_available

    def test_description_skips_missing_parts(self):
        product = ProductBuilder().in_category(1, None).build()

        assert product.description == "10 boxes x 20 bags"


class TestCart:
    def test_find_line(self):
        cart = Cart(cart_id=1, lines=[CartLine(1, 1, "Chai", 2), CartLine(2, 39, "Chartreuse verte", 1)])

        assert cart.find_line_by_product(39).line_id == 2
        assert cart.find_line_by_name("CHARTREUSE").line_id == 2
        assert cart.find_line_by_name("  ") is None
        assert cart.find_line_by_product(14) is None

    def test_empty(self):
        assert Cart(cart_id=1).is_empty
