"""
Unit tests for the trigger predicates and the ordered intent detector.
"""

import pytest

from portal_assistant.agents.intent import (
    AddToCartTrigger,
    Intent,
    IntentDetector,
    OrderHistoryTrigger,
    SearchTrigger,
    classify_intent,
    create_default_detector,
    detect_intents,
)


@pytest.fixture
def detector() -> IntentDetector:
    return create_default_detector()


class TestAddToCartTrigger:
    @pytest.mark.parametrize(
        "text",
        [
            "add chai to my cart",
            "please add tofu to the shopping list",
            "put it in, add chang",
            "i want chai in my cart",
            "get tofu into the cart",
            "add chai",
            "i need 3 boxes of chai",
            "give me tofu",
        ],
    )
    def test_fires(self, text):
        assert AddToCartTrigger().matches(text)

    @pytest.mark.parametrize(
        "text",
        [
            "add search results",  # starts with "add " but mentions search
            "i want to find chai",
            "give me a list of orders",
            "hello",
        ],
    )
    def test_does_not_fire(self, text):
        assert not AddToCartTrigger().matches(text)


class TestOrderHistoryTrigger:
    def test_needs_order_and_qualifier(self):
        trigger = OrderHistoryTrigger()

        assert trigger.matches("show my last 2 orders")
        assert trigger.matches("order history")
        assert not trigger.matches("i placed an order")

    def test_reorder_alone_is_not_an_order_word(self):
        assert not OrderHistoryTrigger().matches("reorder last month")


class TestIntentDetector:
    @pytest.mark.parametrize(
        "message,expected",
        [
            ("search for chai", [Intent.SEARCH]),
            ("Add chai to cart", [Intent.ADD_TO_CART]),
            ("show my last 2 orders", [Intent.ORDER_HISTORY]),
            ("reorder last month", [Intent.REORDER]),
            ("order again like last time", [Intent.ORDER_HISTORY, Intent.REORDER]),
            ("change chai quantity to 5", [Intent.CART_MODIFY]),
            ("when will my order arrive?", [Intent.SHIPPING_ESTIMATE]),
            ("what do you recommend?", [Intent.SMART_SUGGEST]),
            ("hello there", []),
        ],
    )
    def test_detect_all(self, detector, message, expected):
        assert detector.detect_all(message) == expected

    def test_overlapping_triggers_keep_scan_order(self, detector):
        intents = detector.detect_all("search for chai and add it to my cart")

        assert intents == [Intent.ADD_TO_CART, Intent.SEARCH]

    def test_reorder_with_order_history_words(self, detector):
        intents = detector.detect_all("show my last order and reorder it")

        assert intents == [Intent.ORDER_HISTORY, Intent.REORDER]

    def test_classify_returns_first_or_none(self, detector):
        assert detector.classify("find tofu and suggest something") == Intent.SEARCH
        assert detector.classify("good morning") == Intent.NONE

    def test_custom_registration_order(self):
        detector = IntentDetector().add_trigger(SearchTrigger()).add_trigger(AddToCartTrigger())

        assert detector.list_intents() == [Intent.SEARCH, Intent.ADD_TO_CART]
        assert detector.detect_all("search for chai and add it to my cart") == [Intent.SEARCH, Intent.ADD_TO_CART]

    def test_module_helpers(self):
        assert detect_intents("update my cart") == [Intent.CART_MODIFY]
        assert classify_intent("delivery status") == Intent.SHIPPING_ESTIMATE
