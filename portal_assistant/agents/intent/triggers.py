# ============================================================================
# SCOPE: AGENTS LAYER
# Description: Keyword trigger predicates, one per assistant intent.
# ============================================================================
"""Intent Triggers.

Each trigger is an independent keyword predicate over the lower-cased message.
Triggers are not mutually exclusive; several may fire for one message.
"""

import re
from abc import ABC, abstractmethod
from enum import Enum


class Intent(str, Enum):
    """Assistant intents in handler scan order."""

    ADD_TO_CART = "add_to_cart"
    SEARCH = "search"
    ORDER_HISTORY = "order_history"
    REORDER = "reorder"
    CART_MODIFY = "cart_modify"
    SHIPPING_ESTIMATE = "shipping_estimate"
    SMART_SUGGEST = "smart_suggest"
    NONE = "none"


def _contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in text for keyword in keywords)


class IntentTrigger(ABC):
    """Abstract base for intent trigger predicates.

    Usage:
        class MyTrigger(IntentTrigger):
            intent = Intent.SEARCH

            def matches(self, text):
                return "search" in text
    """

    intent: Intent

    @abstractmethod
    def matches(self, text: str) -> bool:
        """Test the trigger.

        Args:
            text: User message, lower-cased.

        Returns:
            True when this intent fires.
        """
        ...


class AddToCartTrigger(IntentTrigger):
    intent = Intent.ADD_TO_CART

    CART_WORDS = ("cart", "shopping", "put", "place")
    DESIRE_PHRASES = ("i want", "get me", "i need", "give me")
    BROWSE_WORDS = ("search", "find", "list", "show")

    def matches(self, text: str) -> bool:
        if "add" in text and _contains_any(text, self.CART_WORDS):
            return True
        if ("want" in text or "get" in text) and "cart" in text:
            return True
        if text.strip().startswith("add ") and "search" not in text and "find" not in text:
            return True
        return _contains_any(text, self.DESIRE_PHRASES) and not _contains_any(text, self.BROWSE_WORDS)


class SearchTrigger(IntentTrigger):
    intent = Intent.SEARCH

    def matches(self, text: str) -> bool:
        return _contains_any(text, ("search", "find", "look for"))


class OrderHistoryTrigger(IntentTrigger):
    intent = Intent.ORDER_HISTORY

    # Word-start match so "reorder" alone does not count as "order"
    ORDER_WORD = re.compile(r"\border")

    def matches(self, text: str) -> bool:
        if not self.ORDER_WORD.search(text):
            return False
        return _contains_any(text, ("history", "show", "list", "my orders", "last"))


class ReorderTrigger(IntentTrigger):
    intent = Intent.REORDER

    def matches(self, text: str) -> bool:
        return "reorder" in text or ("order again" in text and "last" in text)


class CartModifyTrigger(IntentTrigger):
    intent = Intent.CART_MODIFY

    def matches(self, text: str) -> bool:
        return _contains_any(text, ("change", "update", "modify")) and _contains_any(
            text, ("quantity", "cart", "item")
        )


class ShippingEstimateTrigger(IntentTrigger):
    intent = Intent.SHIPPING_ESTIMATE

    def matches(self, text: str) -> bool:
        return _contains_any(text, ("shipping", "arrive", "delivery", "when will"))


class SmartSuggestTrigger(IntentTrigger):
    intent = Intent.SMART_SUGGEST

    def matches(self, text: str) -> bool:
        return _contains_any(text, ("suggest", "recommend", "might also need", "complement"))


__all__ = [
    "Intent",
    "IntentTrigger",
    "AddToCartTrigger",
    "SearchTrigger",
    "OrderHistoryTrigger",
    "ReorderTrigger",
    "CartModifyTrigger",
    "ShippingEstimateTrigger",
    "SmartSuggestTrigger",
]
