# ============================================================================
# SCOPE: AGENTS LAYER
# Description: Ordered, non-exclusive intent detection.
# ============================================================================
"""Intent Detector.

Evaluates every registered trigger in registration order and reports all
matches, so one message can fire several handlers.

Usage:
    detector = create_default_detector()
    intents = detector.detect_all("search for chai and add it to my cart")
    # [Intent.ADD_TO_CART, Intent.SEARCH]
"""

import logging

from .triggers import (
    AddToCartTrigger,
    CartModifyTrigger,
    Intent,
    IntentTrigger,
    OrderHistoryTrigger,
    ReorderTrigger,
    SearchTrigger,
    ShippingEstimateTrigger,
    SmartSuggestTrigger,
)

logger = logging.getLogger(__name__)


class IntentDetector:
    """Runs trigger predicates in a fixed order."""

    def __init__(self) -> None:
        self._triggers: list[IntentTrigger] = []

    def add_trigger(self, trigger: IntentTrigger) -> "IntentDetector":
        """Append a trigger; scan order is registration order.

        Returns:
            Self for method chaining.
        """
        self._triggers.append(trigger)
        return self

    def detect_all(self, message: str) -> list[Intent]:
        """Return every matching intent in scan order."""
        text = message.lower()
        intents = [trigger.intent for trigger in self._triggers if trigger.matches(text)]
        if intents:
            logger.debug(f"Intents detected: {[intent.value for intent in intents]}")
        return intents

    def classify(self, message: str) -> Intent:
        """Return the first matching intent, or Intent.NONE."""
        intents = self.detect_all(message)
        return intents[0] if intents else Intent.NONE

    def list_intents(self) -> list[Intent]:
        return [trigger.intent for trigger in self._triggers]


def create_default_detector() -> IntentDetector:
    """Create a detector with the standard triggers in handler scan order."""
    return (
        IntentDetector()
        .add_trigger(AddToCartTrigger())
        .add_trigger(SearchTrigger())
        .add_trigger(OrderHistoryTrigger())
        .add_trigger(ReorderTrigger())
        .add_trigger(CartModifyTrigger())
        .add_trigger(ShippingEstimateTrigger())
        .add_trigger(SmartSuggestTrigger())
    )


def detect_intents(message: str) -> list[Intent]:
    return create_default_detector().detect_all(message)


def classify_intent(message: str) -> Intent:
    return create_default_detector().classify(message)


__all__ = ["IntentDetector", "create_default_detector", "detect_intents", "classify_intent"]
