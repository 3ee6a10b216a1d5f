"""Intent detection for the portal assistant."""

from .detector import IntentDetector, classify_intent, create_default_detector, detect_intents
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

__all__ = [
    "Intent",
    "IntentTrigger",
    "IntentDetector",
    "create_default_detector",
    "detect_intents",
    "classify_intent",
    "AddToCartTrigger",
    "SearchTrigger",
    "OrderHistoryTrigger",
    "ReorderTrigger",
    "CartModifyTrigger",
    "ShippingEstimateTrigger",
    "SmartSuggestTrigger",
]
