"""
Action Extractor

Derives side-channel UI actions from the rendered reply. An action fires when
the reply carries the success marker together with its keywords; its data is
taken from the handler side effect of the same type recorded in this call.
"""

import logging

from portal_assistant.application.dto import ActionType, ChatAction, SideEffect

logger = logging.getLogger(__name__)

SUCCESS_MARKER = "✅"


class ActionExtractor:
    """Scans a reply for success markers."""

    # (action type, keywords that must all appear, toast message)
    RULES: tuple[tuple[ActionType, tuple[str, ...], str], ...] = (
        (ActionType.PRODUCT_ADDED, ("added", "cart"), "Product added to your cart"),
        (ActionType.ITEMS_REORDERED, ("reorder",), "Items from your previous order are in your cart"),
        (ActionType.CART_UPDATED, ("updated", "cart"), "Your cart was updated"),
    )

    def extract(self, reply: str, side_effects: list[SideEffect] | None = None) -> list[ChatAction]:
        """
        Args:
            reply: Final reply text
            side_effects: Side effects recorded by the handlers of this call

        Returns:
            Actions in rule order
        """
        if SUCCESS_MARKER not in reply:
            return []

        text = reply.lower()
        payloads = self._payloads_by_type(side_effects or [])
        actions = []
        for action_type, keywords, message in self.RULES:
            if all(keyword in text for keyword in keywords):
                actions.append(ChatAction(type=action_type.value, message=message, data=payloads.get(action_type)))

        if actions:
            logger.debug(f"Extracted actions: {[action.type for action in actions]}")
        return actions

    @staticmethod
    def _payloads_by_type(side_effects: list[SideEffect]) -> dict[ActionType, dict]:
        payloads: dict[ActionType, dict] = {}
        for effect in side_effects:
            # First side effect of a type wins
            payloads.setdefault(effect.type, dict(effect.payload))
        return payloads


__all__ = ["ActionExtractor", "SUCCESS_MARKER"]
