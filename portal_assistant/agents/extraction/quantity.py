"""
Quantity Extractor

Returns None when no quantity is stated; the default of 1 belongs to the caller.
"""

from __future__ import annotations

import re


class QuantityExtractor:
    """Extract item quantities from cart messages."""

    # Ordered, first match wins
    QUANTITY_PATTERNS = (
        re.compile(r"\b(\d+)\s*(?:x\b|×|(?:products?|items?|units?)\b)", re.IGNORECASE),
        re.compile(r"\b(\d+)\s+of\b", re.IGNORECASE),
        re.compile(r"\badd\s+(\d+)\b", re.IGNORECASE),
        re.compile(r"\b(?:i\s+want|i\s+need|get\s+me|give\s+me)\s+(\d+)\b", re.IGNORECASE),
    )

    TARGET_PATTERNS = (
        re.compile(r"\bto\s+(\d+)\b", re.IGNORECASE),
        re.compile(r"\b(?:quantity|qty)\s*(?:of|=|:)?\s*(\d+)\b", re.IGNORECASE),
    )

    def extract(self, message: str) -> int | None:
        """
        Extract the quantity to add.

        Handles "2 x chai", "3 items of tofu", "2 of chai", "add 3 chai", "i want 4 chai".
        """
        return self._first_match(self.QUANTITY_PATTERNS, message)

    def extract_target(self, message: str) -> int | None:
        """Extract the new quantity of a cart line ("change chai to 5", "qty: 5")."""
        if (quantity := self._first_match(self.TARGET_PATTERNS, message)) is not None:
            return quantity
        return self.extract(message)

    @staticmethod
    def _first_match(patterns: tuple[re.Pattern[str], ...], message: str) -> int | None:
        for pattern in patterns:
            if match := pattern.search(message):
                return int(match.group(1))
        return None


__all__ = ["QuantityExtractor"]
