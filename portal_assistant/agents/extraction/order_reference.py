"""
Order Reference Extractor

Extract order ids, time windows and result limits from order related messages.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

DEFAULT_LIMIT = 5
MAX_LIMIT = 20


@dataclass(frozen=True)
class OrderReference:
    """
    Order selection parsed from a message.

    Resolution order is explicit id, then time window, then the most recent order.
    """

    order_id: int | None = None
    time_window_days: int | None = None


class OrderReferenceExtractor:
    """Extract order references from user messages."""

    ORDER_ID_PATTERN = re.compile(r"order\s*(#|id\s*)?(\d+)", re.IGNORECASE)
    DAYS_PATTERN = re.compile(r"\b(?:last|past)\s+(\d+)\s+days?\b", re.IGNORECASE)
    NUMBER_PATTERN = re.compile(r"\d+")

    # Longest phrases first so "last 2 months" is not read as "last month"
    TIME_WINDOW_PHRASES = (
        (re.compile(r"\b(?:last|past)\s+(?:3|three)\s+months\b", re.IGNORECASE), 90),
        (re.compile(r"\b(?:last|past)\s+(?:2|two)\s+months\b", re.IGNORECASE), 60),
        (re.compile(r"\b(?:last|past)\s+month\b", re.IGNORECASE), 30),
        (re.compile(r"\b(?:last|past)\s+week\b", re.IGNORECASE), 7),
    )

    def extract(self, message: str) -> OrderReference:
        return OrderReference(
            order_id=self.extract_order_id(message),
            time_window_days=self.extract_time_window_days(message),
        )

    def extract_order_id(self, message: str) -> int | None:
        if match := self.ORDER_ID_PATTERN.search(message):
            return int(match.group(2))
        return None

    def extract_time_window_days(self, message: str) -> int | None:
        """
        Map "last month", "past week", "last 3 months" or "last N days" to a day count.

        Returns:
            Number of days, or None when the message names no window
        """
        for pattern, days in self.TIME_WINDOW_PHRASES:
            if pattern.search(message):
                return days

        if match := self.DAYS_PATTERN.search(message):
            return int(match.group(1))

        return None

    def extract_limit(self, message: str, default: int = DEFAULT_LIMIT, maximum: int = MAX_LIMIT) -> int:
        """First integer in the message, clamped to 1..maximum."""
        match = self.NUMBER_PATTERN.search(message)
        limit = int(match.group()) if match else default
        return max(1, min(limit, maximum))


__all__ = ["OrderReference", "OrderReferenceExtractor", "DEFAULT_LIMIT", "MAX_LIMIT"]
