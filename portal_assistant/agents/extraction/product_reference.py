"""
Product Reference Extractor

Extract a product id or product name from a free-text cart request.
Rules are tried in order against the raw message and the first success wins.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_BASE_STOPWORDS = frozenset({"the", "a", "an", "product", "item"})
_ALT_STOPWORDS = _BASE_STOPWORDS | {"to", "cart", "it", "my"}
_DESIRE_STOPWORDS = _BASE_STOPWORDS | {"please"}
_CART_ITEM_STOPWORDS = _BASE_STOPWORDS | {"my", "in", "cart", "quantity", "qty", "of", "for"}
_SUGGESTION_STOPWORDS = _BASE_STOPWORDS | {"please", "my", "cart", "something", "products", "items", "some"}

# Tokens that end the name during the token scan after "add"
_SCAN_STOP_TOKENS = frozenset({"to", "cart", "the", "in"})

# A capture of only one of these means "add to cart" or "add it to my cart"
_UNRESOLVED_NAMES = frozenset({"to", "it"})


@dataclass(frozen=True)
class ProductReference:
    """Product identity parsed from a message. Id wins over name."""

    product_id: int | None = None
    product_name: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.product_id is None and not self.product_name


class ProductReferenceExtractor:
    """Extract product references for the cart, cart-edit and suggestion flows."""

    PRODUCT_ID_PATTERN = re.compile(r"\b(?:product\s*(?:id)?|id)\s*[:#]?\s*(\d+)\b", re.IGNORECASE)

    # "add X to the cart", "add X cart", "add X"
    ADD_TO_CART_PATTERN = re.compile(
        r"\badd\s+(.+?)(?:\s+to\s+(?:the\s+|my\s+)?(?:shopping\s+)?cart\b|\s+(?:shopping\s+)?cart\b|[.!?,]|$)",
        re.IGNORECASE,
    )
    # "add 2 X to cart" with the quantity right after "add"
    ADD_QUANTITY_PATTERN = re.compile(r"\badd\s+(?:\d+\s+)?(.+?)(?:\s+to\s+cart\b|$)", re.IGNORECASE)
    DESIRE_PATTERN = re.compile(
        r"\b(?:i\s+want|i\s+need|get\s+me|give\s+me)\s+(.+?)"
        r"(?:\s+(?:in|to|into)\s+(?:the\s+|my\s+)?cart\b|\s+cart\b|[.!?,]|$)",
        re.IGNORECASE,
    )
    LEADING_QUANTITY_PATTERN = re.compile(
        r"^\d+\s*(?:x\b|×)?\s*(?:(?:units?|items?|products?)\b\s*)?(?:of\b)?\s*", re.IGNORECASE
    )
    ADD_WORD_PATTERN = re.compile(r"\badd\b", re.IGNORECASE)

    CART_ITEM_PATTERN = re.compile(
        r"\b(?:change|update|modify)\s+(?:the\s+)?(?:quantity\s+(?:of|for)\s+)?(.+?)"
        r"\s+(?:quantity\s+|qty\s+)?to\s+\d+",
        re.IGNORECASE,
    )
    SUGGESTION_PATTERNS = (
        re.compile(r"\b(?:suggest|recommend)\w*\b.*?\b(?:for|with|like)\s+(.+?)(?:[.!?,]|$)", re.IGNORECASE),
        re.compile(r"\bcomplements?\s+(?:to|for)\s+(.+?)(?:[.!?,]|$)", re.IGNORECASE),
        re.compile(r"\bmight\s+also\s+need\s+(?:with|for)\s+(.+?)(?:[.!?,]|$)", re.IGNORECASE),
    )

    def extract(self, message: str) -> ProductReference:
        """
        Extract a product reference from a cart request.

        Args:
            message: Raw user message (original casing)

        Returns:
            ProductReference; empty when nothing could be parsed
        """
        if (product_id := self.extract_product_id(message)) is not None:
            return ProductReference(product_id=product_id)

        if name := self.extract_product_name(message):
            return ProductReference(product_name=name)

        logger.debug(f"No product reference found in message: {message!r}")
        return ProductReference()

    def extract_product_id(self, message: str) -> int | None:
        if match := self.PRODUCT_ID_PATTERN.search(message):
            return int(match.group(1))
        return None

    def extract_product_name(self, message: str) -> str | None:
        """Try the name rules in order, returning the first non-empty name."""
        if match := self.ADD_TO_CART_PATTERN.search(message):
            if (name := self._clean(match.group(1), _BASE_STOPWORDS)) and self._is_resolved(name):
                return name

        if match := self.ADD_QUANTITY_PATTERN.search(message):
            if name := self._clean(match.group(1), _ALT_STOPWORDS):
                return name

        if (name := self._scan_after_add(message)) and self._is_resolved(name):
            return name

        if match := self.DESIRE_PATTERN.search(message):
            name = self._clean(match.group(1), _DESIRE_STOPWORDS)
            if name and len(name) > 1:
                return name

        return None

    def extract_cart_item(self, message: str) -> ProductReference:
        """Extract the cart line a quantity change refers to."""
        if (product_id := self.extract_product_id(message)) is not None:
            return ProductReference(product_id=product_id)

        if match := self.CART_ITEM_PATTERN.search(message):
            if name := self._clean(match.group(1), _CART_ITEM_STOPWORDS):
                return ProductReference(product_name=name)

        return self.extract(message)

    def extract_suggestion_target(self, message: str) -> ProductReference:
        """Extract the product suggestions should complement."""
        if (product_id := self.extract_product_id(message)) is not None:
            return ProductReference(product_id=product_id)

        for pattern in self.SUGGESTION_PATTERNS:
            if match := pattern.search(message):
                if name := self._clean(match.group(1), _SUGGESTION_STOPWORDS):
                    return ProductReference(product_name=name)

        return self.extract(message)

    def _scan_after_add(self, message: str) -> str | None:
        """Collect the words after "add" until a stop token or a bare number."""
        match = self.ADD_WORD_PATTERN.search(message)
        if not match:
            return None

        tokens = message[match.end() :].split()
        if tokens and tokens[0].isdigit():
            tokens = tokens[1:]

        words: list[str] = []
        for token in tokens:
            if token.lower() in _SCAN_STOP_TOKENS or token.isdigit():
                break
            words.append(token)

        name = " ".join(words).strip(" .,!?")
        return name or None

    @staticmethod
    def _is_resolved(name: str) -> bool:
        return name.lower() not in _UNRESOLVED_NAMES

    def _clean(self, candidate: str, stopwords: frozenset[str]) -> str | None:
        """Strip a leading quantity token and stopwords from a captured name."""
        candidate = self.LEADING_QUANTITY_PATTERN.sub("", candidate.strip())
        words = [word for word in candidate.split() if word.lower().strip(".,!?:;") not in stopwords]
        name = " ".join(words).strip(" .,!?:;\"'")
        return name or None


__all__ = ["ProductReference", "ProductReferenceExtractor"]
