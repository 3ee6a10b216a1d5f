"""
Search Term Extractor
"""

from __future__ import annotations

import re


class SearchTermExtractor:
    """Extract the catalog search term from "search/find/look for" requests, inflected verbs included."""

    QUOTED_PATTERN = re.compile(
        r"\b(?:search\w*|find\w*|look(?:ing)?\s+for)\b.*?(?:\"([^\"]+)\"|“([^”]+)”|(?<!\w)'([^']+)'(?!\w))",
        re.IGNORECASE,
    )
    TAIL_PATTERN = re.compile(r"\b(?:search\w*|find\w*|look(?:ing)?\s+for)\b\s*(.*)$", re.IGNORECASE)
    LEADING_FILLER_PATTERN = re.compile(r"^(?:(?:for|me|some|any)(?:\s+|$))+", re.IGNORECASE)
    TRAILING_FILLER_PATTERN = re.compile(r"(?:\s+please)+$", re.IGNORECASE)

    def extract(self, message: str) -> str | None:
        """
        Args:
            message: Raw user message

        Returns:
            Search term, or None when the request names nothing to search for
        """
        if match := self.QUOTED_PATTERN.search(message):
            term = next(group for group in match.groups() if group is not None).strip()
            if term:
                return term

        if match := self.TAIL_PATTERN.search(message):
            term = self.LEADING_FILLER_PATTERN.sub("", match.group(1).strip())
            term = term.strip().rstrip(".!?,;:").strip()
            term = self.TRAILING_FILLER_PATTERN.sub("", term)
            if term:
                return term

        return None


__all__ = ["SearchTermExtractor"]
