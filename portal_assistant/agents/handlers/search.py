"""
Search Handler
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from portal_assistant.agents.extraction import SearchTermExtractor
from portal_assistant.agents.intent import Intent
from portal_assistant.application.dto import HandlerOutcome
from portal_assistant.application.use_cases import SearchProductsRequest, SearchProductsUseCase
from portal_assistant.core.exceptions import CollaboratorUnavailableException

from .base import ActionHandler

if TYPE_CHECKING:
    from portal_assistant.agents.context import ChatContext


class SearchHandler(ActionHandler):
    """Lists catalog products matching the requested term."""

    intent = Intent.SEARCH
    action_description = "search the catalog"

    def __init__(
        self,
        search_products: SearchProductsUseCase,
        result_limit: int = 5,
        term_extractor: SearchTermExtractor | None = None,
    ):
        self.search_products = search_products
        self.result_limit = result_limit
        self.term_extractor = term_extractor or SearchTermExtractor()

    async def handle(self, context: ChatContext) -> HandlerOutcome:
        if self.search_products.catalog_service is None and self.search_products.embedding_service is None:
            raise CollaboratorUnavailableException("catalog service")

        term = self.term_extractor.extract(context.message)
        if not term:
            return HandlerOutcome('🔍 What would you like me to search for? Try "search for chai".')

        response = await self.search_products.execute(
            SearchProductsRequest(query=term, limit=self.result_limit)
        )
        if not response.success:
            return HandlerOutcome(self.failure_fragment())

        if not response.products:
            return HandlerOutcome(f'🔍 No products found matching "{term}".')

        lines = [f'🔍 Found {response.total_count} product(s) matching "{term}":']
        lines.extend(product.to_summary_line() for product in response.products[: self.result_limit])
        return HandlerOutcome("\n".join(lines))
