"""
Search Products Use Case

Searches the catalog with vector embeddings first and falls back to the
relational catalog search.
"""

import logging
from dataclasses import dataclass, field

from portal_assistant.application.ports import ICatalogService, IProductEmbeddingService
from portal_assistant.domain.entities import Product

logger = logging.getLogger(__name__)


@dataclass
class SearchProductsRequest:
    """Request for product search"""

    query: str
    limit: int = 5


@dataclass
class SearchProductsResponse:
    """Response from product search"""

    products: list[Product] = field(default_factory=list)
    total_count: int = 0
    search_method: str = "database"  # 'semantic' or 'database'
    success: bool = True
    error: str | None = None

    @property
    def first(self) -> Product | None:
        return self.products[0] if self.products else None


class SearchProductsUseCase:
    """
    Use case for searching products.

    Single Responsibility: Only handles product search logic
    Dependency Inversion: Depends on ports, not implementations
    """

    def __init__(
        self,
        catalog_service: ICatalogService | None,
        embedding_service: IProductEmbeddingService | None = None,
    ):
        """
        Args:
            catalog_service: Relational catalog search (required for the fallback)
            embedding_service: Optional vector search
        """
        self.catalog_service = catalog_service
        self.embedding_service = embedding_service

    async def execute(self, request: SearchProductsRequest) -> SearchProductsResponse:
        """
        Execute product search.

        Args:
            request: Search request parameters

        Returns:
            Search response; success is False only when the catalog search itself failed
        """
        # Strategy 1: Semantic search if configured
        if self.embedding_service is not None:
            semantic_result = await self._semantic_search(request)
            if semantic_result is not None:
                logger.info(f"Semantic search returned {semantic_result.total_count} products")
                return semantic_result

        # Strategy 2: Catalog search (fallback)
        return await self._database_search(request)

    async def _semantic_search(self, request: SearchProductsRequest) -> SearchProductsResponse | None:
        """
        Returns:
            Search response, or None when the vector search failed or found nothing
        """
        try:
            products = await self.embedding_service.search_products(request.query, top_k=request.limit)
        except Exception as e:
            logger.warning(f"Embedding search failed for '{request.query}', using catalog search: {e}")
            return None

        if not products:
            logger.debug(f"Embedding search found nothing for '{request.query}'")
            return None

        return SearchProductsResponse(
            products=list(products),
            total_count=len(products),
            search_method="semantic",
        )

    async def _database_search(self, request: SearchProductsRequest) -> SearchProductsResponse:
        if self.catalog_service is None:
            return SearchProductsResponse(success=False, error="Catalog service unavailable")

        try:
            products = await self.catalog_service.search_products(request.query)
        except Exception as e:
            logger.error(f"Error in catalog search for '{request.query}': {e}", exc_info=True)
            return SearchProductsResponse(success=False, error=str(e))

        logger.info(f"Catalog search returned {len(products)} products for '{request.query}'")
        return SearchProductsResponse(
            products=list(products),
            total_count=len(products),
            search_method="database",
        )


__all__ = ["SearchProductsUseCase", "SearchProductsRequest", "SearchProductsResponse"]
