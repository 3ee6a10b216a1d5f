"""
Assistant Use Cases
"""

from .add_to_cart import AddToCartRequest, AddToCartResponse, AddToCartUseCase
from .search_products import SearchProductsRequest, SearchProductsResponse, SearchProductsUseCase

__all__ = [
    "AddToCartUseCase",
    "AddToCartRequest",
    "AddToCartResponse",
    "SearchProductsUseCase",
    "SearchProductsRequest",
    "SearchProductsResponse",
]
