"""
Add To Cart Use Case

Adds a resolved product to the customer's cart. Shared by the add-to-cart
and reorder handlers.
"""

import logging
from dataclasses import dataclass

from portal_assistant.application.ports import ICartService, ICatalogService

logger = logging.getLogger(__name__)

CART_UNAVAILABLE = "Cart service unavailable"
CUSTOMER_UNAVAILABLE = "Customer id unavailable"
ADD_REJECTED = "Could not add product (it may be discontinued or out of stock)"


@dataclass
class AddToCartRequest:
    """Request for adding a product to a cart."""

    customer_id: str | None
    product_id: int
    quantity: int = 1


@dataclass
class AddToCartResponse:
    """Response from adding a product to a cart."""

    product_id: int
    quantity: int
    product_name: str
    description: str = ""
    success: bool = False
    error: str | None = None


class AddToCartUseCase:
    """
    Use Case: Add To Cart

    Responsibilities:
    - Look up the product for its display name (best effort)
    - Call the cart mutation
    - Report an explicit failure reason
    """

    def __init__(self, cart_service: ICartService | None, catalog_service: ICatalogService | None = None):
        self.cart_service = cart_service
        self.catalog_service = catalog_service

    async def execute(self, request: AddToCartRequest) -> AddToCartResponse:
        """
        Args:
            request: Customer, product and quantity

        Returns:
            AddToCartResponse; error is always set when success is False
        """
        response = AddToCartResponse(
            product_id=request.product_id,
            quantity=request.quantity,
            product_name=f"Product {request.product_id}",
        )

        if self.cart_service is None:
            response.error = CART_UNAVAILABLE
            return response

        if not request.customer_id:
            response.error = CUSTOMER_UNAVAILABLE
            return response

        await self._describe_product(response)

        try:
            added = await self.cart_service.add_to_cart(request.customer_id, request.product_id, request.quantity)
        except Exception as e:
            logger.error(f"Error adding product {request.product_id} for customer {request.customer_id}: {e}")
            response.error = str(e) or e.__class__.__name__
            return response

        if not added:
            logger.info(f"Cart rejected product {request.product_id} for customer {request.customer_id}")
            response.error = ADD_REJECTED
            return response

        logger.info(
            f"Added {request.quantity} x product {request.product_id} to cart of customer {request.customer_id}"
        )
        response.success = True
        return response

    async def _describe_product(self, response: AddToCartResponse) -> None:
        """Fill display name and description; a missing catalog is tolerated."""
        if self.catalog_service is None:
            return
        try:
            product = await self.catalog_service.get_product_by_id(response.product_id)
        except Exception as e:
            logger.warning(f"Catalog lookup failed for product {response.product_id}: {e}")
            return
        if product is not None:
            response.product_name = product.product_name
            response.description = product.description


__all__ = ["AddToCartUseCase", "AddToCartRequest", "AddToCartResponse"]
