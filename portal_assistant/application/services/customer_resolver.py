"""
Customer Resolver

Maps an authenticated user id to the commerce customer id.
"""

import logging

from portal_assistant.application.ports import ICustomerMapping, ITenantContext

logger = logging.getLogger(__name__)


class CustomerResolver:
    """
    Resolves customer ids from the session tenant context first and falls
    back to the direct user to customer mapping.
    """

    def __init__(
        self,
        tenant_context: ITenantContext | None = None,
        customer_mapping: ICustomerMapping | None = None,
    ):
        self.tenant_context = tenant_context
        self.customer_mapping = customer_mapping

    async def resolve_customer_id(self, user_id: str | None) -> str | None:
        """
        Args:
            user_id: Authenticated principal id

        Returns:
            Customer id, or None when neither source knows the user
        """
        if not user_id:
            return None

        if self.tenant_context is not None:
            try:
                customer_id = await self.tenant_context.get_current_customer_id(user_id)
                if customer_id:
                    return customer_id
            except Exception as e:
                logger.warning(f"Tenant context lookup failed for user {user_id}: {e}")

        if self.customer_mapping is not None:
            try:
                customer_id = await self.customer_mapping.get_customer_id(user_id)
                if customer_id:
                    return customer_id
            except Exception as e:
                logger.warning(f"Customer mapping lookup failed for user {user_id}: {e}")

        logger.info(f"No customer id mapped for user {user_id}")
        return None


__all__ = ["CustomerResolver"]
