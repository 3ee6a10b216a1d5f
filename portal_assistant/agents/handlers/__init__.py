# ============================================================================
# SCOPE: AGENTS LAYER
# Description: Intent action handlers in scan order.
# ============================================================================
"""
Action Handlers

One handler per intent. Each returns a reply fragment and an optional side effect.
"""

from .add_to_cart import AddToCartHandler
from .base import ActionHandler
from .cart_modify import CartModifyHandler
from .order_history import OrderHistoryHandler
from .reorder import ReorderHandler
from .search import SearchHandler
from .shipping_estimate import ShippingEstimateHandler
from .smart_suggest import SmartSuggestHandler

__all__ = [
    "ActionHandler",
    "AddToCartHandler",
    "SearchHandler",
    "OrderHistoryHandler",
    "ReorderHandler",
    "CartModifyHandler",
    "ShippingEstimateHandler",
    "SmartSuggestHandler",
]
