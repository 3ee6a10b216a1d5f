"""
Order Status Value Object

Portal lifecycle states of an order as recorded in its status history.
"""

from enum import Enum


class OrderPortalStatus(str, Enum):
    """
    Order lifecycle states.

    An order without any status history is treated as SUBMITTED.
    """

    SUBMITTED = "submitted"
    PENDING_APPROVAL = "pending_approval"
    APPROVED = "approved"
    PICKING = "picking"
    SHIPPED = "shipped"
    CANCELLED = "cancelled"
    REJECTED = "rejected"

    @property
    def display_name(self) -> str:
        """Human readable label used in chat replies."""
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    OrderPortalStatus.SUBMITTED: "Submitted",
    OrderPortalStatus.PENDING_APPROVAL: "Pending Approval",
    OrderPortalStatus.APPROVED: "Approved",
    OrderPortalStatus.PICKING: "Picking",
    OrderPortalStatus.SHIPPED: "Shipped",
    OrderPortalStatus.CANCELLED: "Cancelled",
    OrderPortalStatus.REJECTED: "Rejected",
}
