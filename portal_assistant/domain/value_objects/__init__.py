from .order_status import OrderPortalStatus

__all__ = ["OrderPortalStatus"]
