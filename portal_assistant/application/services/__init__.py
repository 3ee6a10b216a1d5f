from .customer_resolver import CustomerResolver

__all__ = ["CustomerResolver"]
