from enum import Enum


class SupplyOrderStatus(str, Enum):
    """
    Lifecycle of a supplier restock order.

    New orders always start as PENDING. Later transitions are driven by the
    supplier/back office, never by the core.
    """

    PENDING = "pending"
    ORDERED = "ordered"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
