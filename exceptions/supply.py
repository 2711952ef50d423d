"""
Supply order exceptions.
"""

from .base import BookstoreException


class SupplyOrderException(BookstoreException):
    """Base exception for supplier restock errors."""
    pass


class SupplyOrderValidationException(SupplyOrderException):
    """Raised when a supply order draft lacks supplier, delivery date or items."""

    def __init__(self, missing_fields: list[str]):
        super().__init__(
            f"Supply order is missing: {', '.join(missing_fields)}",
            details={'missing_fields': missing_fields}
        )
        self.missing_fields = missing_fields
