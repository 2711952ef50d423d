"""
Exceptions for orders placed by staff on a customer's behalf.
"""

from .base import BookstoreException


class ManualOrderException(BookstoreException):
    """Base exception for staff-entered orders."""
    pass


class ManualOrderValidationException(ManualOrderException):
    """Raised when books, customer details or the payment method are missing (before any external call)."""

    def __init__(self, customer_id: int, missing_fields: list[str]):
        super().__init__(
            f"Manual order for customer {customer_id} is missing: {', '.join(missing_fields)}",
            details={'customer_id': customer_id, 'missing_fields': missing_fields}
        )
        self.customer_id = customer_id
        self.missing_fields = missing_fields


class ManualOrderFailedException(ManualOrderException):
    """Raised when the order service rejects or cannot be reached for a manual order."""

    def __init__(self, customer_id: int, reason: str):
        super().__init__(
            f"Manual order for customer {customer_id} could not be created: {reason}",
            details={'customer_id': customer_id, 'reason': reason}
        )
        self.customer_id = customer_id
        self.reason = reason
