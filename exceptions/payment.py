"""
Payment-related exceptions.
"""

from .base import BookstoreException


class PaymentException(BookstoreException):
    """Base exception for payment-related errors."""
    pass


class PaymentHistoryFetchFailedException(PaymentException):
    """Raised when a customer's payment records could not be fetched."""

    def __init__(self, customer_id: int, reason: str):
        super().__init__(
            f"Failed to fetch payments for customer {customer_id}: {reason}",
            details={'customer_id': customer_id, 'reason': reason}
        )
        self.customer_id = customer_id
        self.reason = reason
