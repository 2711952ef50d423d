"""
Checkout-related exceptions.

PaymentCreationFailedException and OrderCreationFailedException are shown to
the customer as the same failure message; they stay distinct for diagnostics.
"""

from .base import BookstoreException


class CheckoutException(BookstoreException):
    """Base exception for checkout errors."""
    pass


class CheckoutValidationException(CheckoutException):
    """Raised when required checkout fields are missing (before any external call)."""

    def __init__(self, customer_id: int, missing_fields: list[str]):
        super().__init__(
            f"Checkout for customer {customer_id} is missing: {', '.join(missing_fields)}",
            details={'customer_id': customer_id, 'missing_fields': missing_fields}
        )
        self.customer_id = customer_id
        self.missing_fields = missing_fields


class CheckoutInProgressException(CheckoutException):
    """Raised when a checkout is submitted while another attempt is still running."""

    def __init__(self, customer_id: int):
        super().__init__(
            f"Checkout already in progress for customer {customer_id}",
            details={'customer_id': customer_id}
        )
        self.customer_id = customer_id


class PaymentCreationFailedException(CheckoutException):
    """Raised when the payment record could not be created (step A)."""

    def __init__(self, transaction_code: str, reason: str):
        super().__init__(
            f"Payment record {transaction_code} could not be created: {reason}",
            details={'transaction_code': transaction_code, 'reason': reason}
        )
        self.transaction_code = transaction_code
        self.reason = reason


class OrderCreationFailedException(CheckoutException):
    """
    Raised when the order could not be created (step B).

    The payment record created in step A is left in place.
    """

    def __init__(self, payment_id: int | str, reason: str):
        super().__init__(
            f"Order for payment {payment_id} could not be created: {reason}",
            details={'payment_id': payment_id, 'reason': reason}
        )
        self.payment_id = payment_id
        self.reason = reason
