"""
Cart-related exceptions.
"""

from .base import BookstoreException


class CartException(BookstoreException):
    """Base exception for cart-related errors."""
    pass


class CartItemNotFoundException(CartException):
    """Raised when a line item is not in the cart."""

    def __init__(self, item_id: str):
        super().__init__(
            f"Cart item {item_id} not found",
            details={'item_id': item_id}
        )
        self.item_id = item_id
