"""
Catalog-related exceptions.
"""

from .base import BookstoreException


class CatalogException(BookstoreException):
    """Base exception for catalog-related errors."""
    pass


class CatalogFetchFailedException(CatalogException):
    """Raised when the catalog snapshot could not be fetched from the inventory service."""

    def __init__(self, reason: str):
        super().__init__(
            f"Failed to fetch catalog: {reason}",
            details={'reason': reason}
        )
        self.reason = reason

