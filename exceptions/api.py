"""
Exceptions raised by the REST gateway layer.
"""

from .base import BookstoreException


class ApiRequestException(BookstoreException):
    """Raised when a call to the backend API fails (network, status or payload)."""

    def __init__(self, method: str, url: str, reason: str, status: int | None = None):
        message = f"{method} {url} failed: {reason}"
        details = {'method': method, 'url': url, 'reason': reason}
        if status is not None:
            message = f"{method} {url} failed with status {status}: {reason}"
            details['status'] = status

        super().__init__(message, details)
        self.method = method
        self.url = url
        self.reason = reason
        self.status = status
