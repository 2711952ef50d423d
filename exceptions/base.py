"""
Root of the bookstore exception hierarchy.
"""


class BookstoreException(Exception):
    """
    Base for every domain error raised by the core.

    `details` carries the ids and fields involved so that log lines and
    error mapping don't have to parse the message.
    """

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        name = type(self).__name__
        if not self.details:
            return f"{name}('{self.message}')"
        context = ', '.join(f"{key}={value}" for key, value in self.details.items())
        return f"{name}('{self.message}', {context})"
