"""
Custom exceptions for the contacts service domain.

These exceptions represent domain-level errors and are independent
of infrastructure concerns (HTTP, database, etc.).
"""

from typing import Iterable, Optional

INVALID_CONTACT_MESSAGE = "Invalid contact!"


class ContactsServiceException(Exception):
    """Base exception for all contacts service errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ArgumentError(ContactsServiceException, ValueError):
    """Raised when a lookup key or search term is missing or blank."""

    def __init__(self, argument: str, message: str):
        super().__init__(message=message, details={"argument": argument})
        self.argument = argument


class InvalidDataError(ContactsServiceException):
    """Raised when a contact payload fails validation."""

    def __init__(self, violations: Optional[Iterable[str]] = None):
        super().__init__(
            message=INVALID_CONTACT_MESSAGE,
            details={"violations": sorted(violations or [])},
        )


class NotFoundError(ContactsServiceException, LookupError):
    """Raised when a read, search, or list operation matches no contact."""

    def __init__(self, message: str, query: Optional[str] = None):
        super().__init__(message=message, details={"query": query})
        self.query = query


class RepositoryException(ContactsServiceException):
    """Raised when the underlying store fails an operation."""

    def __init__(self, operation: str, reason: Optional[str] = None):
        message = f"Repository {operation} failed"
        if reason:
            message += f": {reason}"
        super().__init__(
            message=message, details={"operation": operation, "reason": reason}
        )
        self.operation = operation
