"""
Customer Service — Custom Exception Hierarchy
===============================================

What:  Application-specific exceptions for the failure cases the API surfaces.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return JSON error responses with the right HTTP status code.
Who:   Raised by the repository, photo storage and routes; caught by handlers.

Exception Hierarchy:
    CustomerServiceError (base)
    ├── CustomerValidationError  → 400 Bad Request (structured field errors)
    ├── FileStorageError         → 500 Internal Server Error
    └── DatabaseError            → 500 Internal Server Error

Not-found is deliberately absent: a missing customer is a normal outcome
(the repository returns None) and the routes answer it with an empty 404.
"""

from typing import Any, Dict, List, NamedTuple, Optional


class FieldError(NamedTuple):
    """A single invalid field: the API field name and what is wrong with it."""

    field: str
    message: str

    def describe(self) -> str:
        return f"The field {self.field} {self.message}"


class CustomerServiceError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class CustomerValidationError(CustomerServiceError):
    """
    Raised when a customer payload fails field-presence validation.

    What:    Carries one FieldError per invalid field.
    When:    POST /api/customers with a missing name, age or salary.
    HTTP:    400 Bad Request

    Example response:
        {
            "errors": ["The field firstName must not be empty"],
            "timestamp": "2024-01-15T12:00:00Z",
            "status": 400
        }
    """

    def __init__(
        self,
        field_errors: List[FieldError],
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["fields"] = [e.field for e in field_errors]
        super().__init__(message="Customer validation failed", context=ctx)
        self.field_errors = field_errors

    @property
    def messages(self) -> List[str]:
        return [e.describe() for e in self.field_errors]


class FileStorageError(CustomerServiceError):
    """
    Raised when a photo cannot be written to the uploads directory.

    When:    Disk full, permission denied, path escaping the uploads root.
    HTTP:    500 Internal Server Error

    The customer record is never saved after this error is raised.
    """

    def __init__(
        self,
        message: str = "File storage operation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(CustomerServiceError):
    """
    Raised when a MongoDB operation fails.

    When:    Server unreachable, selection timeout, write error.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic; the driver error is
    logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
