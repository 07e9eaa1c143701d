"""
CustomerDesk Backend — Custom Exception Hierarchy
===================================================

What:  Application-specific exceptions for the error scenarios the API and
       the client controllers distinguish.
How:   Each exception carries a human summary (`message`) and an optional
       raw detail string. Global exception handlers (registered in main.py)
       turn the server-side ones into the `{error, details}` JSON envelope.
Who:   Raised by services and the client package; caught by global handlers
       or by the page controllers.

Exception Hierarchy:
    CustomerDeskError (base)
    ├── ValidationError          → 400 Bad Request (client can fix)
    ├── NotFoundError            → 404 Not Found
    ├── DatabaseError            → 500 Internal Server Error
    ├── ApiRequestError          → client side: an API call failed
    └── InvalidTransitionError   → client side: action not allowed in this state
"""

from typing import Optional


class CustomerDeskError(Exception):
    """
    Base exception for all CustomerDesk application errors.

    Attributes:
        message:  Human-readable summary, returned as `error` in API responses
        details:  Raw underlying message, returned as `details` when present
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        details: Optional[str] = None,
    ):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def to_envelope(self) -> dict:
        """Builds the `{error, details}` body; `details` is omitted when unset."""
        body = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(CustomerDeskError):
    """
    Raised when a request body fails schema validation.

    HTTP: 400 Bad Request. Never reaches the store layer.
    """

    def __init__(
        self,
        message: str = "Invalid customer data",
        details: Optional[str] = None,
    ):
        super().__init__(message=message, details=details)


class NotFoundError(CustomerDeskError):
    """
    Raised when an identifier does not resolve to a stored record.

    HTTP: 404 Not Found, body exactly `{"error": "<Resource> not found"}`.
    Malformed identifiers land here too: they cannot address any record.
    """

    def __init__(self, resource: str = "Customer", resource_id: Optional[str] = None):
        super().__init__(message=f"{resource} not found")
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(CustomerDeskError):
    """
    Raised when a store operation fails.

    HTTP: 500 Internal Server Error. `message` names the failed operation
    ("Failed to create customer"); `details` is the underlying error text.
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        details: Optional[str] = None,
    ):
        super().__init__(message=message, details=details)


class ApiRequestError(CustomerDeskError):
    """
    Raised by the API client when a call does not succeed.

    `status_code` is None when the request never got a response
    (connection refused, timeout).
    """

    def __init__(
        self,
        message: str = "Request failed",
        status_code: Optional[int] = None,
        details: Optional[str] = None,
    ):
        super().__init__(message=message, details=details)
        self.status_code = status_code

    @property
    def not_found(self) -> bool:
        return self.status_code == 404


class InvalidTransitionError(CustomerDeskError):
    """Raised when a page controller action is not allowed in its current state."""

    def __init__(self, action: str, state: str):
        super().__init__(message=f"Cannot {action} while {state}")
        self.action = action
        self.state = state
