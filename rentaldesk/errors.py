# rentaldesk/errors.py
"""
Error taxonomy for the rental core.
Every error is local and synchronous: raised to the immediate caller, never
retried. The API layer maps status_code straight onto the HTTP response.
"""

from typing import Any, Optional


class RentalDeskError(Exception):
    """Base class for all errors raised by the repository and services."""

    status_code = 500

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NotFoundError(RentalDeskError):
    """Raised when a vehicle or booking id does not exist."""

    status_code = 404

    def __init__(self, resource: str, resource_id: Any):
        super().__init__(
            f"{resource} not found",
            details={"resource": resource, "id": resource_id},
        )
        self.resource = resource
        self.resource_id = resource_id


class ValidationError(RentalDeskError):
    """Raised before mutating state when a field value breaks an invariant."""

    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, details={"field": field} if field else None)
        self.field = field


class InvalidDateError(RentalDeskError):
    """Raised when a date string cannot be parsed as YYYY-MM-DD."""

    status_code = 400

    def __init__(self, value: Any, field: Optional[str] = None):
        details = {"value": str(value)}
        if field:
            details["field"] = field
        super().__init__(f"Invalid date: {value!r}", details=details)
        self.value = value
        self.field = field
