"""
Application Exceptions

Every failure the API reports on purpose is a TailblocksException. The
global handler renders it as the error envelope with its own status code:

    {"error": {"code": "NOT_FOUND", "message": "...", "details": {}}}

Hierarchy:
==========
    TailblocksException                 500  INTERNAL_ERROR
       ├── AuthenticationError          401  AUTHENTICATION_ERROR
       ├── NotFoundError                404  NOT_FOUND
       │      ├── UserNotFoundError
       │      └── ComponentNotFoundError
       ├── ValidationError              400  VALIDATION_ERROR
       └── ConflictError                400  CONFLICT
              └── DuplicateResourceError

A uniqueness conflict (username or email taken) is a 400, not a 409:
clients show the message next to the form like any other input error.

Usage:
======
    from tailblocks.shared.core.exceptions import ComponentNotFoundError

    raise ComponentNotFoundError(component_id)
    # 404 "Component with id '...' not found"
"""

from typing import Any, Optional


class TailblocksException(Exception):
    """
    Base class for errors rendered into the API error envelope.

    Attributes:
        message: Text shown to the user as-is
        status_code: HTTP status of the response
        error_code: Stable machine-readable code
        details: Extra structured context (field errors and the like)
    """

    status_code: int = 500
    error_code: str = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        if error_code is not None:
            self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


class AuthenticationError(TailblocksException):
    """
    No usable identity for an operation that needs one.

    Missing or rejected bearer tokens, wrong login credentials, and
    favorites-only listings requested anonymously all end up here.
    """

    status_code = 401
    error_code = "AUTHENTICATION_ERROR"

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details=details)


class NotFoundError(TailblocksException):
    """Lookup by id found nothing. Message is built from the resource name."""

    status_code = 404
    error_code = "NOT_FOUND"

    def __init__(
        self,
        resource: str,
        resource_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        else:
            message = f"{resource} not found"
        super().__init__(message, details=details)


class UserNotFoundError(NotFoundError):
    def __init__(self, user_id: str) -> None:
        super().__init__("User", user_id)


class ComponentNotFoundError(NotFoundError):
    def __init__(self, component_id: str) -> None:
        super().__init__("Component", component_id)


class ValidationError(TailblocksException):
    """Rejected input. details["errors"] lists the offending fields."""

    status_code = 400
    error_code = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details=details)


class ConflictError(TailblocksException):
    status_code = 400
    error_code = "CONFLICT"

    def __init__(
        self,
        message: str = "Resource conflict",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details=details)


class DuplicateResourceError(ConflictError):
    """A unique field (username, email) is already taken."""

    def __init__(
        self,
        message: str = "Resource already exists",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details=details)
