"""
API Handlers

Route handlers for the Tailblocks API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

All business logic is delegated to the service layer.
"""

from tailblocks.api.handlers import (
    auth_handler,
    component_handler,
    health_handler,
    user_handler,
)

__all__ = [
    "auth_handler",
    "component_handler",
    "health_handler",
    "user_handler",
]
