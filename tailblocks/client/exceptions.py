"""
Client Exceptions
"""

from typing import Optional

import httpx


class ClientError(Exception):
    """
    A backend call failed.

    Carries the backend's error message when there is one, so callers can
    show it to the user as-is.
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return self.message


def error_message(response: httpx.Response, fallback: str) -> str:
    """
    Extract the message from an error envelope.

    {"error": {"message": "..."}} is the API's format; {"message": "..."}
    is accepted as well.
    """
    try:
        body = response.json()
    except ValueError:
        return fallback
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if body.get("message"):
            return str(body["message"])
    return fallback


def raise_for_error(response: httpx.Response, fallback: str) -> None:
    """
    Raise ClientError for a non-2xx response.

    Raises:
        ClientError: With the backend message, or fallback
    """
    if response.is_success:
        return
    raise ClientError(error_message(response, fallback), status_code=response.status_code)
