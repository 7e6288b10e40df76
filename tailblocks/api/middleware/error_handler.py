"""
Error Handler Middleware

Turns every exception that escapes a route into the error envelope:

    {"error": {"code": "...", "message": "...", "details": {...}}}

Mapping:
========
    TailblocksException          → its own status_code / error_code
    RequestValidationError       → 400 VALIDATION_ERROR
    pydantic ValidationError     → 400 VALIDATION_ERROR
    anything else                → 500 INTERNAL_ERROR, str(exc) as message

Validation failures list each offending field under details.errors, with
FastAPI's location prefix removed ("body.email" becomes "email"). With a
single failing field its message doubles as the top-level message, which
is what the client shows.
"""

from typing import Any, Iterable

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from tailblocks.shared.core.exceptions import TailblocksException, ValidationError
from tailblocks.shared.core.logging import logger

# Location prefixes FastAPI adds in front of the field name
_LOCATION_PREFIXES = {"body", "query", "path", "header"}


def _field_errors(errors: Iterable[dict[str, Any]]) -> list[dict[str, str]]:
    """Flatten pydantic error dicts into {field, message} pairs."""
    flattened = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        flattened.append(
            {
                "field": ".".join(loc) or "body",
                "message": error.get("msg", "Invalid value"),
            }
        )
    return flattened


def _validation_response(errors: list[dict[str, str]]) -> JSONResponse:
    message = errors[0]["message"] if len(errors) == 1 else "Request validation failed"
    exc = ValidationError(message, details={"errors": errors})
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the envelope-producing handlers on app."""

    @app.exception_handler(TailblocksException)
    async def tailblocks_exception_handler(
        request: Request,
        exc: TailblocksException,
    ) -> JSONResponse:
        logger.warning(
            "Request rejected",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Bad body, constraint violation or bad query value (e.g. sort=random)."""
        errors = _field_errors(exc.errors())
        logger.warning("Validation error", errors=errors, path=request.url.path)
        return _validation_response(errors)

    @app.exception_handler(PydanticValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: PydanticValidationError,
    ) -> JSONResponse:
        errors = _field_errors(exc.errors())
        logger.warning("Validation error", errors=errors, path=request.url.path)
        return _validation_response(errors)

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        logger.error(
            "Unexpected error",
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        envelope = TailblocksException(str(exc) or "An unexpected error occurred")
        return JSONResponse(status_code=envelope.status_code, content=envelope.to_dict())
