"""Error-to-HTTP mapping for the FastAPI app.

Classified API errors become 0x-style JSON bodies. Internal errors never
expose their message to clients; it is logged instead.
"""

import logging
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from swapquote.errors import (
    APIBaseError,
    BadRequestError,
    InternalServerError,
    RevertAPIError,
    ValidationError,
)
from swapquote.quoting.base import RevertError

logger = logging.getLogger(__name__)


def is_api_error(error: Any) -> bool:
    """Check whether the error already carries an HTTP mapping."""
    return isinstance(error, APIBaseError)


def is_revert_error(error: Any) -> bool:
    """Check whether the error signals an on-chain revert."""
    return isinstance(error, RevertError)


def error_body(error: APIBaseError) -> dict:
    """Build the response body for a classified error."""
    if isinstance(error, BadRequestError):
        body: dict[str, Any] = {"code": int(error.general_error_code), "reason": error.reason}
        if isinstance(error, ValidationError):
            body["validationErrors"] = [item.to_dict() for item in error.validation_errors]
        elif isinstance(error, RevertAPIError):
            body["values"] = error.values
        return body
    return {"reason": HTTPStatus(error.status_code).phrase}


def register_error_handlers(app: FastAPI) -> None:
    """Register the API error handlers on the application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(APIBaseError)
    async def handle_api_error(_request: Request, exc: APIBaseError) -> JSONResponse:
        if isinstance(exc, InternalServerError):
            logger.error("Internal server error: %s", exc.message)
        else:
            logger.debug("API error %d: %s", exc.status_code, exc.message)
        return JSONResponse(status_code=exc.status_code, content=error_body(exc))

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return JSONResponse(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            content={"reason": HTTPStatus.INTERNAL_SERVER_ERROR.phrase},
        )
