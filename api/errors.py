"""
API Error Handling

Maps Merkle core exceptions onto HTTP status codes and renders every
failure as an ErrorResponse body:

    InvalidArgumentException -> 400
    LeafNotFoundException    -> 404
    malformed request body   -> 422 INVALID_ARGUMENT
    anything else            -> 500 INTERNAL_ERROR
"""

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api.models.responses import ErrorDetail, ErrorResponse
from core.schemas.errors import (
    ErrorCodes,
    InvalidArgumentException,
    LeafNotFoundException,
    MerkleException,
)


logger = logging.getLogger(__name__)

INTERNAL_ERROR = "INTERNAL_ERROR"


def error_json(
    status_code: int,
    code: str,
    message: str,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        error=ErrorDetail(code=code, message=message, details=details or {}),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


class APIError(Exception):
    """Error raised by route code that carries its own HTTP status."""

    status_code = 400

    def __init__(
        self,
        message: str,
        code: str = ErrorCodes.INVALID_ARGUMENT,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_response(self) -> JSONResponse:
        return error_json(self.status_code, self.code, self.message, self.details)


class InvalidRequestError(APIError):
    """Malformed or missing input (400)."""


class LeafNotFoundError(APIError):
    """Target hash is not among the leaves (404)."""

    status_code = 404

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, code=ErrorCodes.LEAF_NOT_FOUND, details=details)


class InternalError(APIError):
    """Unexpected failure inside the service (500)."""

    status_code = 500

    def __init__(self, message: str = "Internal server error", details: dict[str, Any] | None = None):
        super().__init__(message, code=INTERNAL_ERROR, details=details)


def from_merkle_exception(exc: MerkleException) -> APIError:
    """Map a core exception onto its API error."""
    if isinstance(exc, LeafNotFoundException):
        return LeafNotFoundError(exc.message, details=exc.details)
    if isinstance(exc, InvalidArgumentException):
        return InvalidRequestError(exc.message, code=exc.code, details=exc.details)
    return InternalError(exc.message, details=exc.details)


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    return exc.to_response()


async def merkle_error_handler(request: Request, exc: MerkleException) -> JSONResponse:
    """Handle exceptions raised by the Merkle core."""
    if exc.code != ErrorCodes.LEAF_NOT_FOUND:
        logger.debug(f"{request.url.path}: {exc!r}")
    return from_merkle_exception(exc).to_response()


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render body validation failures in the ErrorResponse envelope."""
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]
    return error_json(
        422,
        ErrorCodes.INVALID_ARGUMENT,
        f"Request validation failed: {len(errors)} error(s)",
        {"errors": errors},
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unhandled error on {request.url.path}")
    return error_json(
        500,
        INTERNAL_ERROR,
        "An unexpected error occurred",
        {"type": type(exc).__name__},
    )
