"""FastAPI exception handlers.

Translates domain errors, request validation failures and unexpected
exceptions into the structured ``ErrorResponse`` body.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tienda_motos.domain.errors import DomainError

logger = logging.getLogger(__name__)

HTTP_422_UNPROCESSABLE = 422

STATUS_BY_ERROR_CODE: dict[str, int] = {
    "VALIDATION_ERROR": HTTP_422_UNPROCESSABLE,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
}


def _request_context(request: Request) -> dict[str, str]:
    return {"path": request.url.path, "method": request.method}


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Map a domain error to its HTTP status (400 for unknown codes)."""
    error_dict = exc.to_dict()
    status_code = STATUS_BY_ERROR_CODE.get(exc.error_code, status.HTTP_400_BAD_REQUEST)

    if status_code >= 500:
        logger.error(
            "Domain error occurred",
            extra={
                "error_code": exc.error_code,
                "message": exc.message,
                "context": exc.context,
                **_request_context(request),
            },
        )
    else:
        logger.info(
            "Client error",
            extra={
                "error_code": exc.error_code,
                "message": exc.message,
                **_request_context(request),
            },
        )

    content: dict[str, Any] = {
        "detail": error_dict.get("message", str(exc)),
        "code": error_dict.get("code", exc.error_code),
    }
    if "errors" in error_dict:
        content["errors"] = error_dict["errors"]

    return JSONResponse(status_code=status_code, content=content)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Pydantic failures on the body, path or query (bad formats, missing fields)."""
    errors = []

    for error in exc.errors():
        # Drop the 'body'/'query'/'path' prefix from the location
        field_path = ".".join(
            str(loc) for loc in error["loc"] if loc not in ("body", "query", "path")
        )
        errors.append(
            {
                "field": field_path,
                "message": error["msg"],
                "code": error["type"],
            }
        )

    logger.info(
        "Request validation error",
        extra={"errors": errors, **_request_context(request)},
    )

    return JSONResponse(
        status_code=HTTP_422_UNPROCESSABLE,
        content={
            "detail": "Invalid request parameters",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        },
    )


async def handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
    """ValueError escaping a mapper or use case (e.g. an unknown enum value)."""
    logger.info(
        "Value error",
        extra={"message": str(exc), **_request_context(request)},
    )

    return JSONResponse(
        status_code=HTTP_422_UNPROCESSABLE,
        content={"detail": str(exc), "code": "INVALID_VALUE"},
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all: logged with traceback, answered with a generic 500."""
    logger.error(
        "Unexpected error occurred",
        exc_info=exc,
        extra={
            "error_type": type(exc).__name__,
            "message": str(exc),
            **_request_context(request),
        },
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unexpected error occurred", "code": "INTERNAL_ERROR"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(ValueError, handle_value_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)

    logger.info("Exception handlers registered successfully")
