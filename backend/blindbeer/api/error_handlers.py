"""Error Handlers — map every failure to the {"error": {...}} envelope.

Invariants:
    - BlindBeerError -> its own status and to_response() body
    - Request validation failures -> 400 VALIDATION_ERROR with per-field details
    - Anything else -> 500 INTERNAL_ERROR; the exception text stays in the logs

Design Decisions:
    - Client errors log at warning, server errors at error with traceback
    - Registered from main.py via register_error_handlers(app)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from blindbeer.core.errors import BlindBeerError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)


def _envelope(
    code: str, message: str, category: ErrorCategory, severity: ErrorSeverity, **extra,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            **extra,
        },
    }


async def handle_blindbeer_error(request: Request, exc: BlindBeerError) -> JSONResponse:
    extra = {**exc.log_extra(), "path": request.url.path}
    if exc.is_client_error:
        logger.warning(exc.message, extra=extra)
    else:
        logger.error(exc.message, extra=extra, exc_info=exc)
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_validation_error(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(part) for part in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    logger.warning(
        f"Invalid request: {[d['field'] for d in details]}",
        extra={"path": request.url.path, "error_code": "VALIDATION_ERROR"},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, details=details,
        ),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled {type(exc).__name__}",
        extra={"path": request.url.path, "error_code": "INTERNAL_ERROR"},
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BlindBeerError, handle_blindbeer_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
