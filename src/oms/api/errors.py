"""Translate domain errors and malformed requests into HTTP responses."""

import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError

logger = structlog.get_logger(__name__)

# Checked in order; the first matching base class wins
ERROR_STATUS_CODES: list[tuple[type, int]] = [
    (ObjectNotFoundError, 404),
    (ValidationError, 400),
    (RequestValidationError, 400),
]


def _status_for(exc: Exception) -> int:
    for error_cls, status_code in ERROR_STATUS_CODES:
        if isinstance(exc, error_cls):
            return status_code
    return 500


def _messages_for(exc: Exception):
    if isinstance(exc, RequestValidationError):
        # Same shape as Protean's messages: field path -> list of problems
        messages: dict[str, list[str]] = {}
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"] if part != "body") or "body"
            messages.setdefault(field, []).append(error["msg"])
        return messages
    return getattr(exc, "messages", str(exc))


async def domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
    status_code = _status_for(exc)
    logger.warning(
        "Request rejected",
        path=request.url.path,
        status_code=status_code,
        error=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder({"error": type(exc).__name__, "messages": _messages_for(exc)}),
    )


def install_error_handlers(app: FastAPI) -> None:
    for error_cls, _ in ERROR_STATUS_CODES:
        app.add_exception_handler(error_cls, domain_error_handler)
