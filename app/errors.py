"""Error kinds shared by the storage layer and the HTTP handlers.

Every failure the service reports is an ``AppError`` tagged with an
``ErrorKind``. Status codes are looked up in ``STATUS_BY_KIND`` so no handler
picks its own.
"""
import logging
from enum import Enum

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    MALFORMED_REQUEST = "malformed_request"
    STORAGE_UNAVAILABLE = "storage_unavailable"
    STARTUP_FAILURE = "startup_failure"


STATUS_BY_KIND = {
    ErrorKind.MALFORMED_REQUEST: status.HTTP_400_BAD_REQUEST,
    ErrorKind.STORAGE_UNAVAILABLE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.STARTUP_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class AppError(Exception):
    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def http_status(self) -> int:
        return STATUS_BY_KIND[self.kind]

    def to_response(self) -> dict:
        return {"error": {"kind": self.kind.value, "message": self.message}}


def malformed_request(message: str) -> AppError:
    return AppError(ErrorKind.MALFORMED_REQUEST, message)


def storage_unavailable(message: str) -> AppError:
    return AppError(ErrorKind.STORAGE_UNAVAILABLE, message)


def startup_failure(message: str) -> AppError:
    return AppError(ErrorKind.STARTUP_FAILURE, message)


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for e in exc.errors():
        loc = ".".join(str(p) for p in e.get("loc", ()))
        parts.append(f"{loc}: {e.get('msg')}" if loc else str(e.get("msg")))
    return "; ".join(parts)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        logger.error(
            "%s on %s %s: %s",
            exc.kind.value, request.method, request.url.path, exc.message,
        )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    # Bad JSON, missing fields and non-integer path ids all land here.
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return await app_error_handler(
            request, malformed_request(_format_validation_errors(exc)),
        )
