"""Application error kinds and their HTTP translation."""

import logging
from enum import Enum

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    INTERNAL = "internal"


STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.INTERNAL: 500,
}


class JoblyError(Exception):
    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str | list[str], kind: ErrorKind | None = None):
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind

    @property
    def status(self) -> int:
        return STATUS_CODES[self.kind]


class BadRequestError(JoblyError):
    kind = ErrorKind.BAD_REQUEST


class NotFoundError(JoblyError):
    kind = ErrorKind.NOT_FOUND


class UnauthorizedError(JoblyError):
    kind = ErrorKind.UNAUTHORIZED


def validation_messages(errors) -> list[str]:
    """Flatten pydantic error dicts into ``"field: message"`` strings."""
    messages = []
    for err in errors:
        loc = ".".join(str(part) for part in err["loc"] if part not in ("body", "query"))
        messages.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return messages


def _error_response(status: int, message) -> JSONResponse:
    return JSONResponse(status_code=status, content={"error": {"message": message, "status": status}})


async def jobly_error_handler(request: Request, exc: JoblyError):
    return _error_response(exc.status, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return _error_response(
        STATUS_CODES[ErrorKind.BAD_REQUEST], validation_messages(exc.errors())
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return _error_response(STATUS_CODES[ErrorKind.INTERNAL], "Internal server error")


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(JoblyError, jobly_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
