"""Application errors and their translation to the public error envelope.

Every failure that leaves a handler is rendered as

    {"success": false, "response": {"version": 1, "code": ..., "message": ..., "details": [...]}}

Store exceptions are never echoed to the client; they are logged and mapped
to one of the codes below.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from plant_tracker.core.constants import ERROR_SCHEMA_VERSION

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base for errors rendered into the error envelope."""

    code = "error"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Request could not be processed"

    def __init__(self, message: str | None = None, details: list[dict[str, Any]] | None = None):
        self.message = message or self.default_message
        self.details = details or []
        super().__init__(self.message)

    def to_response(self) -> dict[str, Any]:
        return {
            "version": ERROR_SCHEMA_VERSION,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(AppError):
    code = "validation_error"
    default_message = "Invalid request"


class NotFoundError(AppError):
    code = "not_found"
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class AuthenticationError(AppError):
    code = "authentication_required"
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Please log in"


class CredentialMismatchError(AppError):
    # 400 rather than 401 so unknown user and wrong password look the same
    code = "credential_mismatch"
    default_message = "Username and password do not match"


class BackendUnavailableError(AppError):
    code = "backend_unavailable"
    default_message = "Request could not be processed"


def error_envelope(exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "response": exc.to_response()},
    )


def _summarize_validation(exc: RequestValidationError) -> list[dict[str, Any]]:
    details = []
    for err in exc.errors():
        # loc is ("body", "plantName") / ("path", "plant_id")
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        details.append({"field": ".".join(loc) or None, "message": err.get("msg", "invalid")})
    return details


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    logger.warning("%s %s -> %s (%s)", request.method, request.url.path, exc.status_code, exc.code)
    return error_envelope(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return await app_error_handler(request, ValidationError(details=_summarize_validation(exc)))


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Store error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_envelope(BackendUnavailableError())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
