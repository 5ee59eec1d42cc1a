"""Application-level errors and their HTTP exception handlers."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, Mapping

from fastapi import FastAPI, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request

from .core.context import REQUEST_ID_HEADER, request_id_bound

logger = logging.getLogger(__name__)


class ErrorResponse(BaseModel):
    """Envelope shared by every error response."""

    code: str
    message: str
    details: dict[str, Any]


class ApplicationError(Exception):
    """Base class for domain-specific errors."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "application_error",
        status_code: int = status.HTTP_400_BAD_REQUEST,
        details: Any | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        self.headers = dict(headers) if headers else None


class BadRequestError(ApplicationError):
    """Malformed or invalid client input."""

    def __init__(
        self,
        message: str = "Bad request.",
        *,
        code: str = "bad_request",
        details: Any | None = None,
    ) -> None:
        super().__init__(
            message,
            code=code,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
        )


class NotFoundError(ApplicationError):
    """Resource is absent, or not owned by the requester."""

    def __init__(
        self,
        message: str = "Resource not found.",
        *,
        code: str = "not_found",
        details: Any | None = None,
    ) -> None:
        super().__init__(
            message,
            code=code,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
        )


class ConflictError(ApplicationError):
    """Uniqueness violation on a persisted resource."""

    def __init__(
        self,
        message: str = "Resource already exists.",
        *,
        code: str = "conflict",
        details: Any | None = None,
    ) -> None:
        super().__init__(
            message,
            code=code,
            status_code=status.HTTP_409_CONFLICT,
            details=details,
        )


class ServerError(ApplicationError):
    """Unexpected server failure; the message is always generic."""

    def __init__(
        self,
        message: str = "Internal server error.",
        *,
        code: str = "server_error",
        details: Any | None = None,
    ) -> None:
        super().__init__(
            message,
            code=code,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
        )


class UnauthorizedError(ApplicationError):
    """Missing or rejected credentials; advertises the bearer scheme."""

    def __init__(
        self,
        message: str = "Could not validate credentials.",
        *,
        code: str = "unauthorized",
        details: Any | None = None,
    ) -> None:
        super().__init__(
            message,
            code=code,
            status_code=status.HTTP_401_UNAUTHORIZED,
            details=details,
            headers={"WWW-Authenticate": "Bearer"},
        )


_HTTP_STATUS_CODE_MAP: dict[int, str] = {
    status.HTTP_400_BAD_REQUEST: "bad_request",
    status.HTTP_401_UNAUTHORIZED: "unauthorized",
    status.HTTP_403_FORBIDDEN: "forbidden",
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "method_not_allowed",
    status.HTTP_409_CONFLICT: "conflict",
}


def _request_id_of(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


def _details_with_request_id(request: Request, details: Any | None) -> dict[str, Any]:
    if details is None:
        merged: dict[str, Any] = {}
    elif isinstance(details, dict):
        merged = dict(details)
    else:
        merged = {"detail": details}
    merged["request_id"] = _request_id_of(request)
    return merged


def _error_response(
    request: Request,
    *,
    status_code: int,
    code: str,
    message: str,
    details: Any | None = None,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    payload = ErrorResponse(
        code=code,
        message=message,
        details=_details_with_request_id(request, details),
    )
    response = JSONResponse(status_code=status_code, content=jsonable_encoder(payload))
    if headers:
        response.headers.update(headers)
    request_id = _request_id_of(request)
    if request_id:
        response.headers.setdefault(REQUEST_ID_HEADER, request_id)
    return response


def _http_exception_message(status_code: int, detail: Any) -> tuple[str, Any | None]:
    if isinstance(detail, str):
        return detail, None
    try:
        phrase = HTTPStatus(status_code).phrase
    except ValueError:
        phrase = "Error"
    return phrase, detail


def _log_for(status_code: int):
    return logger.error if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR else logger.warning


def register_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers with the provided FastAPI app."""

    @app.exception_handler(ApplicationError)
    async def _handle_application_error(
        request: Request,
        exc: ApplicationError,
    ) -> JSONResponse:
        with request_id_bound(_request_id_of(request)):
            _log_for(exc.status_code)("%s: %s", exc.code, exc.message)
            return _error_response(
                request,
                status_code=exc.status_code,
                code=exc.code,
                message=exc.message,
                details=exc.details,
                headers=exc.headers,
            )

    @app.exception_handler(RequestValidationError)
    async def _handle_request_validation_error(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        errors = jsonable_encoder(exc.errors())
        with request_id_bound(_request_id_of(request)):
            logger.warning("Request validation failed: %s", errors)
            return _error_response(
                request,
                status_code=status.HTTP_400_BAD_REQUEST,
                code="validation_error",
                message="Request validation failed.",
                details={"errors": errors},
            )

    @app.exception_handler(IntegrityError)
    async def _handle_integrity_error(
        request: Request,
        exc: IntegrityError,
    ) -> JSONResponse:
        with request_id_bound(_request_id_of(request)):
            logger.error("Database integrity error encountered.", exc_info=exc)
            return _error_response(
                request,
                status_code=status.HTTP_409_CONFLICT,
                code="db_integrity_error",
                message="Database integrity violation.",
            )

    @app.exception_handler(StarletteHTTPException)
    async def _handle_http_exception(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        message, extra_details = _http_exception_message(exc.status_code, exc.detail)
        with request_id_bound(_request_id_of(request)):
            _log_for(exc.status_code)("HTTP %s on %s: %s", exc.status_code, request.url.path, message)
            return _error_response(
                request,
                status_code=exc.status_code,
                code=_HTTP_STATUS_CODE_MAP.get(exc.status_code, "http_error"),
                message=message,
                details=extra_details,
                headers=exc.headers,
            )

    @app.exception_handler(Exception)
    async def _handle_unhandled_exception(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        with request_id_bound(_request_id_of(request)):
            logger.exception("Unhandled application error.", exc_info=exc)
            return _error_response(
                request,
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                code="server_error",
                message="Internal server error.",
            )


__all__ = [
    "ApplicationError",
    "BadRequestError",
    "ConflictError",
    "ErrorResponse",
    "NotFoundError",
    "ServerError",
    "UnauthorizedError",
    "register_exception_handlers",
]
