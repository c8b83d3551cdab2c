from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from quizsmith.core.responses import ErrorKind, ErrorResult, render_error

logger = logging.getLogger(__name__)


class QuizsmithException(Exception):
    """Base exception for the quiz service.

    Note: these exceptions are meant to be raised from inside request handlers or
    service functions invoked by request handlers, so FastAPI can translate them
    via registered exception handlers.
    """

    kind: ErrorKind = ErrorKind.internal
    status_code: int | None = None
    default_code: str | None = None
    default_error: str = "Internal server error"

    def __init__(
        self,
        message: str,
        *,
        error: str | None = None,
        code: str | None = None,
        status_code: int | None = None,
        details: Any | None = None,
    ) -> None:
        self.message = message
        self.error = error if error is not None else self.default_error
        self.code = code if code is not None else self.default_code
        self.status_code = status_code if status_code is not None else self.status_code
        self.details = details
        super().__init__(message)

    def to_result(self) -> ErrorResult:
        return ErrorResult(
            kind=self.kind,
            error=self.error,
            message=self.message,
            code=self.code,
            type_=self.__class__.__name__,
            details=self.details,
            status_code=self.status_code,
        )


class AuthError(QuizsmithException):
    """Raised when the provider credential is missing or rejected."""

    kind = ErrorKind.auth
    default_code = "auth_error"
    default_error = "API key error"


class ProviderError(QuizsmithException):
    """Raised when the generation provider fails or returns an off-schema result."""

    kind = ErrorKind.provider
    default_code = "provider_error"
    default_error = "Failed to generate quiz questions"


class InternalError(QuizsmithException):
    """Raised for unexpected server-side failures."""

    kind = ErrorKind.internal
    default_code = "internal_error"
    default_error = "Internal server error"


def register_exception_handlers(app: FastAPI) -> None:
    """Register the service's exception handlers on a FastAPI app."""

    @app.exception_handler(QuizsmithException)
    async def _quizsmith_exception_handler(
        _request: Request, exc: QuizsmithException
    ) -> JSONResponse:
        return render_error(exc.to_result())

    @app.exception_handler(RequestValidationError)
    async def _validation_exception_handler(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return render_error(
            ErrorResult(
                kind=ErrorKind.validation,
                error="Validation error",
                code="validation_error",
                type_=exc.__class__.__name__,
                details=exc.errors(),
            )
        )

    @app.exception_handler(StarletteHTTPException)
    async def _http_exception_handler(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        detail = getattr(exc, "detail", None)
        if isinstance(detail, str):
            error = detail
            details = None
        else:
            error = "Request failed"
            details = detail
        kind = ErrorKind.validation if exc.status_code < 500 else ErrorKind.internal
        return render_error(
            ErrorResult(
                kind=kind,
                error=error,
                code="http_exception",
                type_=exc.__class__.__name__,
                details=details,
                status_code=exc.status_code,
            )
        )

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(_request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception: %s", exc)
        return render_error(
            ErrorResult(
                kind=ErrorKind.internal,
                error="Internal server error",
                message="Unexpected error occurred.",
                code="internal_error",
                type_="InternalServerError",
            )
        )
