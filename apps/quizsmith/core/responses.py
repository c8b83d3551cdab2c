"""Outcome to HTTP response mapping.

Every failure path in the service ends up as an :class:`ErrorResult` and every
success as a list of quiz items; these two helpers are the only places that
decide status codes and JSON bodies.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.status import (
    HTTP_200_OK,
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from quizsmith.schemas.quiz import QuizItem


class ErrorKind(str, Enum):
    validation = "ValidationError"
    auth = "AuthError"
    provider = "ProviderError"
    internal = "InternalError"


STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.validation: HTTP_400_BAD_REQUEST,
    ErrorKind.auth: HTTP_401_UNAUTHORIZED,
    ErrorKind.provider: HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.internal: HTTP_500_INTERNAL_SERVER_ERROR,
}


@dataclass(frozen=True)
class ErrorResult:
    """Tagged failure value carried from the raising component to the response."""

    kind: ErrorKind
    error: str
    message: str | None = None
    code: str | None = None
    type_: str | None = None
    details: Any | None = None
    # Overrides the status derived from ``kind`` (e.g. Starlette 404/405).
    status_code: int | None = None

    @property
    def status(self) -> int:
        if self.status_code is not None:
            return self.status_code
        return STATUS_BY_KIND[self.kind]

    def payload(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "error": self.error,
            "code": self.code,
            "type": self.type_ or self.kind.value,
        }
        if self.message is not None:
            body["message"] = self.message
        if self.details is not None:
            body["details"] = jsonable_encoder(self.details)
        return body


def render_error(result: ErrorResult) -> JSONResponse:
    return JSONResponse(status_code=result.status, content=result.payload())


def render_quiz(items: Iterable[QuizItem]) -> JSONResponse:
    """Serialize quiz items as a bare JSON array using wire field names."""
    return JSONResponse(
        status_code=HTTP_200_OK,
        content=[item.model_dump(mode="json", by_alias=True) for item in items],
    )


__all__ = ["ErrorKind", "ErrorResult", "STATUS_BY_KIND", "render_error", "render_quiz"]
