# generated-by: codex-agent 2025-03-02T10:04:00Z
"""
Response helpers: the JSON response sink used by the FastAPI glue and the
declared application error type.
"""

from __future__ import annotations

from typing import Any, List, Optional

from fastapi import status
from fastapi.responses import JSONResponse


class UTF8JSONResponse(JSONResponse):
    """JSON response enforcing UTF-8 charset."""

    media_type = "application/json; charset=utf-8"


class JSONResponseSink:
    """Collects a status code and a JSON body, then builds a single response."""

    def __init__(self, response_class: type[JSONResponse] = UTF8JSONResponse) -> None:
        self._response_class = response_class
        self.status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
        self.response: Optional[JSONResponse] = None

    def status(self, code: int) -> "JSONResponseSink":
        self.status_code = code
        return self

    def json(self, body: Any) -> JSONResponse:
        if self.response is not None:
            raise RuntimeError("A response has already been emitted for this error.")
        self.response = self._response_class(status_code=self.status_code, content=body)
        return self.response

    @property
    def sent(self) -> bool:
        return self.response is not None


class AppError(Exception):
    """Application error carrying its own HTTP status."""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        errors: Optional[List[Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors = list(errors or [])


def raise_app_error(
    message: str,
    status_code: int = status.HTTP_400_BAD_REQUEST,
    errors: Optional[List[Any]] = None,
) -> None:
    """Raise an AppError; the error handler renders it with the given status."""

    raise AppError(message, status_code=status_code, errors=errors)
