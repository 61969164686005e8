# generated-by: codex-agent 2025-03-02T10:12:00Z
"""
FastAPI integration: route unhandled exceptions through one error handler.

Known families are answered by exception handlers inside Starlette's
ExceptionMiddleware. Everything else is caught by `ErrorBoundaryMiddleware`
around the route stack, so no exception reaches ServerErrorMiddleware.
"""

from __future__ import annotations

import json
from typing import Any, Awaitable, Callable, Optional

import jwt
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from ..core.handler import ErrorHandler, create_error_handler
from .responses import AppError, JSONResponseSink, UTF8JSONResponse


def render_error(handle_error: ErrorHandler, request: Request, exc: Exception) -> Response:
    sink = JSONResponseSink()
    result = handle_error(exc, request, sink, None)
    if isinstance(result, Response):
        return result
    if sink.response is not None:
        return sink.response
    # custom handler answered without going through the sink
    return UTF8JSONResponse(status_code=sink.status_code, content=jsonable_encoder(result))


class ErrorBoundaryMiddleware(BaseHTTPMiddleware):
    """Turns any exception escaping the routes into an error response."""

    def __init__(self, app, handle_error: ErrorHandler) -> None:  # type: ignore[override]
        super().__init__(app)
        self._handle_error = handle_error

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return render_error(self._handle_error, request, exc)


def install_error_handlers(
    app: FastAPI,
    options: Any = None,
    *,
    environment: Optional[str] = None,
) -> None:
    handle_error = create_error_handler(options, environment=environment)

    @app.exception_handler(StarletteHTTPException)
    @app.exception_handler(RequestValidationError)
    @app.exception_handler(PydanticValidationError)
    @app.exception_handler(PyMongoError)
    @app.exception_handler(jwt.PyJWTError)
    @app.exception_handler(json.JSONDecodeError)
    @app.exception_handler(UnicodeDecodeError)
    @app.exception_handler(AppError)
    async def _exception_handler(request: Request, exc: Exception) -> Response:
        return render_error(handle_error, request, exc)

    app.add_middleware(ErrorBoundaryMiddleware, handle_error=handle_error)


__all__ = ["ErrorBoundaryMiddleware", "install_error_handlers", "render_error"]
