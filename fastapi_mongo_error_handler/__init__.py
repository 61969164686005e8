# generated-by: codex-agent 2025-03-02T10:20:00Z
"""
Error classification and JSON error responses for FastAPI + MongoDB services.
"""

from .core.classify import ErrorKind, classify_error
from .core.config import ErrorHandlerConfig, load_environment, resolve_config
from .core.handler import create_error_handler
from .core.logging import LOG_LABEL, default_logger, summarize_error
from .core.rules import build_error_response
from .models.envelope import ErrorBody, ErrorResponse, FieldError
from .utils.error_handlers import install_error_handlers
from .utils.responses import AppError, JSONResponseSink, UTF8JSONResponse, raise_app_error

__version__ = "0.1.0"

__all__ = [
    "AppError",
    "ErrorBody",
    "ErrorHandlerConfig",
    "ErrorKind",
    "ErrorResponse",
    "FieldError",
    "JSONResponseSink",
    "LOG_LABEL",
    "UTF8JSONResponse",
    "build_error_response",
    "classify_error",
    "create_error_handler",
    "default_logger",
    "install_error_handlers",
    "load_environment",
    "raise_app_error",
    "resolve_config",
    "summarize_error",
]
