# generated-by: codex-agent 2025-03-02T09:14:00Z
"""
Safe field extraction from error values of unknown shape.

An error may be an exception, any attribute-bearing object or a plain
mapping. Every lookup here returns None instead of raising.
"""

from __future__ import annotations

import traceback
from collections.abc import Mapping
from typing import Any, Optional

from starlette.exceptions import HTTPException as StarletteHTTPException

_MISSING = object()


def _lookup(error: Any, key: str) -> Any:
    if isinstance(error, Mapping):
        try:
            return error.get(key, _MISSING)
        except Exception:
            return _MISSING
    try:
        return getattr(error, key, _MISSING)
    except Exception:
        # properties that raise count as absent
        return _MISSING


def has_field(error: Any, key: str) -> bool:
    return _lookup(error, key) is not _MISSING


def get_field(error: Any, key: str, default: Any = None) -> Any:
    value = _lookup(error, key)
    return default if value is _MISSING else value


# builtins whose `name` holds the missing identifier, not an error kind
_IDENTIFIER_NAMED = (AttributeError, NameError, ImportError)


def error_name(error: Any) -> Optional[str]:
    """Explicit `name`, else the exception class name."""

    if isinstance(error, _IDENTIFIER_NAMED):
        return type(error).__name__
    name = get_field(error, "name")
    if name is not None:
        return name if isinstance(name, str) else str(name)
    if isinstance(error, BaseException):
        return type(error).__name__
    return None


def error_message(error: Any) -> Optional[str]:
    message = get_field(error, "message")
    if message is not None:
        return message if isinstance(message, str) else str(message)
    if isinstance(error, StarletteHTTPException) and isinstance(error.detail, str):
        return error.detail
    if isinstance(error, BaseException):
        return str(error)
    return None


def error_code(error: Any) -> Any:
    return get_field(error, "code")


def error_stack(error: Any) -> Optional[str]:
    stack = get_field(error, "stack")
    if stack:
        return stack if isinstance(stack, str) else str(stack)
    if isinstance(error, BaseException) and error.__traceback__ is not None:
        return "".join(traceback.format_exception(type(error), error, error.__traceback__))
    return None


def status_code(error: Any) -> Optional[int]:
    """Declared HTTP status (`statusCode` or `status_code`) as an int."""

    value = get_field(error, "statusCode") or get_field(error, "status_code")
    if not value or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None


def text(value: Any) -> str:
    return "" if value is None else str(value)


__all__ = [
    "error_code",
    "error_message",
    "error_name",
    "error_stack",
    "get_field",
    "has_field",
    "status_code",
    "text",
]
