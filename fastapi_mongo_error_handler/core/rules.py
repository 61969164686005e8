# generated-by: codex-agent 2025-03-02T09:41:00Z
"""
Built-in response rules, one builder per `ErrorKind`.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Callable, Dict, List, Tuple

from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError

from ..models.envelope import ErrorResponse, FieldError
from .attributes import error_message, get_field, status_code, text
from .classify import ErrorKind, classify_error

_JSON_SCALARS = (str, int, float, bool, type(None), dict, list, FieldError)


def _fixed(status: int, message: str, *errors: Any) -> Callable[[Any], ErrorResponse]:
    def build(error: Any) -> ErrorResponse:
        return ErrorResponse.build(status, message, list(errors))

    return build


def _iter_values(container: Any) -> List[Any]:
    if isinstance(container, Mapping):
        return list(container.values())
    if isinstance(container, Sequence) and not isinstance(container, (str, bytes)):
        return list(container)
    return []


def _schema_validation(error: Any) -> ErrorResponse:
    errors = [
        FieldError(field=text(get_field(item, "path")), message=text(get_field(item, "message")))
        for item in _iter_values(get_field(error, "errors"))
    ]
    return ErrorResponse.build(400, "Schema validation failed", errors)


def _key_pattern(error: Any) -> Any:
    pattern = get_field(error, "keyPattern")
    if pattern is None:
        # pymongo keeps the server reply under `details`
        pattern = get_field(get_field(error, "details"), "keyPattern")
    return pattern


def _duplicate_key(error: Any) -> ErrorResponse:
    pattern = _key_pattern(error)
    fields = list(pattern.keys()) if isinstance(pattern, Mapping) else []
    errors = [
        FieldError(field=str(field), message=f"Record with field '{field}' already exists")
        for field in fields
    ]
    return ErrorResponse.build(409, "Duplicate key violation", errors)


def _cast(error: Any) -> ErrorResponse:
    path = text(get_field(error, "path"))
    value = text(get_field(error, "value"))
    return ErrorResponse.build(
        400,
        "Invalid object ID",
        [FieldError(field=path, message=f"Value ({value}) is not valid for {path}")],
    )


def _strict_mode(error: Any) -> ErrorResponse:
    path = text(get_field(error, "path"))
    return ErrorResponse.build(
        400,
        "Field not defined in schema",
        [FieldError(field=path, message=f"The field '{path}' does not exist in the schema")],
    )


def _version_conflict(error: Any) -> ErrorResponse:
    return ErrorResponse.build(
        409,
        "Concurrent modification error",
        [
            FieldError(
                field="_v",
                message="The record being modified has been concurrently modified. Refresh and try again.",
            )
        ],
    )


def _issues(error: Any) -> List[Tuple[Any, Any]]:
    if isinstance(error, (PydanticValidationError, RequestValidationError)):
        return [(item.get("loc", ()), item.get("msg")) for item in error.errors()]
    return [
        (get_field(issue, "path"), get_field(issue, "message"))
        for issue in _iter_values(get_field(error, "issues"))
    ]


def _join_path(path: Any) -> str:
    if isinstance(path, str):
        return path
    return ".".join(str(part) for part in _iter_values(path))


def _data_validation(error: Any) -> ErrorResponse:
    errors = [
        FieldError(field=_join_path(path), message=text(message))
        for path, message in _issues(error)
    ]
    return ErrorResponse.build(400, "Data validation failed", errors)


def _application(error: Any) -> ErrorResponse:
    message = text(error_message(error))
    declared = get_field(error, "errors")
    if isinstance(declared, (list, tuple)) and declared:
        errors = [item if isinstance(item, _JSON_SCALARS) else str(item) for item in declared]
    else:
        errors = [message]
    return ErrorResponse.build(status_code(error) or 500, message, errors)


RESPONSE_BUILDERS: Dict[ErrorKind, Callable[[Any], ErrorResponse]] = {
    ErrorKind.MALFORMED_JSON: _fixed(
        400, "Invalid JSON payload in request", "The request body JSON is invalid and could not be parsed"
    ),
    ErrorKind.PAYLOAD_TOO_LARGE: _fixed(
        413, "JSON payload too large", "The request body data exceeds the maximum size limit"
    ),
    ErrorKind.MALFORMED_URI: _fixed(
        400, "Malformed URI", "The request URL contains invalid or malformed URI components"
    ),
    ErrorKind.SCHEMA_VALIDATION: _schema_validation,
    ErrorKind.DUPLICATE_KEY: _duplicate_key,
    ErrorKind.CAST: _cast,
    ErrorKind.DOCUMENT_NOT_FOUND: _fixed(
        404, "Requested resource not found", "The record being accessed does not exist in the database"
    ),
    ErrorKind.STRICT_MODE: _strict_mode,
    ErrorKind.VERSION_CONFLICT: _version_conflict,
    ErrorKind.PARALLEL_SAVE: _fixed(
        409, "Parallel save error", "The same document cannot be saved multiple times in parallel"
    ),
    ErrorKind.DATABASE_UNAVAILABLE: _fixed(
        503,
        "Database connection error",
        "Unable to connect to MongoDB database server. Please try again later.",
    ),
    ErrorKind.INVALID_TOKEN: _fixed(401, "Invalid token", "Provided token is invalid. Please log in again."),
    ErrorKind.EXPIRED_TOKEN: _fixed(
        401, "Expired token", "Your session has expired. Please log in again to refresh."
    ),
    ErrorKind.INACTIVE_TOKEN: _fixed(
        401, "Token not active", "The token has yet to be activated. Please try again later."
    ),
    ErrorKind.DATA_VALIDATION: _data_validation,
    ErrorKind.APPLICATION: _application,
    ErrorKind.UNRECOGNIZED: _fixed(
        500, "Unexpected error.", "An unexpected error occurred. Please try again later."
    ),
}


def build_error_response(error: Any) -> ErrorResponse:
    """Run the built-in rules and the catch-all; always returns a response."""

    return RESPONSE_BUILDERS[classify_error(error)](error)


__all__ = ["RESPONSE_BUILDERS", "build_error_response"]
