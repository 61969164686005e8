# generated-by: codex-agent 2025-03-02T09:30:00Z
"""
Error classification.

Each built-in rule is an `ErrorKind` with a matcher. `classify_error` walks
the matchers in `MATCHERS` order and returns the first hit, or
`ErrorKind.UNRECOGNIZED`. The order is part of the contract: an error that
satisfies several matchers is classified by the earliest one.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, Callable, Tuple

import jwt
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError
from pymongo.errors import ConnectionFailure

from .attributes import error_name, get_field, has_field, status_code

DUPLICATE_KEY_CODE = 11000


class ErrorKind(str, Enum):
    MALFORMED_JSON = "malformed_json"
    PAYLOAD_TOO_LARGE = "payload_too_large"
    MALFORMED_URI = "malformed_uri"
    SCHEMA_VALIDATION = "schema_validation"
    DUPLICATE_KEY = "duplicate_key"
    CAST = "cast"
    DOCUMENT_NOT_FOUND = "document_not_found"
    STRICT_MODE = "strict_mode"
    VERSION_CONFLICT = "version_conflict"
    PARALLEL_SAVE = "parallel_save"
    DATABASE_UNAVAILABLE = "database_unavailable"
    INVALID_TOKEN = "invalid_token"
    EXPIRED_TOKEN = "expired_token"
    INACTIVE_TOKEN = "inactive_token"
    DATA_VALIDATION = "data_validation"
    APPLICATION = "application"
    UNRECOGNIZED = "unrecognized"


def _is_syntax_error(error: Any) -> bool:
    return isinstance(error, (SyntaxError, json.JSONDecodeError)) or error_name(error) == "SyntaxError"


def is_malformed_json(error: Any) -> bool:
    # status 400 plus a `body` marker separates body parsing from other syntax errors
    if _is_syntax_error(error) and get_field(error, "status") == 400 and has_field(error, "body"):
        return True
    if isinstance(error, RequestValidationError):
        return any(
            isinstance(item, dict) and item.get("type") == "json_invalid" for item in error.errors()
        )
    return False


def is_payload_too_large(error: Any) -> bool:
    return get_field(error, "type") == "entity.too.large"


def is_malformed_uri(error: Any) -> bool:
    return isinstance(error, UnicodeDecodeError) or error_name(error) == "URIError"


def is_schema_validation(error: Any) -> bool:
    if isinstance(error, PydanticValidationError):
        return False
    return error_name(error) == "ValidationError"


def is_duplicate_key(error: Any) -> bool:
    code = get_field(error, "code")
    return not isinstance(code, bool) and code == DUPLICATE_KEY_CODE


def _named(*names: str) -> Callable[[Any], bool]:
    def matcher(error: Any) -> bool:
        return error_name(error) in names

    return matcher


def is_database_unavailable(error: Any) -> bool:
    return isinstance(error, ConnectionFailure) or error_name(error) in (
        "MongooseServerSelectionError",
        "MongoNetworkError",
    )


def is_expired_token(error: Any) -> bool:
    return isinstance(error, jwt.ExpiredSignatureError) or error_name(error) == "TokenExpiredError"


def is_inactive_token(error: Any) -> bool:
    return isinstance(error, jwt.ImmatureSignatureError) or error_name(error) == "NotBeforeError"


def is_invalid_token(error: Any) -> bool:
    if error_name(error) == "JsonWebTokenError":
        return True
    # PyJWT's expired/immature errors subclass InvalidTokenError; they have their own rules
    return isinstance(error, jwt.InvalidTokenError) and not isinstance(
        error, (jwt.ExpiredSignatureError, jwt.ImmatureSignatureError)
    )


def is_data_validation(error: Any) -> bool:
    return isinstance(error, (PydanticValidationError, RequestValidationError)) or (
        error_name(error) == "ZodError"
    )


def is_application_error(error: Any) -> bool:
    return status_code(error) is not None


MATCHERS: Tuple[Tuple[ErrorKind, Callable[[Any], bool]], ...] = (
    (ErrorKind.MALFORMED_JSON, is_malformed_json),
    (ErrorKind.PAYLOAD_TOO_LARGE, is_payload_too_large),
    (ErrorKind.MALFORMED_URI, is_malformed_uri),
    (ErrorKind.SCHEMA_VALIDATION, is_schema_validation),
    (ErrorKind.DUPLICATE_KEY, is_duplicate_key),
    (ErrorKind.CAST, _named("CastError")),
    (ErrorKind.DOCUMENT_NOT_FOUND, _named("DocumentNotFoundError")),
    (ErrorKind.STRICT_MODE, _named("StrictModeError")),
    (ErrorKind.VERSION_CONFLICT, _named("VersionError")),
    (ErrorKind.PARALLEL_SAVE, _named("ParallelSaveError")),
    (ErrorKind.DATABASE_UNAVAILABLE, is_database_unavailable),
    (ErrorKind.INVALID_TOKEN, is_invalid_token),
    (ErrorKind.EXPIRED_TOKEN, is_expired_token),
    (ErrorKind.INACTIVE_TOKEN, is_inactive_token),
    (ErrorKind.DATA_VALIDATION, is_data_validation),
    (ErrorKind.APPLICATION, is_application_error),
)


def classify_error(error: Any) -> ErrorKind:
    for kind, matcher in MATCHERS:
        if matcher(error):
            return kind
    return ErrorKind.UNRECOGNIZED


__all__ = ["DUPLICATE_KEY_CODE", "ErrorKind", "MATCHERS", "classify_error"]
