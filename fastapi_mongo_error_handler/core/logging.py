# generated-by: codex-agent 2025-03-02T09:18:00Z
"""
Diagnostic logging emitted before an error is classified.
"""

from __future__ import annotations

import logging
from typing import Any

from .attributes import error_code, error_message, error_name, error_stack

LOG_LABEL = "The following error occurred:"

logger = logging.getLogger("fastapi_mongo_error_handler")


def default_logger(label: str, details: dict[str, Any]) -> None:
    """Write to the package logger; without handlers this lands on stderr."""

    logger.error("%s %s", label, details)


def summarize_error(error: Any, expose_stack: bool = False) -> dict[str, Any]:
    details: dict[str, Any] = {
        "name": error_name(error),
        "code": error_code(error),
        "message": error_message(error),
    }
    if expose_stack:
        stack = error_stack(error)
        if stack:
            details["stack"] = stack
    return details


def log_error(config: Any, error: Any) -> None:
    """Invoke the configured logger. Logger failures propagate to the caller."""

    if not config.log_errors:
        return
    config.logger(LOG_LABEL, summarize_error(error, config.expose_stack))


__all__ = ["LOG_LABEL", "default_logger", "log_error", "summarize_error"]
