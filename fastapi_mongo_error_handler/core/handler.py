# generated-by: codex-agent 2025-03-02T09:55:00Z
"""
Error handler factory.

`create_error_handler` resolves options once and returns a dispatcher with
the conventional four-argument error middleware signature
`(error, request, response, next_)`. Custom handlers run first, in order;
the first truthy result wins. Otherwise the built-in rules decide and the
result is emitted through `response.status(code).json(body)` exactly once.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from .config import ErrorHandlerConfig, load_environment, resolve_config
from .logging import log_error
from .rules import build_error_response

ErrorHandler = Callable[[Any, Any, Any, Any], Any]


def create_error_handler(options: Any = None, *, environment: Optional[str] = None) -> ErrorHandler:
    if environment is None:
        environment = load_environment()
    config: ErrorHandlerConfig = resolve_config(options, environment)

    def error_handler(error: Any, request: Any, response: Any, next_: Any) -> Any:
        log_error(config, error)

        for handler in config.custom_handlers:
            result = handler(error, request, response)
            if result:
                return result

        resolved = build_error_response(error)
        return response.status(resolved.status_code).json(resolved.content())

    error_handler.config = config  # type: ignore[attr-defined]
    return error_handler


__all__ = ["ErrorHandler", "create_error_handler"]
