# generated-by: codex-agent 2025-03-02T09:10:00Z
"""
Configuration resolution for the error handler.

Options are resolved once when the handler is built. The environment name is
passed in explicitly; `load_environment()` is the only place that reads
process state (environment variables, then a local `.env`).
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Optional, Tuple

from dotenv import dotenv_values

from .logging import default_logger

Logger = Callable[[str, dict], Any]
CustomHandler = Callable[[Any, Any, Any], Any]

ENVIRONMENT_VAR = "ENVIRONMENT"
VERBOSE_ENVIRONMENTS = frozenset({"development", "test"})

_ALIASES = {
    "logErrors": "log_errors",
    "exposeStack": "expose_stack",
    "customHandlers": "custom_handlers",
}


@dataclass(frozen=True)
class ErrorHandlerConfig:
    """Resolved, read-only configuration closed over by the dispatcher."""

    log_errors: bool = False
    expose_stack: bool = False
    logger: Logger = default_logger
    custom_handlers: Tuple[CustomHandler, ...] = field(default_factory=tuple)


def load_environment(env_file: Optional[Path] = None) -> Optional[str]:
    """Return the deployment environment name, or None when unset."""

    value = os.environ.get(ENVIRONMENT_VAR)
    if value is not None:
        return value
    path = env_file or Path.cwd() / ".env"
    if path.exists():
        return dotenv_values(path).get(ENVIRONMENT_VAR)
    return None


def _normalise(options: Any) -> dict[str, Any]:
    if options is None:
        return {}
    if isinstance(options, ErrorHandlerConfig):
        return {
            "log_errors": options.log_errors,
            "expose_stack": options.expose_stack,
            "logger": options.logger,
            "custom_handlers": options.custom_handlers,
        }
    if not isinstance(options, Mapping):
        return {}
    merged: dict[str, Any] = {}
    for key, value in options.items():
        merged[_ALIASES.get(key, key)] = value
    return merged


def _handlers(value: Any) -> Tuple[CustomHandler, ...]:
    if value is None or isinstance(value, (str, bytes, Mapping)):
        return ()
    if callable(value):
        return (value,)
    if not isinstance(value, Iterable):
        return ()
    return tuple(handler for handler in value if callable(handler))


def resolve_config(options: Any = None, environment: Optional[str] = None) -> ErrorHandlerConfig:
    """Merge caller options with defaults. Malformed values fall back silently."""

    values = _normalise(options)

    log_errors = values.get("log_errors")
    if log_errors is None:
        log_errors = environment in VERBOSE_ENVIRONMENTS

    logger = values.get("logger")
    if not callable(logger):
        logger = default_logger

    return ErrorHandlerConfig(
        log_errors=bool(log_errors),
        expose_stack=bool(values.get("expose_stack") or False),
        logger=logger,
        custom_handlers=_handlers(values.get("custom_handlers")),
    )


__all__ = [
    "ENVIRONMENT_VAR",
    "ErrorHandlerConfig",
    "load_environment",
    "resolve_config",
]
