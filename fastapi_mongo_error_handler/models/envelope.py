# generated-by: codex-agent 2025-03-02T09:22:00Z
"""
Error response envelope (status code + client-safe JSON body).
"""

from __future__ import annotations

from typing import Any, List, Literal

from pydantic import BaseModel, Field


class FieldError(BaseModel):
    field: str
    message: str


class ErrorBody(BaseModel):
    success: Literal[False] = False
    message: str
    # str or FieldError; declared application errors may pass their own items
    errors: List[Any] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    status_code: int
    body: ErrorBody

    @classmethod
    def build(cls, status_code: int, message: str, errors: List[Any]) -> "ErrorResponse":
        return cls(status_code=status_code, body=ErrorBody(message=message, errors=errors))

    def content(self) -> dict[str, Any]:
        """JSON-ready body for the response sink."""

        return self.body.model_dump(mode="json")
