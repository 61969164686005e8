# generated-by: codex-agent 2025-03-02T10:30:00Z
"""
Demo FastAPI application wired with the shared error handler.

Run with `uvicorn main:app` and hit the `/api/demo/*` routes to see each
error family rendered.
"""

from __future__ import annotations

import logging
import sys

import jwt
from fastapi import FastAPI
from pydantic import BaseModel, Field
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from fastapi_mongo_error_handler import (
    UTF8JSONResponse,
    install_error_handlers,
    raise_app_error,
)


def _configure_logging() -> None:
    """Ensure an INFO-level console handler exists (uvicorn may preconfigure logging)."""
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s")
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(logging.INFO)
    for name in ["fastapi_mongo_error_handler", "fastapi_mongo_error_handler.demo"]:
        logging.getLogger(name).setLevel(logging.INFO)


_configure_logging()
logger = logging.getLogger("fastapi_mongo_error_handler.demo")


class UserCreate(BaseModel):
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    name: str = Field(min_length=1)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Error handler demo",
        version="0.1.0",
        default_response_class=UTF8JSONResponse,
    )

    install_error_handlers(app)

    @app.post("/api/demo/users")
    async def create_user(payload: UserCreate) -> dict[str, str]:
        if payload.email.endswith("@taken.example"):
            raise DuplicateKeyError(
                "E11000 duplicate key error collection: demo.users index: email_1",
                code=11000,
                details={"keyPattern": {"email": 1}, "keyValue": {"email": payload.email}},
            )
        return {"email": payload.email, "name": payload.name}

    @app.get("/api/demo/token")
    async def expired_token() -> None:
        raise jwt.ExpiredSignatureError("Signature has expired")

    @app.get("/api/demo/database")
    async def database_down() -> None:
        raise ServerSelectionTimeoutError("localhost:27017: connection refused")

    @app.get("/api/demo/forbidden")
    async def forbidden() -> None:
        raise_app_error("Access denied", status_code=403)

    @app.on_event("startup")
    async def _startup() -> None:
        logger.info("Error handler demo starting")

    return app


app = create_app()
