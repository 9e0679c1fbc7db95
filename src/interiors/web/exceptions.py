"""Exceptions and error handlers for the REST API.

Every error body has the same shape: ``error`` (message), ``error_type``
and ``details``.
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from interiors.application.config import ConfigError


class InteriorGenerationError(Exception):
    """Raised when the zone tree has violations and no parts were generated."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Generation failed: {errors}")


def _error_response(
    status_code: int, error: str, error_type: str, details: Any
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "error_type": error_type, "details": details},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Map configuration and generation errors to 422 responses."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        # error_type is "validation" or "version" for in-memory documents
        return _error_response(422, exc.message, exc.error_type, exc.details)

    @app.exception_handler(InteriorGenerationError)
    async def generation_error_handler(
        request: Request, exc: InteriorGenerationError
    ) -> JSONResponse:
        return _error_response(
            422,
            "Interior generation failed",
            "generation",
            [{"message": message} for message in exc.errors],
        )
