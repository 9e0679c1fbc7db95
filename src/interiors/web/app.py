"""FastAPI application factory for the interior generator."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from interiors import __version__
from interiors.web.exceptions import register_exception_handlers
from interiors.web.routers import generate_router, validate_router

API_PREFIX = "/api/v1"


def create_app(allowed_origins: list[str] | None = None) -> FastAPI:
    """Build the API with generation and validation routes.

    Args:
        allowed_origins: CORS origins; every origin is allowed when None.
    """
    app = FastAPI(
        title="Cabinet Interior API",
        description="Lay out zone trees and generate interior parts for cabinets",
        version=__version__,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins or ["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    for router in (generate_router, validate_router):
        app.include_router(router, prefix=API_PREFIX)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    return app


# Instance served by uvicorn: `uvicorn interiors.web.app:app`
app = create_app()
