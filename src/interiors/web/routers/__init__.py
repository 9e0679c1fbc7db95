"""API routers for the REST API."""

from interiors.web.routers.generate import router as generate_router
from interiors.web.routers.validate import router as validate_router

__all__ = ["generate_router", "validate_router"]
