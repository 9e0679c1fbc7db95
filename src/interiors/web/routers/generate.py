"""Interior generation endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from interiors.application.config import load_config_from_dict
from interiors.web.dependencies import GenerateCommandDep
from interiors.web.exceptions import InteriorGenerationError
from interiors.web.schemas.requests import GenerateRequest
from interiors.web.schemas.responses import InteriorOutputSchema

router = APIRouter(prefix="/generate", tags=["generate"])


@router.post("", response_model=InteriorOutputSchema)
async def generate_interior(
    request: GenerateRequest,
    command: GenerateCommandDep,
) -> InteriorOutputSchema:
    """Generate interior parts from a configuration document.

    Raises:
        ConfigError: If the configuration does not validate (HTTP 422).
        InteriorGenerationError: If the zone tree has violations (HTTP 422).
    """
    config = load_config_from_dict(request.config)
    output = command.execute_config(config)
    if not output.is_valid:
        raise InteriorGenerationError(output.errors)

    return InteriorOutputSchema.model_validate(output.to_dict())
