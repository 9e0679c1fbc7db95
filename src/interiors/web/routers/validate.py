"""Configuration validation endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from interiors.application.config import load_config_from_dict
from interiors.web.dependencies import ValidateCommandDep
from interiors.web.schemas.requests import ConfigValidateRequest
from interiors.web.schemas.responses import ValidationResultSchema, ViolationSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
    command: ValidateCommandDep,
) -> ValidationResultSchema:
    """Validate a configuration without generating parts."""
    config = load_config_from_dict(request.config)
    report = command.execute(config)
    return ValidationResultSchema(
        is_valid=report.valid,
        errors=[
            ViolationSchema(zone_id=v.zone_id, message=v.message, kind=v.kind)
            for v in report.violations
        ],
        warnings=[
            ViolationSchema(zone_id=w.zone_id, message=w.message, kind=w.kind)
            for w in report.warnings
        ],
    )
