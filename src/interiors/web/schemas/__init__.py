"""Request and response schemas for the REST API."""

from interiors.web.schemas.requests import ConfigValidateRequest, GenerateRequest
from interiors.web.schemas.responses import (
    CabinetSummarySchema,
    HardwareItemSchema,
    InteriorOutputSchema,
    PartSchema,
    ValidationResultSchema,
    ViolationSchema,
)

__all__ = [
    "CabinetSummarySchema",
    "ConfigValidateRequest",
    "GenerateRequest",
    "HardwareItemSchema",
    "InteriorOutputSchema",
    "PartSchema",
    "ValidationResultSchema",
    "ViolationSchema",
]
