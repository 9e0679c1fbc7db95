"""Pydantic response schemas for the REST API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class PartSchema(BaseModel):
    """A generated panel."""

    name: str = Field(..., description="Part label")
    role: str = Field(..., description="Cut-list role, e.g. SHELF")
    shape_type: str = Field(default="RECT", description="Outline shape")
    shape_params: dict[str, Any] = Field(default_factory=dict, description="Shape size")
    width: float = Field(..., description="Face width in mm")
    height: float = Field(..., description="Face height in mm")
    depth: float = Field(..., description="Panel thickness in mm")
    position: list[float] = Field(..., description="Center (x, y, z) in mm")
    rotation: list[float] = Field(..., description="Rotation (rx, ry, rz) in radians")
    material_id: str = Field(..., description="Material identifier")
    cabinet_metadata: dict[str, Any] = Field(..., description="Role and indices")
    edge_banding: dict[str, bool] = Field(..., description="Banded edges")


class HardwareItemSchema(BaseModel):
    name: str
    quantity: int
    sku: str | None = None
    notes: str | None = None


class CabinetSummarySchema(BaseModel):
    id: str
    width: float
    height: float
    depth: float
    body_thickness: float


class InteriorOutputSchema(BaseModel):
    """Response for interior generation."""

    cabinet: CabinetSummarySchema
    summary: str = Field(..., description="Interior summary")
    parts: list[PartSchema] = Field(default_factory=list)
    hardware: list[HardwareItemSchema] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class ViolationSchema(BaseModel):
    zone_id: str
    message: str
    kind: str


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether the configuration is valid")
    errors: list[ViolationSchema] = Field(default_factory=list)
    warnings: list[ViolationSchema] = Field(default_factory=list)
