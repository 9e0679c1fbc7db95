"""Pydantic request schemas for the REST API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class GenerateRequest(BaseModel):
    """Request for generating an interior from a configuration document."""

    config: dict[str, Any] = Field(..., description="Interior configuration JSON")


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration document."""

    config: dict[str, Any] = Field(..., description="Interior configuration JSON")
