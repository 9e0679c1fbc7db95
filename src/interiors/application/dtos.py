"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any

from interiors.domain.components import HardwareItem
from interiors.domain.entities import CabinetSpec, GeneratedPart


@dataclass
class InteriorOutput:
    """Output DTO containing generated interior parts.

    Attributes:
        cabinet: Cabinet the interior was generated for.
        parts: Generated parts in generation order.
        hardware: Hardware the parts need.
        summary: Short description such as '3 shelves, 1 partition'.
        errors: Validation errors; no parts are generated when present.
        warnings: Non-blocking validation warnings.
    """

    cabinet: CabinetSpec
    parts: list[GeneratedPart] = field(default_factory=list)
    hardware: list[HardwareItem] = field(default_factory=list)
    summary: str = ""
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the interior was generated successfully."""
        return len(self.errors) == 0

    @property
    def total_area_m2(self) -> float:
        return sum(part.area for part in self.parts) / 1_000_000

    def area_by_material(self) -> dict[str, float]:
        """Panel face area in square meters grouped by material id."""
        areas: dict[str, float] = defaultdict(float)
        for part in self.parts:
            areas[part.material_id] += part.area / 1_000_000
        return dict(areas)

    def to_dict(self) -> dict[str, Any]:
        return {
            "cabinet": {
                "id": self.cabinet.cabinet_id,
                "width": self.cabinet.width,
                "height": self.cabinet.height,
                "depth": self.cabinet.depth,
                "body_thickness": self.cabinet.body_thickness,
            },
            "summary": self.summary,
            "parts": [part.to_dict() for part in self.parts],
            "hardware": [
                {
                    "name": item.name,
                    "quantity": item.quantity,
                    "sku": item.sku,
                    "notes": item.notes,
                }
                for item in self.hardware
            ],
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }
