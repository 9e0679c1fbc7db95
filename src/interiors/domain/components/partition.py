"""Partition content component.

A partition is the vertical panel filling the slot between two side-by-side
children of a VERTICAL zone. It is generated from the slot bounds resolved by
the bounds calculator.
"""

from __future__ import annotations

import math

from ..constants import (
    DEFAULT_PARTITION_EDGE_BANDING,
    PARTITION_DEPTH_MIN_MM,
    SHELF_FRONT_SETBACK_MM,
)
from ..entities import CabinetMetadata, GeneratedPart, PartitionConfig
from ..value_objects import PartitionDepthPreset, PartRole
from .context import ComponentContext
from .registry import component_registry
from .results import GenerationResult, HardwareItem, ValidationResult

SCREWS_PER_PARTITION = 4


@component_registry.register("partition.vertical")
class PartitionComponent:
    """Generates one rectangular panel per enabled partition.

    ``context.bounds`` is the partition slot: its width is the body
    thickness and its ``depth_mm`` the resolved partition depth. The panel
    sits against the back of the cabinet.
    """

    def validate(
        self, config: PartitionConfig, context: ComponentContext
    ) -> ValidationResult:
        errors: list[str] = []
        warnings: list[str] = []

        max_depth = context.cabinet_depth - SHELF_FRONT_SETBACK_MM
        if config.depth_preset == PartitionDepthPreset.CUSTOM:
            custom = config.custom_depth_mm
            if custom is None:
                warnings.append(
                    f"Partition '{config.id}': CUSTOM depth not set, using half depth"
                )
            elif custom < PARTITION_DEPTH_MIN_MM:
                errors.append(
                    f"Partition '{config.id}': custom depth {custom:.0f}mm is below "
                    f"the minimum of {PARTITION_DEPTH_MIN_MM:.0f}mm"
                )
            elif custom > max_depth:
                warnings.append(
                    f"Partition '{config.id}': custom depth {custom:.0f}mm will be "
                    f"clamped to {max_depth:.0f}mm"
                )

        return ValidationResult.from_lists(errors, warnings)

    def generate(
        self, config: PartitionConfig, context: ComponentContext
    ) -> GenerationResult:
        bounds = context.bounds
        depth_mm = bounds.depth_mm
        part = GeneratedPart(
            name="Partition",
            width=depth_mm,
            height=bounds.height,
            depth=context.body_thickness,
            position=(
                bounds.center_x,
                bounds.center_y,
                -(context.cabinet_depth - depth_mm) / 2,
            ),
            rotation=(0.0, math.pi / 2, 0.0),
            material_id=config.material_id or context.cabinet.body_material_id,
            edge_banding=DEFAULT_PARTITION_EDGE_BANDING,
            cabinet_metadata=CabinetMetadata(
                cabinet_id=context.cabinet_id,
                role=PartRole.PARTITION,
                zone_id=context.zone_id,
            ),
        )
        return GenerationResult(
            parts=(part,), hardware=tuple(self.hardware(config, context))
        )

    def hardware(
        self, config: PartitionConfig, context: ComponentContext
    ) -> list[HardwareItem]:
        return [HardwareItem(name="Confirmat Screw", quantity=SCREWS_PER_PARTITION)]
