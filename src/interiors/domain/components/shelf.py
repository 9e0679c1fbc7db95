"""Shelf content component.

Places ``count`` shelves across a SHELVES zone. Shelf ``i`` sits at
``i / count`` of the zone height measured from the zone bottom, except a
single shelf which sits at mid-height.
"""

from __future__ import annotations

import math

from ..constants import (
    CUSTOM_SHELF_DEPTH_MAX_MM,
    CUSTOM_SHELF_DEPTH_MIN_MM,
    DEFAULT_SHELF_EDGE_BANDING,
    MAX_SHELVES_PER_ZONE,
    SHELF_FRONT_SETBACK_MM,
    SINGLE_SHELF_POSITION,
)
from ..distribution import round_half_up
from ..entities import CabinetMetadata, GeneratedPart, ShelvesConfig
from ..value_objects import PartRole, ShelfDepthPreset, ShelvesMode
from .context import ComponentContext
from .registry import component_registry
from .results import GenerationResult, HardwareItem, ValidationResult

PINS_PER_SHELF = 4


def resolve_shelf_depth(
    preset: ShelfDepthPreset,
    custom_depth_mm: float | None,
    cabinet_depth: float,
) -> float:
    """Resolve how far a shelf reaches into the cabinet.

    Args:
        preset: FULL, HALF or CUSTOM.
        custom_depth_mm: Depth for the CUSTOM preset; HALF is used when None.
        cabinet_depth: Outer cabinet depth in mm.

    Returns:
        Shelf depth in mm. CUSTOM values are clamped to
        ``[CUSTOM_SHELF_DEPTH_MIN_MM, cabinet_depth - SHELF_FRONT_SETBACK_MM]``.
    """
    full_depth = cabinet_depth - SHELF_FRONT_SETBACK_MM
    half_depth = float(round_half_up(full_depth / 2))
    if preset == ShelfDepthPreset.HALF:
        return half_depth
    if preset == ShelfDepthPreset.CUSTOM:
        if custom_depth_mm is None:
            return half_depth
        return float(min(max(custom_depth_mm, CUSTOM_SHELF_DEPTH_MIN_MM), full_depth))
    return full_depth


def shelf_position_ratio(index: int, count: int) -> float:
    """Fraction of the zone height at which shelf ``index`` sits."""
    if count == 1:
        return SINGLE_SHELF_POSITION
    return index / count


def _effective_depth_settings(
    config: ShelvesConfig, index: int
) -> tuple[ShelfDepthPreset, float | None]:
    override = config.shelf_override(index)
    if override is None:
        return config.depth_preset, config.custom_depth_mm
    preset = override.depth_preset or config.depth_preset
    custom = (
        override.custom_depth_mm
        if override.custom_depth_mm is not None
        else config.custom_depth_mm
    )
    return preset, custom


def _effective_material(
    config: ShelvesConfig, index: int, context: ComponentContext
) -> str:
    override = config.shelf_override(index)
    if override is not None and override.material_id:
        return override.material_id
    return config.material_id or context.cabinet.body_material_id


@component_registry.register("shelves.zone")
class ShelvesComponent:
    """Generates shelf panels for a SHELVES zone.

    Shelves span the full zone width, are ``body_thickness`` thick and sit
    flush against the cabinet back: the shelf center is at
    ``z = -(cabinet_depth - shelf_depth) / 2``, so shallower shelves leave
    the gap at the front.
    """

    def validate(
        self, config: ShelvesConfig, context: ComponentContext
    ) -> ValidationResult:
        errors: list[str] = []
        warnings: list[str] = []

        if config.count > MAX_SHELVES_PER_ZONE:
            errors.append(
                f"Shelf count {config.count} exceeds maximum of {MAX_SHELVES_PER_ZONE}"
            )

        customs: list[tuple[str, float | None]] = []
        if config.depth_preset == ShelfDepthPreset.CUSTOM:
            customs.append(("Zone", config.custom_depth_mm))
        if config.mode == ShelvesMode.MANUAL:
            if len(config.shelves) != config.count:
                errors.append(
                    f"MANUAL shelves define {len(config.shelves)} overrides "
                    f"for {config.count} shelves"
                )
            for index, shelf in enumerate(config.shelves):
                if shelf.depth_preset == ShelfDepthPreset.CUSTOM:
                    customs.append((f"Shelf {index + 1}", shelf.custom_depth_mm))

        full_depth = context.cabinet_depth - SHELF_FRONT_SETBACK_MM
        for label, custom in customs:
            if custom is None:
                warnings.append(f"{label}: CUSTOM depth not set, using half depth")
            elif not CUSTOM_SHELF_DEPTH_MIN_MM <= custom <= CUSTOM_SHELF_DEPTH_MAX_MM:
                errors.append(
                    f"{label}: custom depth {custom:.0f}mm must be between "
                    f"{CUSTOM_SHELF_DEPTH_MIN_MM:.0f}mm and "
                    f"{CUSTOM_SHELF_DEPTH_MAX_MM:.0f}mm"
                )
            elif custom > full_depth:
                warnings.append(
                    f"{label}: custom depth {custom:.0f}mm exceeds usable depth "
                    f"{full_depth:.0f}mm and will be clamped"
                )

        return ValidationResult.from_lists(errors, warnings)

    def generate(
        self, config: ShelvesConfig, context: ComponentContext
    ) -> GenerationResult:
        parts = self.build_parts(config, context)
        return GenerationResult(
            parts=tuple(parts), hardware=tuple(self.hardware(config, context))
        )

    def build_parts(
        self, config: ShelvesConfig, context: ComponentContext
    ) -> list[GeneratedPart]:
        """Build one part per shelf, bottom-most first."""
        bounds = context.bounds
        parts: list[GeneratedPart] = []

        for index in range(config.count):
            preset, custom = _effective_depth_settings(config, index)
            shelf_depth = resolve_shelf_depth(preset, custom, context.cabinet_depth)
            y = bounds.start_y + shelf_position_ratio(index, config.count) * bounds.height
            z = -(context.cabinet_depth - shelf_depth) / 2

            parts.append(
                GeneratedPart(
                    name=f"Shelf {index + 1}",
                    width=bounds.width,
                    height=shelf_depth,
                    depth=context.body_thickness,
                    position=(bounds.center_x, y, z),
                    rotation=(-math.pi / 2, 0.0, 0.0),
                    material_id=_effective_material(config, index, context),
                    edge_banding=DEFAULT_SHELF_EDGE_BANDING,
                    cabinet_metadata=CabinetMetadata(
                        cabinet_id=context.cabinet_id,
                        role=PartRole.SHELF,
                        index=index,
                        zone_id=context.zone_id,
                    ),
                )
            )

        return parts

    def hardware(
        self, config: ShelvesConfig, context: ComponentContext
    ) -> list[HardwareItem]:
        if config.count == 0:
            return []
        return [
            HardwareItem(
                name="Shelf Support Pin",
                quantity=PINS_PER_SHELF * config.count,
                notes="5mm pins",
            )
        ]
