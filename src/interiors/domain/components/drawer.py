"""Drawer content component.

A DRAWERS zone holds a stack of drawer zones, bottom-most first. Each drawer
zone gets an optional overlay front and one or more boxes; the stack is laid
out as if the zone were a small cabinet whose side panels are the
surrounding ``body_thickness``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from ..constants import (
    DEFAULT_DRAWER_BOX_EDGE_BANDING,
    DEFAULT_DRAWER_FRONT_EDGE_BANDING,
    DEFAULT_SHELF_EDGE_BANDING,
    DRAWER_BOTTOM_THICKNESS_MM,
    DRAWER_BOX_HEIGHT_REDUCTION_MM,
    DRAWER_BOX_MIN_SIDE_HEIGHT_MM,
    DRAWER_FRONT_GAP_MM,
    DRAWER_FRONT_MARGIN_MM,
    MAX_BOX_TO_FRONT_RATIO,
    MAX_BOXES_PER_DRAWER_ZONE,
    MAX_DRAWER_ZONES,
    MAX_SHELVES_ABOVE_DRAWER,
    MIN_BOX_TO_FRONT_RATIO,
)
from ..distribution import SizingSpec, distribute
from ..entities import (
    CabinetMetadata,
    DrawerConfig,
    DrawerZone,
    GeneratedPart,
)
from ..value_objects import DrawerSlideType, PartRole
from .context import ComponentContext
from .registry import component_registry
from .results import GenerationResult, HardwareItem, ValidationResult
from .shelf import resolve_shelf_depth

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DrawerSlidePreset:
    """Clearances a slide family needs around the drawer box.

    Attributes:
        label: Display name.
        side_offset: Gap between box side and cabinet side, per side (mm).
        depth_offset: Space left behind the box (mm).
    """

    label: str
    side_offset: float
    depth_offset: float


DRAWER_SLIDE_PRESETS: dict[DrawerSlideType, DrawerSlidePreset] = {
    DrawerSlideType.SIDE_MOUNT: DrawerSlidePreset("Side Mount", 13.0, 50.0),
    DrawerSlideType.UNDERMOUNT: DrawerSlidePreset("Undermount", 21.0, 10.0),
    DrawerSlideType.BOTTOM_MOUNT: DrawerSlidePreset("Bottom Mount", 13.0, 50.0),
    DrawerSlideType.CENTER_MOUNT: DrawerSlidePreset("Center Mount", 0.0, 30.0),
}

# Standard slide lengths in mm
VALID_SLIDE_LENGTHS: list[int] = [250, 300, 350, 400, 450, 500, 550, 600]


@dataclass(frozen=True)
class DrawerBoxDimensions:
    """Resolved size of one drawer box.

    Attributes:
        box_width: Outer width of the box.
        box_depth: Outer depth of the box.
        box_side_height: Height of the box sides.
        bottom_thickness: Thickness of the bottom panel.
    """

    box_width: float
    box_depth: float
    box_side_height: float
    bottom_thickness: float = DRAWER_BOTTOM_THICKNESS_MM


def calculate_box_width(
    cabinet_width: float, body_thickness: float, slide_type: DrawerSlideType
) -> float:
    """Outer drawer box width for a cabinet opening.

    Args:
        cabinet_width: Outer width of the (pseudo) cabinet holding the drawer.
        body_thickness: Cabinet side thickness.
        slide_type: Slide family.

    Returns:
        ``cabinet_width - 2 * body_thickness - 2 * side_offset``.
    """
    preset = DRAWER_SLIDE_PRESETS[slide_type]
    return cabinet_width - 2 * body_thickness - 2 * preset.side_offset


def calculate_box_dimensions(
    cabinet_width: float,
    cabinet_depth: float,
    box_space_height: float,
    body_thickness: float,
    slide_type: DrawerSlideType,
) -> DrawerBoxDimensions:
    """Resolve box width, depth and side height for one box slot."""
    preset = DRAWER_SLIDE_PRESETS[slide_type]
    return DrawerBoxDimensions(
        box_width=calculate_box_width(cabinet_width, body_thickness, slide_type),
        box_depth=cabinet_depth - preset.depth_offset,
        box_side_height=max(
            box_space_height - DRAWER_BOX_HEIGHT_REDUCTION_MM,
            DRAWER_BOX_MIN_SIDE_HEIGHT_MM,
        ),
    )


def select_slide_length(box_depth: float) -> int:
    """Longest standard slide that fits the box depth (shortest if none fits)."""
    fitting = [length for length in VALID_SLIDE_LENGTHS if length <= box_depth]
    return fitting[-1] if fitting else VALID_SLIDE_LENGTHS[0]


def get_total_box_count(config: DrawerConfig) -> int:
    """Number of boxes across all drawer zones."""
    return sum(len(zone.boxes) for zone in config.zones)


def get_front_count(config: DrawerConfig) -> int:
    """Number of drawer zones with a visible front."""
    return sum(1 for zone in config.zones if zone.has_front)


def has_external_fronts(config: DrawerConfig) -> bool:
    return any(zone.has_front for zone in config.zones)


def get_drawer_summary(config: DrawerConfig) -> str:
    """Short description such as '3 drawers (1 internal)'."""
    boxes = get_total_box_count(config)
    if boxes == 0:
        return "no drawers"
    internal = boxes - get_front_count(config)
    noun = "drawer" if boxes == 1 else "drawers"
    if internal > 0:
        return f"{boxes} {noun} ({internal} internal)"
    return f"{boxes} {noun}"


@component_registry.register("drawers.zone")
class DrawersComponent:
    """Generates fronts, boxes and above-box shelves for a DRAWERS zone.

    Layout within the zone bounds (width ``w``, height ``h``):

    - Fronts overlay the surrounding body: together they cover
      ``h + 2t - 2 * FRONT_MARGIN`` split by drawer-zone ratio, every front
      but the top-most shortened by ``FRONT_GAP``.
    - Boxes use ``zone_height * box_to_front_ratio`` from the bottom of each
      drawer zone, split between stacked boxes by their own ratios.
    - A box is closed (gets its own front panel) unless it is the first box
      behind a visible front.
    """

    def validate(
        self, config: DrawerConfig, context: ComponentContext
    ) -> ValidationResult:
        errors: list[str] = []
        warnings: list[str] = []

        if not config.zones:
            warnings.append("Drawer configuration has no drawer zones")
        if len(config.zones) > MAX_DRAWER_ZONES:
            errors.append(
                f"Drawer zone count {len(config.zones)} exceeds maximum of "
                f"{MAX_DRAWER_ZONES}"
            )

        for index, zone in enumerate(config.zones):
            label = f"Drawer zone {index + 1}"
            if zone.height_ratio <= 0:
                errors.append(f"{label}: height ratio must be positive")
            if not zone.boxes:
                errors.append(f"{label}: at least one box is required")
            if len(zone.boxes) > MAX_BOXES_PER_DRAWER_ZONE:
                errors.append(
                    f"{label}: box count {len(zone.boxes)} exceeds maximum of "
                    f"{MAX_BOXES_PER_DRAWER_ZONE}"
                )
            if any(box.height_ratio <= 0 for box in zone.boxes):
                errors.append(f"{label}: box height ratios must be positive")
            ratio = zone.effective_box_ratio
            if not MIN_BOX_TO_FRONT_RATIO <= ratio <= MAX_BOX_TO_FRONT_RATIO:
                errors.append(
                    f"{label}: box-to-front ratio {ratio} must be between "
                    f"{MIN_BOX_TO_FRONT_RATIO} and {MAX_BOX_TO_FRONT_RATIO}"
                )
            shelves = zone.above_box_shelves
            if len(shelves) > MAX_SHELVES_ABOVE_DRAWER:
                errors.append(
                    f"{label}: {len(shelves)} shelves above the box exceed maximum "
                    f"of {MAX_SHELVES_ABOVE_DRAWER}"
                )
            if shelves and ratio >= 1.0:
                warnings.append(
                    f"{label}: shelves above the box are ignored when the box "
                    "fills the whole zone"
                )

        box_width = calculate_box_width(
            context.bounds.width + 2 * context.body_thickness,
            context.body_thickness,
            config.slide_type,
        )
        if config.zones and box_width - 2 * context.body_thickness <= 0:
            errors.append(
                f"Zone width {context.bounds.width:.0f}mm is too narrow for "
                f"{DRAWER_SLIDE_PRESETS[config.slide_type].label} drawer boxes"
            )

        return ValidationResult.from_lists(errors, warnings)

    def generate(
        self, config: DrawerConfig, context: ComponentContext
    ) -> GenerationResult:
        if not config.zones:
            return GenerationResult.empty()

        bounds = context.bounds
        t = context.body_thickness
        ratios = [SizingSpec(ratio=zone.height_ratio) for zone in config.zones]
        interior_heights = distribute(bounds.height, ratios)
        front_heights = distribute(
            bounds.height + 2 * t - 2 * DRAWER_FRONT_MARGIN_MM, ratios
        )

        parts: list[GeneratedPart] = []
        box_y = bounds.start_y
        front_y = bounds.start_y - t + DRAWER_FRONT_MARGIN_MM
        box_number = 0
        last_index = len(config.zones) - 1

        for zone_index, zone in enumerate(config.zones):
            zone_height = interior_heights[zone_index]
            front_height = front_heights[zone_index]

            gap = DRAWER_FRONT_GAP_MM if zone_index < last_index else 0.0
            visible_height = front_height - gap
            if zone.has_front and visible_height > 0:
                parts.append(
                    self._front_part(
                        config, zone, zone_index, visible_height, front_y, context
                    )
                )

            box_space = zone_height * zone.effective_box_ratio
            box_heights = distribute(
                box_space, [SizingSpec(ratio=box.height_ratio) for box in zone.boxes]
            )
            y = box_y
            for box_index, box_height in enumerate(box_heights):
                closed = box_index > 0 if zone.has_front else True
                parts.extend(
                    self._box_parts(config, box_number, y, box_height, closed, context)
                )
                y += box_height
                box_number += 1

            if zone.above_box_shelves and zone.effective_box_ratio < 1.0:
                parts.extend(
                    self._above_box_shelves(
                        config, zone, zone_index, y, zone_height - box_space, context
                    )
                )

            box_y += zone_height
            front_y += front_height

        logger.debug(
            f"Generated {len(parts)} drawer parts for zone {context.zone_id}"
        )
        return GenerationResult(
            parts=tuple(parts), hardware=tuple(self.hardware(config, context))
        )

    def hardware(
        self, config: DrawerConfig, context: ComponentContext
    ) -> list[HardwareItem]:
        boxes = get_total_box_count(config)
        if boxes == 0:
            return []
        preset = DRAWER_SLIDE_PRESETS[config.slide_type]
        length = select_slide_length(context.cabinet_depth - preset.depth_offset)
        return [
            HardwareItem(
                name=f"{preset.label} Drawer Slide Pair",
                quantity=boxes,
                notes=f"{length}mm",
            )
        ]

    def _front_part(
        self,
        config: DrawerConfig,
        zone: DrawerZone,
        zone_index: int,
        height: float,
        bottom_y: float,
        context: ComponentContext,
    ) -> GeneratedPart:
        bounds = context.bounds
        width = bounds.width + 2 * context.body_thickness - 2 * DRAWER_FRONT_MARGIN_MM
        front_thickness = context.cabinet.front_thickness
        material_id = (
            (zone.front.material_id if zone.front else None)
            or config.front_material_id
            or context.cabinet.front_material_id
        )
        return GeneratedPart(
            name=f"Drawer front {zone_index + 1}",
            width=width,
            height=height,
            depth=front_thickness,
            position=(
                bounds.center_x,
                bottom_y + height / 2,
                context.cabinet_depth / 2 + front_thickness / 2,
            ),
            rotation=(0.0, 0.0, 0.0),
            material_id=material_id,
            edge_banding=DEFAULT_DRAWER_FRONT_EDGE_BANDING,
            cabinet_metadata=CabinetMetadata(
                cabinet_id=context.cabinet_id,
                role=PartRole.DRAWER_FRONT,
                index=zone_index,
                drawer_index=zone_index,
                zone_id=context.zone_id,
            ),
        )

    def _box_parts(
        self,
        config: DrawerConfig,
        box_number: int,
        space_y: float,
        space_height: float,
        closed: bool,
        context: ComponentContext,
    ) -> list[GeneratedPart]:
        bounds = context.bounds
        t = context.body_thickness
        dims = calculate_box_dimensions(
            bounds.width + 2 * t,
            context.cabinet_depth,
            space_height,
            t,
            config.slide_type,
        )
        box_material = config.box_material_id or context.cabinet.body_material_id
        bottom_material = (
            config.bottom_material_id
            or context.cabinet.bottom_material_id
            or box_material
        )

        cx = bounds.center_x
        bottom_y = space_y + (space_height - dims.box_side_height) / 2
        cy = bottom_y + dims.box_side_height / 2
        cz = context.cabinet_depth / 2 - dims.box_depth / 2
        inner_width = dims.box_width - 2 * t
        label = f"Drawer {box_number + 1}"

        def part(
            name: str,
            role: PartRole,
            width: float,
            height: float,
            thickness: float,
            position: tuple[float, float, float],
            rotation: tuple[float, float, float],
            material_id: str,
        ) -> GeneratedPart:
            return GeneratedPart(
                name=f"{label} {name}",
                width=width,
                height=height,
                depth=thickness,
                position=position,
                rotation=rotation,
                material_id=material_id,
                edge_banding=DEFAULT_DRAWER_BOX_EDGE_BANDING,
                cabinet_metadata=CabinetMetadata(
                    cabinet_id=context.cabinet_id,
                    role=role,
                    drawer_index=box_number,
                    zone_id=context.zone_id,
                ),
            )

        # Closed boxes hold the bottom between back and box front; open boxes
        # run the bottom forward to the front edge of the sides.
        bottom_depth = dims.box_depth - (2 * t if closed else t)
        bottom_z = cz if closed else cz + t / 2

        parts = [
            part(
                "bottom",
                PartRole.DRAWER_BOTTOM,
                inner_width,
                bottom_depth,
                dims.bottom_thickness,
                (cx, bottom_y + dims.bottom_thickness / 2, bottom_z),
                (-math.pi / 2, 0.0, 0.0),
                bottom_material,
            ),
            part(
                "left side",
                PartRole.DRAWER_SIDE_LEFT,
                dims.box_depth,
                dims.box_side_height,
                t,
                (cx - dims.box_width / 2 + t / 2, cy, cz),
                (0.0, math.pi / 2, 0.0),
                box_material,
            ),
            part(
                "right side",
                PartRole.DRAWER_SIDE_RIGHT,
                dims.box_depth,
                dims.box_side_height,
                t,
                (cx + dims.box_width / 2 - t / 2, cy, cz),
                (0.0, math.pi / 2, 0.0),
                box_material,
            ),
            part(
                "back",
                PartRole.DRAWER_BACK,
                inner_width,
                dims.box_side_height,
                t,
                (cx, cy, cz - dims.box_depth / 2 + t / 2),
                (0.0, 0.0, 0.0),
                box_material,
            ),
        ]
        if closed:
            parts.append(
                part(
                    "box front",
                    PartRole.DRAWER_BOX_FRONT,
                    inner_width,
                    dims.box_side_height,
                    t,
                    (cx, cy, cz + dims.box_depth / 2 - t / 2),
                    (0.0, 0.0, 0.0),
                    box_material,
                )
            )
        return parts

    def _above_box_shelves(
        self,
        config: DrawerConfig,
        zone: DrawerZone,
        zone_index: int,
        box_top_y: float,
        space_height: float,
        context: ComponentContext,
    ) -> list[GeneratedPart]:
        """Shelves above a shortened box: first at the box top, the rest at i/n.

        Shelves share the box material.
        """
        material_id = config.box_material_id or context.cabinet.body_material_id
        shelves = zone.above_box_shelves
        count = len(shelves)
        parts: list[GeneratedPart] = []
        for index, shelf in enumerate(shelves):
            offset = 0.0 if index == 0 else index / count * space_height
            shelf_depth = resolve_shelf_depth(
                shelf.depth_preset, shelf.custom_depth_mm, context.cabinet_depth
            )
            parts.append(
                GeneratedPart(
                    name=f"Shelf {index + 1} above drawer {zone_index + 1}",
                    width=context.bounds.width,
                    height=shelf_depth,
                    depth=context.body_thickness,
                    position=(
                        context.bounds.center_x,
                        box_top_y + offset,
                        -(context.cabinet_depth - shelf_depth) / 2,
                    ),
                    rotation=(-math.pi / 2, 0.0, 0.0),
                    material_id=material_id,
                    edge_banding=DEFAULT_SHELF_EDGE_BANDING,
                    cabinet_metadata=CabinetMetadata(
                        cabinet_id=context.cabinet_id,
                        role=PartRole.SHELF,
                        index=index,
                        drawer_index=zone_index,
                        zone_id=context.zone_id,
                    ),
                )
            )
        return parts
