"""Pure edits of a DRAWERS zone's configuration.

Drawer slots are addressed by id, boxes by index within their slot. Edits
that would break a limit (too many slots, boxes or shelves, or removing the
last slot or box) return the configuration unchanged.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from ..constants import (
    MAX_BOX_TO_FRONT_RATIO,
    MAX_BOXES_PER_DRAWER_ZONE,
    MAX_DRAWER_ZONES,
    MAX_SHELVES_ABOVE_DRAWER,
    MIN_BOX_TO_FRONT_RATIO,
)
from ..entities import (
    AboveBoxContent,
    AboveBoxShelf,
    DrawerConfig,
    DrawerZone,
    DrawerZoneBox,
    DrawerZoneFront,
)
from ..value_objects import DrawerSlideType, ShelfDepthPreset
from .zone_factory import create_drawer_zone, generate_zone_id

MIN_HEIGHT_RATIO = 0.1
MAX_HEIGHT_RATIO = 10.0


def _find_drawer_zone(config: DrawerConfig, zone_id: str) -> DrawerZone | None:
    return next((zone for zone in config.zones if zone.id == zone_id), None)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def add_drawer_zone(
    config: DrawerConfig, zone: DrawerZone | None = None
) -> DrawerConfig:
    """Append a drawer slot on top of the stack.

    Args:
        config: Configuration to edit.
        zone: Slot to append; a fronted single-box slot when None.
    """
    if len(config.zones) >= MAX_DRAWER_ZONES:
        return config
    return replace(config, zones=config.zones + (zone or create_drawer_zone(),))


def remove_drawer_zone(config: DrawerConfig, zone_id: str) -> DrawerConfig:
    """Remove a drawer slot; the last remaining slot is kept."""
    if len(config.zones) <= 1:
        return config
    zones = tuple(zone for zone in config.zones if zone.id != zone_id)
    if len(zones) == len(config.zones):
        return config
    return replace(config, zones=zones)


def update_drawer_zone(
    config: DrawerConfig, zone_id: str, **changes: Any
) -> DrawerConfig:
    """Apply ``changes`` to the slot with ``zone_id``."""
    if _find_drawer_zone(config, zone_id) is None:
        return config
    return replace(
        config,
        zones=tuple(
            replace(zone, **changes) if zone.id == zone_id else zone
            for zone in config.zones
        ),
    )


def move_drawer_zone(
    config: DrawerConfig, zone_id: str, up: bool = True
) -> DrawerConfig:
    """Swap a slot with its neighbour above (or below when ``up`` is False)."""
    index = next((i for i, z in enumerate(config.zones) if z.id == zone_id), None)
    if index is None:
        return config
    target = index + 1 if up else index - 1
    if not 0 <= target < len(config.zones):
        return config
    zones = list(config.zones)
    zones[index], zones[target] = zones[target], zones[index]
    return replace(config, zones=tuple(zones))


def set_drawer_zone_height_ratio(
    config: DrawerConfig, zone_id: str, ratio: float
) -> DrawerConfig:
    """Set a slot's share of the stack height, clamped to 0.1-10."""
    return update_drawer_zone(
        config,
        zone_id,
        height_ratio=_clamp(ratio, MIN_HEIGHT_RATIO, MAX_HEIGHT_RATIO),
    )


def toggle_drawer_front(config: DrawerConfig, zone_id: str) -> DrawerConfig:
    """Turn an external drawer internal, or give an internal drawer a front."""
    zone = _find_drawer_zone(config, zone_id)
    if zone is None:
        return config
    front = DrawerZoneFront() if zone.front is None else None
    return update_drawer_zone(config, zone_id, front=front)


def set_box_to_front_ratio(
    config: DrawerConfig, zone_id: str, ratio: float
) -> DrawerConfig:
    return update_drawer_zone(
        config,
        zone_id,
        box_to_front_ratio=_clamp(
            ratio, MIN_BOX_TO_FRONT_RATIO, MAX_BOX_TO_FRONT_RATIO
        ),
    )


def add_drawer_box(config: DrawerConfig, zone_id: str) -> DrawerConfig:
    """Stack another box in a slot, up to the per-slot limit."""
    zone = _find_drawer_zone(config, zone_id)
    if zone is None or len(zone.boxes) >= MAX_BOXES_PER_DRAWER_ZONE:
        return config
    return update_drawer_zone(config, zone_id, boxes=zone.boxes + (DrawerZoneBox(),))


def remove_drawer_box(config: DrawerConfig, zone_id: str, index: int) -> DrawerConfig:
    """Remove the box at ``index``; a slot always keeps one box."""
    zone = _find_drawer_zone(config, zone_id)
    if zone is None or len(zone.boxes) <= 1 or not 0 <= index < len(zone.boxes):
        return config
    boxes = zone.boxes[:index] + zone.boxes[index + 1 :]
    return update_drawer_zone(config, zone_id, boxes=boxes)


def set_box_height_ratio(
    config: DrawerConfig, zone_id: str, index: int, ratio: float
) -> DrawerConfig:
    """Set the share of one box within its slot's box space (at least 0.1)."""
    zone = _find_drawer_zone(config, zone_id)
    if zone is None or not 0 <= index < len(zone.boxes):
        return config
    boxes = list(zone.boxes)
    boxes[index] = replace(boxes[index], height_ratio=max(MIN_HEIGHT_RATIO, ratio))
    return update_drawer_zone(config, zone_id, boxes=tuple(boxes))


def add_above_box_shelf(
    config: DrawerConfig,
    zone_id: str,
    depth_preset: ShelfDepthPreset = ShelfDepthPreset.FULL,
) -> DrawerConfig:
    """Add a shelf in the space above a slot's boxes."""
    zone = _find_drawer_zone(config, zone_id)
    if zone is None or len(zone.above_box_shelves) >= MAX_SHELVES_ABOVE_DRAWER:
        return config
    shelf = AboveBoxShelf(id=generate_zone_id("shelf"), depth_preset=depth_preset)
    return update_drawer_zone(
        config,
        zone_id,
        above_box_content=AboveBoxContent(shelves=zone.above_box_shelves + (shelf,)),
    )


def remove_above_box_shelf(
    config: DrawerConfig, zone_id: str, shelf_id: str
) -> DrawerConfig:
    """Remove an above-box shelf; the content is dropped with the last shelf."""
    zone = _find_drawer_zone(config, zone_id)
    if zone is None or zone.above_box_content is None:
        return config
    shelves = tuple(s for s in zone.above_box_shelves if s.id != shelf_id)
    content = AboveBoxContent(shelves=shelves) if shelves else None
    return update_drawer_zone(config, zone_id, above_box_content=content)


def set_slide_type(config: DrawerConfig, slide_type: DrawerSlideType) -> DrawerConfig:
    return replace(config, slide_type=slide_type)


def convert_to_internal(config: DrawerConfig) -> DrawerConfig:
    """Remove every front, hiding all drawers behind a door."""
    return replace(config, zones=tuple(replace(z, front=None) for z in config.zones))


def convert_to_external(config: DrawerConfig) -> DrawerConfig:
    """Give every internal drawer a front; existing fronts are kept."""
    return replace(
        config,
        zones=tuple(
            z if z.front is not None else replace(z, front=DrawerZoneFront())
            for z in config.zones
        ),
    )
