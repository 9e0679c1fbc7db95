"""Factories for zones, partitions and preset interiors.

Editor defaults such as the last-used materials are passed in explicitly as
``ZonePreferences`` instead of being read from shared state.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, replace

from ..entities import (
    CabinetInteriorConfig,
    DrawerConfig,
    DrawerZone,
    DrawerZoneBox,
    DrawerZoneFront,
    PartitionConfig,
    ShelvesConfig,
    Zone,
)
from ..value_objects import (
    DivisionDirection,
    DrawerSlideType,
    HeightConfig,
    PartitionDepthPreset,
    ShelfDepthPreset,
    WidthConfig,
    ZoneContentType,
)


@dataclass(frozen=True)
class ZonePreferences:
    """Defaults applied to newly created zones.

    Attributes:
        shelf_count: Shelves in a new SHELVES zone.
        shelf_depth_preset: Depth preset of new shelves.
        shelf_material_id: Material override of new shelves.
        drawer_count: Drawer zones in a new DRAWERS zone.
        slide_type: Slide family of new drawers.
        box_material_id: Box material override of new drawers.
        bottom_material_id: Bottom material override of new drawers.
        front_material_id: Front material override of new drawers.
    """

    shelf_count: int = 2
    shelf_depth_preset: ShelfDepthPreset = ShelfDepthPreset.FULL
    shelf_material_id: str | None = None
    drawer_count: int = 2
    slide_type: DrawerSlideType = DrawerSlideType.SIDE_MOUNT
    box_material_id: str | None = None
    bottom_material_id: str | None = None
    front_material_id: str | None = None


DEFAULT_PREFERENCES = ZonePreferences()


def generate_zone_id(prefix: str = "zone") -> str:
    """Generate a short unique id such as 'zone-1a2b3c4d'."""
    return f"{prefix}-{uuid.uuid4().hex[:8]}"


def create_partition(
    depth_preset: PartitionDepthPreset = PartitionDepthPreset.FULL,
    enabled: bool = False,
    custom_depth_mm: float | None = None,
) -> PartitionConfig:
    """Create a partition; new dividers start disabled like in the editor."""
    return PartitionConfig(
        id=generate_zone_id("partition"),
        depth_preset=depth_preset,
        custom_depth_mm=custom_depth_mm,
        enabled=enabled,
    )


def create_shelves_config(
    preferences: ZonePreferences = DEFAULT_PREFERENCES,
    count: int | None = None,
) -> ShelvesConfig:
    return ShelvesConfig(
        count=preferences.shelf_count if count is None else count,
        depth_preset=preferences.shelf_depth_preset,
        material_id=preferences.shelf_material_id,
    )


def create_drawer_zone(with_front: bool = True, box_count: int = 1) -> DrawerZone:
    return DrawerZone(
        id=generate_zone_id("drawer"),
        front=DrawerZoneFront() if with_front else None,
        boxes=tuple(DrawerZoneBox() for _ in range(box_count)),
    )


def create_drawer_config(
    preferences: ZonePreferences = DEFAULT_PREFERENCES,
    zone_count: int | None = None,
    with_fronts: bool = True,
) -> DrawerConfig:
    count = preferences.drawer_count if zone_count is None else zone_count
    return DrawerConfig(
        zones=tuple(create_drawer_zone(with_fronts) for _ in range(count)),
        slide_type=preferences.slide_type,
        box_material_id=preferences.box_material_id,
        bottom_material_id=preferences.bottom_material_id,
        front_material_id=preferences.front_material_id,
    )


def create_default_zone(
    content_type: ZoneContentType,
    preferences: ZonePreferences = DEFAULT_PREFERENCES,
    depth: int = 0,
) -> Zone:
    """Create a zone of the given content type populated with defaults.

    NESTED zones start as a HORIZONTAL split into two EMPTY children.

    Args:
        content_type: Content of the new zone.
        preferences: Injected editor defaults.
        depth: Nesting level of the new zone.

    Returns:
        A new zone with a fresh id.
    """
    zone_id = generate_zone_id()
    if content_type == ZoneContentType.SHELVES:
        return Zone(
            id=zone_id,
            content_type=content_type,
            shelves_config=create_shelves_config(preferences),
            depth=depth,
        )
    if content_type == ZoneContentType.DRAWERS:
        return Zone(
            id=zone_id,
            content_type=content_type,
            drawer_config=create_drawer_config(preferences),
            depth=depth,
        )
    if content_type == ZoneContentType.NESTED:
        return create_nested_zone(
            DivisionDirection.HORIZONTAL, 2, depth=depth, preferences=preferences
        )
    return Zone(id=zone_id, depth=depth)


def create_nested_zone(
    direction: DivisionDirection,
    child_count: int = 2,
    depth: int = 0,
    preferences: ZonePreferences = DEFAULT_PREFERENCES,
    child_content: ZoneContentType = ZoneContentType.EMPTY,
    partitions_enabled: bool = False,
) -> Zone:
    """Create a NESTED zone with ``child_count`` children of one content type.

    VERTICAL zones get proportional widths and one partition per slot.
    """
    children = tuple(
        create_default_zone(child_content, preferences, depth + 1)
        for _ in range(child_count)
    )
    partitions: tuple[PartitionConfig, ...] = ()
    if direction == DivisionDirection.VERTICAL:
        children = tuple(replace(c, width_config=WidthConfig()) for c in children)
        partitions = tuple(
            create_partition(enabled=partitions_enabled)
            for _ in range(max(0, child_count - 1))
        )
    return Zone(
        id=generate_zone_id(),
        content_type=ZoneContentType.NESTED,
        division_direction=direction,
        children=children,
        partitions=partitions,
        depth=depth,
    )


def clone_zone(zone: Zone) -> Zone:
    """Deep copy of a subtree with fresh zone and partition ids."""
    return replace(
        zone,
        id=generate_zone_id(),
        children=tuple(clone_zone(child) for child in zone.children),
        partitions=tuple(
            replace(p, id=generate_zone_id("partition")) for p in zone.partitions
        ),
    )


def create_default_interior() -> CabinetInteriorConfig:
    """Interior with a single EMPTY root zone."""
    return CabinetInteriorConfig(root_zone=create_default_zone(ZoneContentType.EMPTY))


def create_interior_with_shelves(
    count: int,
    depth_preset: ShelfDepthPreset = ShelfDepthPreset.FULL,
) -> CabinetInteriorConfig:
    """Interior whose root holds one SHELVES zone with ``count`` shelves."""
    shelves = Zone(
        id=generate_zone_id(),
        content_type=ZoneContentType.SHELVES,
        height_config=HeightConfig(),
        shelves_config=ShelvesConfig(count=count, depth_preset=depth_preset),
        depth=1,
    )
    return CabinetInteriorConfig(
        root_zone=Zone(
            id=generate_zone_id(),
            content_type=ZoneContentType.NESTED,
            division_direction=DivisionDirection.HORIZONTAL,
            children=(shelves,),
        )
    )


def create_interior_with_drawers(
    zone_count: int,
    with_fronts: bool = True,
    slide_type: DrawerSlideType = DrawerSlideType.SIDE_MOUNT,
) -> CabinetInteriorConfig:
    """Interior whose root holds one DRAWERS zone with ``zone_count`` drawers."""
    drawers = Zone(
        id=generate_zone_id(),
        content_type=ZoneContentType.DRAWERS,
        drawer_config=replace(
            create_drawer_config(zone_count=zone_count, with_fronts=with_fronts),
            slide_type=slide_type,
        ),
        depth=1,
    )
    return CabinetInteriorConfig(
        root_zone=Zone(
            id=generate_zone_id(),
            content_type=ZoneContentType.NESTED,
            division_direction=DivisionDirection.HORIZONTAL,
            children=(drawers,),
        )
    )
