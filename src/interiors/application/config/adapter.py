"""Adapter between configuration schemas and domain objects.

Converts a validated ``InteriorConfiguration`` into domain values
(``CabinetSpec``, ``CabinetInteriorConfig``, ``ZoneConstraints``) and
serializes a domain zone tree back into the configuration JSON shape.

Zones, partitions and drawer slots without an id get one derived from their
position in the tree (``root``, ``root-0``, ``root-0-p1`` ...), so the same
document always produces the same ids.
"""

from __future__ import annotations

from typing import Any

from interiors.application.config.schemas import (
    ConstraintsConfigSchema,
    DrawerConfigSchema,
    InteriorConfiguration,
    ShelvesConfigSchema,
    ZoneConfigSchema,
)
from interiors.domain.entities import (
    AboveBoxContent,
    AboveBoxShelf,
    CabinetInteriorConfig,
    CabinetSpec,
    DrawerConfig,
    DrawerZone,
    DrawerZoneBox,
    DrawerZoneFront,
    PartitionConfig,
    ShelfConfig,
    ShelvesConfig,
    Zone,
)
from interiors.domain.services import ZoneConstraints
from interiors.domain.value_objects import HeightConfig, WidthConfig

ROOT_ZONE_ID = "root"


def config_to_cabinet_spec(config: InteriorConfiguration) -> CabinetSpec:
    """Build the cabinet scalars from the ``cabinet`` section."""
    cabinet = config.cabinet
    return CabinetSpec(
        width=cabinet.width,
        height=cabinet.height,
        depth=cabinet.depth,
        body_thickness=cabinet.body_thickness,
        front_thickness=cabinet.front_thickness,
        body_material_id=cabinet.body_material_id,
        front_material_id=cabinet.front_material_id,
        bottom_material_id=cabinet.bottom_material_id,
        cabinet_id=cabinet.id,
    )


def config_to_constraints(config: InteriorConfiguration) -> ZoneConstraints:
    """Build validation limits; defaults apply when ``constraints`` is absent."""
    constraints = config.constraints or ConstraintsConfigSchema()
    return ZoneConstraints(
        min_zone_width_mm=constraints.min_zone_width_mm,
        min_zone_height_mm=constraints.min_zone_height_mm,
        max_zone_depth=constraints.max_zone_depth,
        max_children=constraints.max_children,
    )


def config_to_interior(config: InteriorConfiguration) -> CabinetInteriorConfig:
    """Build the domain zone tree from the ``interior`` section.

    A missing ``root_zone`` yields an interior with no root, which generates
    no parts.
    """
    root = config.interior.root_zone
    if root is None:
        return CabinetInteriorConfig(root_zone=None)
    return CabinetInteriorConfig(root_zone=_zone_from_schema(root, ROOT_ZONE_ID, 0))


def _shelves_from_schema(schema: ShelvesConfigSchema, zone_id: str) -> ShelvesConfig:
    return ShelvesConfig(
        mode=schema.mode,
        count=schema.count,
        depth_preset=schema.depth_preset,
        custom_depth_mm=schema.custom_depth_mm,
        material_id=schema.material_id,
        shelves=tuple(
            ShelfConfig(
                id=shelf.id or f"{zone_id}-s{index}",
                depth_preset=shelf.depth_preset,
                custom_depth_mm=shelf.custom_depth_mm,
                material_id=shelf.material_id,
            )
            for index, shelf in enumerate(schema.shelves)
        ),
    )


def _drawers_from_schema(schema: DrawerConfigSchema, zone_id: str) -> DrawerConfig:
    zones: list[DrawerZone] = []
    for index, drawer in enumerate(schema.zones):
        drawer_id = drawer.id or f"{zone_id}-d{index}"
        above = None
        if drawer.above_box_shelves:
            above = AboveBoxContent(
                shelves=tuple(
                    AboveBoxShelf(
                        id=shelf.id or f"{drawer_id}-s{shelf_index}",
                        depth_preset=shelf.depth_preset,
                        custom_depth_mm=shelf.custom_depth_mm,
                    )
                    for shelf_index, shelf in enumerate(drawer.above_box_shelves)
                )
            )
        zones.append(
            DrawerZone(
                id=drawer_id,
                height_ratio=drawer.height_ratio,
                front=(
                    DrawerZoneFront(material_id=drawer.front.material_id)
                    if drawer.front is not None
                    else None
                ),
                boxes=tuple(DrawerZoneBox(height_ratio=b.height_ratio) for b in drawer.boxes),
                box_to_front_ratio=drawer.box_to_front_ratio,
                above_box_content=above,
            )
        )
    return DrawerConfig(
        zones=tuple(zones),
        slide_type=schema.slide_type,
        box_material_id=schema.box_material_id,
        bottom_material_id=schema.bottom_material_id,
        front_material_id=schema.front_material_id,
    )


def _zone_from_schema(schema: ZoneConfigSchema, default_id: str, depth: int) -> Zone:
    zone_id = schema.id or default_id
    height = schema.height_config
    width = schema.width_config
    return Zone(
        id=zone_id,
        content_type=schema.content_type,
        height_config=HeightConfig(
            mode=height.mode, ratio=height.ratio, exact_mm=height.exact_mm
        ),
        width_config=(
            WidthConfig(mode=width.mode, ratio=width.ratio, fixed_mm=width.fixed_mm)
            if width is not None
            else None
        ),
        division_direction=schema.division_direction,
        children=tuple(
            _zone_from_schema(child, f"{zone_id}-{index}", depth + 1)
            for index, child in enumerate(schema.children)
        ),
        partitions=tuple(
            PartitionConfig(
                id=partition.id or f"{zone_id}-p{index}",
                depth_preset=partition.depth_preset,
                custom_depth_mm=partition.custom_depth_mm,
                material_id=partition.material_id,
                enabled=partition.enabled,
            )
            for index, partition in enumerate(schema.partitions)
        ),
        shelves_config=(
            _shelves_from_schema(schema.shelves_config, zone_id)
            if schema.shelves_config is not None
            else None
        ),
        drawer_config=(
            _drawers_from_schema(schema.drawer_config, zone_id)
            if schema.drawer_config is not None
            else None
        ),
        depth=depth,
    )


def _drop_none(data: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


def zone_to_dict(zone: Zone) -> dict[str, Any]:
    """Serialize a domain zone tree into the configuration JSON shape.

    The result validates as a ``ZoneConfigSchema``; unset optional fields
    are omitted.
    """
    data: dict[str, Any] = {
        "id": zone.id,
        "content_type": zone.content_type.value,
        "height_config": _drop_none(
            {
                "mode": zone.height_config.mode.value,
                "ratio": zone.height_config.ratio,
                "exact_mm": zone.height_config.exact_mm,
            }
        ),
    }
    if zone.width_config is not None:
        data["width_config"] = _drop_none(
            {
                "mode": zone.width_config.mode.value,
                "ratio": zone.width_config.ratio,
                "fixed_mm": zone.width_config.fixed_mm,
            }
        )
    if zone.division_direction is not None:
        data["division_direction"] = zone.division_direction.value
    if zone.children:
        data["children"] = [zone_to_dict(child) for child in zone.children]
    if zone.partitions:
        data["partitions"] = [
            _drop_none(
                {
                    "id": p.id,
                    "depth_preset": p.depth_preset.value,
                    "custom_depth_mm": p.custom_depth_mm,
                    "material_id": p.material_id,
                    "enabled": p.enabled,
                }
            )
            for p in zone.partitions
        ]
    if zone.shelves_config is not None:
        shelves = zone.shelves_config
        data["shelves_config"] = _drop_none(
            {
                "mode": shelves.mode.value,
                "count": shelves.count,
                "depth_preset": shelves.depth_preset.value,
                "custom_depth_mm": shelves.custom_depth_mm,
                "material_id": shelves.material_id,
                "shelves": [
                    _drop_none(
                        {
                            "id": s.id,
                            "depth_preset": s.depth_preset.value if s.depth_preset else None,
                            "custom_depth_mm": s.custom_depth_mm,
                            "material_id": s.material_id,
                        }
                    )
                    for s in shelves.shelves
                ]
                or None,
            }
        )
    if zone.drawer_config is not None:
        drawers = zone.drawer_config
        data["drawer_config"] = _drop_none(
            {
                "zones": [_drawer_zone_to_dict(d) for d in drawers.zones],
                "slide_type": drawers.slide_type.value,
                "box_material_id": drawers.box_material_id,
                "bottom_material_id": drawers.bottom_material_id,
                "front_material_id": drawers.front_material_id,
            }
        )
    return data


def _drawer_zone_to_dict(drawer: DrawerZone) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": drawer.id,
        "height_ratio": drawer.height_ratio,
        "front": (
            _drop_none({"material_id": drawer.front.material_id})
            if drawer.front is not None
            else None
        ),
        "boxes": [{"height_ratio": box.height_ratio} for box in drawer.boxes],
    }
    if drawer.box_to_front_ratio is not None:
        data["box_to_front_ratio"] = drawer.box_to_front_ratio
    if drawer.above_box_shelves:
        data["above_box_shelves"] = [
            _drop_none(
                {
                    "id": shelf.id,
                    "depth_preset": shelf.depth_preset.value,
                    "custom_depth_mm": shelf.custom_depth_mm,
                }
            )
            for shelf in drawer.above_box_shelves
        ]
    return data


def interior_to_dict(interior: CabinetInteriorConfig) -> dict[str, Any]:
    """Serialize an interior into the ``interior`` section shape."""
    if interior.root_zone is None:
        return {}
    return {"root_zone": zone_to_dict(interior.root_zone)}
