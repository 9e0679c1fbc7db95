"""Interior generation: zone tree in, flat list of parts out.

The generator resolves bounds once for the whole tree and dispatches every
populated leaf zone, and every enabled partition, to its registered content
component. Generation is total: zones without a matching configuration are
skipped with a warning and nothing is raised for a transiently invalid tree.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..components import (
    ComponentContext,
    ComponentRegistry,
    GenerationResult,
    HardwareItem,
    component_registry,
)
from ..entities import CabinetInteriorConfig, CabinetSpec, GeneratedPart, Zone
from ..value_objects import PartRole, ZoneContentType
from .zone_bounds import ZoneTreeInfo, calculate_bounds
from .zone_tree import get_all_partitions, get_all_zones

logger = logging.getLogger(__name__)

CONTENT_COMPONENTS: dict[ZoneContentType, str] = {
    ZoneContentType.SHELVES: "shelves.zone",
    ZoneContentType.DRAWERS: "drawers.zone",
}
PARTITION_COMPONENT = "partition.vertical"


def content_config(zone: Zone) -> object | None:
    """The content configuration a leaf zone is generated from, if any."""
    if zone.content_type == ZoneContentType.SHELVES:
        return zone.shelves_config
    if zone.content_type == ZoneContentType.DRAWERS:
        return zone.drawer_config
    return None


@dataclass(frozen=True)
class InteriorGenerationResult:
    """Parts and hardware generated for one cabinet interior.

    Attributes:
        parts: Leaf content parts in pre-order, then partition parts.
        hardware: Hardware needed by the parts, merged by name and notes.
        tree_info: Resolved bounds, or None when nothing was generated.
    """

    parts: tuple[GeneratedPart, ...] = field(default_factory=tuple)
    hardware: tuple[HardwareItem, ...] = field(default_factory=tuple)
    tree_info: ZoneTreeInfo | None = None

    def parts_by_role(self, role: PartRole) -> list[GeneratedPart]:
        return [part for part in self.parts if part.role == role]


class InteriorGenerator:
    """Generates the parts of a cabinet interior.

    Args:
        registry: Component registry used for dispatch. Defaults to the
            global registry holding the built-in components.
    """

    def __init__(self, registry: ComponentRegistry | None = None) -> None:
        self._registry = registry or component_registry

    def generate(
        self, interior: CabinetInteriorConfig | None, cabinet: CabinetSpec
    ) -> InteriorGenerationResult:
        """Generate all parts for ``interior`` inside ``cabinet``.

        Args:
            interior: Interior configuration; None or a missing root yields
                an empty result.
            cabinet: Cabinet dimensions and default materials.

        Returns:
            InteriorGenerationResult with parts and hardware.
        """
        if not has_interior_content(interior):
            return InteriorGenerationResult()
        assert interior is not None and interior.root_zone is not None

        tree_info = calculate_bounds(
            interior.root_zone,
            cabinet.interior_bounds,
            cabinet.body_thickness,
            cabinet.depth,
        )

        combined = GenerationResult.empty()
        for entry in tree_info.leaf_zone_bounds:
            config = content_config(entry.zone)
            component_id = CONTENT_COMPONENTS.get(entry.zone.content_type)
            if config is None or component_id is None:
                if entry.zone.content_type != ZoneContentType.EMPTY:
                    logger.warning(
                        f"Skipping {entry.zone.content_type.value} zone "
                        f"'{entry.zone.id}': no content configuration"
                    )
                continue
            context = ComponentContext(
                bounds=entry.bounds, cabinet=cabinet, zone_id=entry.zone.id
            )
            logger.debug(f"Generating {component_id} for zone '{entry.zone.id}'")
            combined = combined.merged_with(
                self._registry.create(component_id).generate(config, context)
            )

        partition_component = self._registry.create(PARTITION_COMPONENT)
        for entry in tree_info.partition_bounds:
            context = ComponentContext(
                bounds=entry.bounds, cabinet=cabinet, zone_id=entry.parent_zone_id
            )
            combined = combined.merged_with(
                partition_component.generate(entry.partition, context)
            )

        parts = combined.parts
        hardware = merge_hardware(list(combined.hardware))
        logger.info(
            f"Generated {len(parts)} interior parts for cabinet '{cabinet.cabinet_id}'"
        )
        return InteriorGenerationResult(
            parts=parts, hardware=tuple(hardware), tree_info=tree_info
        )


def merge_hardware(items: list[HardwareItem]) -> list[HardwareItem]:
    """Sum quantities of identical hardware, keeping first-seen order."""
    merged: dict[tuple[str, str | None, str | None], int] = {}
    for item in items:
        key = (item.name, item.sku, item.notes)
        merged[key] = merged.get(key, 0) + item.quantity
    return [
        HardwareItem(name=name, quantity=quantity, sku=sku, notes=notes)
        for (name, sku, notes), quantity in merged.items()
    ]


def generate_interior(
    interior: CabinetInteriorConfig | None, cabinet: CabinetSpec
) -> list[GeneratedPart]:
    """Generate the parts of a cabinet interior.

    Returns:
        A fresh list of parts; empty when there is no populated content.
    """
    return list(InteriorGenerator().generate(interior, cabinet).parts)


def has_interior_content(interior: CabinetInteriorConfig | None) -> bool:
    """Whether the interior would generate at least one part.

    Shelves count when there is at least one shelf, drawers when there is
    at least one drawer zone, partitions when enabled.
    """
    if interior is None or interior.root_zone is None:
        return False

    for zone in get_all_zones(interior.root_zone):
        if zone.content_type == ZoneContentType.SHELVES:
            if zone.shelves_config is not None and zone.shelves_config.count > 0:
                return True
        elif zone.content_type == ZoneContentType.DRAWERS:
            if zone.drawer_config is not None and zone.drawer_config.zones:
                return True
        elif zone.is_nested:
            slots = len(zone.children) - 1
            if zone.is_vertical and any(p.enabled for p in zone.partitions[:slots]):
                return True
    return False


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def get_interior_summary(interior: CabinetInteriorConfig | None) -> str:
    """Human-readable summary such as '3 shelves, 2 drawers, 1 partition'."""
    if interior is None or interior.root_zone is None:
        return "No interior configured"

    zones = get_all_zones(interior.root_zone)
    shelf_count = sum(
        z.shelves_config.count
        for z in zones
        if z.content_type == ZoneContentType.SHELVES and z.shelves_config
    )
    drawer_count = sum(
        len(z.drawer_config.zones)
        for z in zones
        if z.content_type == ZoneContentType.DRAWERS and z.drawer_config
    )
    partition_count = sum(
        1 for p in get_all_partitions(interior.root_zone) if p.enabled
    )

    summary: list[str] = []
    if shelf_count:
        summary.append(_plural(shelf_count, "shelf", "shelves"))
    if drawer_count:
        summary.append(_plural(drawer_count, "drawer", "drawers"))
    if partition_count:
        summary.append(_plural(partition_count, "partition", "partitions"))
    return ", ".join(summary) if summary else "Empty interior"
