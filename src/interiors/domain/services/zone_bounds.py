"""Bounds calculation for the zone tree.

Walks a zone tree top-down and resolves an absolute rectangle for every leaf
zone and every enabled partition. HORIZONTAL zones stack children along Y,
VERTICAL zones place them along X with a body-thickness slot between
neighbours for the partition panel.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..constants import PARTITION_DEPTH_MIN_MM, SHELF_FRONT_SETBACK_MM
from ..distribution import SizingSpec, distribute, round_half_up
from ..entities import PartitionConfig, Zone
from ..value_objects import Bounds, PartitionDepthPreset

logger = logging.getLogger(__name__)

# Nesting level past which NESTED zones are treated as leaves.
MAX_TRAVERSAL_DEPTH = 64


@dataclass(frozen=True)
class ZoneBounds:
    """A zone together with its resolved rectangle."""

    zone: Zone
    bounds: Bounds


@dataclass(frozen=True)
class PartitionBounds:
    """An enabled partition together with its resolved slot.

    ``bounds.start_x``/``bounds.width`` describe the slot reserved between the
    two neighbouring children; ``bounds.depth_mm`` is the partition depth.

    Attributes:
        partition: The partition configuration.
        bounds: Slot rectangle and partition depth.
        parent_zone_id: Id of the VERTICAL zone owning the partition.
        index: Position in the parent's ``partitions``.
    """

    partition: PartitionConfig
    bounds: Bounds
    parent_zone_id: str
    index: int

    @property
    def x(self) -> float:
        """Center of the partition panel along X."""
        return self.bounds.center_x


@dataclass(frozen=True)
class ZoneTreeInfo:
    """Result of a bounds calculation.

    Attributes:
        leaf_zone_bounds: Leaf zones in pre-order, children in index order.
        partition_bounds: Enabled partitions in the same traversal order.
        total_zone_count: Number of zones visited, root included.
        max_depth: Deepest ``Zone.depth`` visited.
        nested_zone_bounds: NESTED zones with the bounds they split.
    """

    leaf_zone_bounds: tuple[ZoneBounds, ...]
    partition_bounds: tuple[PartitionBounds, ...]
    total_zone_count: int
    max_depth: int
    nested_zone_bounds: tuple[ZoneBounds, ...] = ()

    def bounds_for(self, zone_id: str) -> Bounds | None:
        """Get the resolved bounds of any visited zone by id."""
        for entry in self.leaf_zone_bounds + self.nested_zone_bounds:
            if entry.zone.id == zone_id:
                return entry.bounds
        return None


def calculate_partition_depth(
    partition: PartitionConfig, cabinet_depth: float
) -> float:
    """Resolve the depth of a partition panel.

    FULL is the cabinet depth minus the front setback, HALF is half of that
    rounded, CUSTOM is the custom value (HALF when unset) clamped to
    ``[PARTITION_DEPTH_MIN_MM, FULL]``.
    """
    max_depth = cabinet_depth - SHELF_FRONT_SETBACK_MM
    if partition.depth_preset == PartitionDepthPreset.HALF:
        return float(round_half_up(max_depth / 2))
    if partition.depth_preset == PartitionDepthPreset.CUSTOM:
        custom = partition.custom_depth_mm
        if custom is None:
            custom = round_half_up(max_depth / 2)
        return float(max(PARTITION_DEPTH_MIN_MM, min(custom, max_depth)))
    return max_depth


def calculate_bounds(
    zone: Zone,
    parent_bounds: Bounds,
    body_thickness: float,
    cabinet_depth: float,
) -> ZoneTreeInfo:
    """Resolve bounds for every leaf zone and enabled partition.

    Args:
        zone: Root of the (sub)tree to lay out.
        parent_bounds: Rectangle available to ``zone``.
        body_thickness: Partition slot width between VERTICAL siblings.
        cabinet_depth: Outer cabinet depth used for partition presets.

    Returns:
        ZoneTreeInfo with leaf and partition bounds in pre-order.
    """
    leaves: list[ZoneBounds] = []
    nested: list[ZoneBounds] = []
    partitions: list[PartitionBounds] = []
    zone_count = 0
    max_depth = zone.depth

    def visit(current: Zone, bounds: Bounds, level: int) -> None:
        nonlocal zone_count, max_depth
        zone_count += 1
        max_depth = max(max_depth, current.depth)

        if not current.is_nested:
            leaves.append(ZoneBounds(zone=current, bounds=bounds))
            return
        if level >= MAX_TRAVERSAL_DEPTH:
            logger.warning(
                f"Zone '{current.id}' exceeds traversal depth {MAX_TRAVERSAL_DEPTH}, "
                "treating it as a leaf"
            )
            leaves.append(ZoneBounds(zone=current, bounds=bounds))
            return

        nested.append(ZoneBounds(zone=current, bounds=bounds))
        if current.is_vertical:
            _split_vertical(current, bounds, level)
        else:
            _split_horizontal(current, bounds, level)

    def _split_horizontal(current: Zone, bounds: Bounds, level: int) -> None:
        heights = distribute(
            bounds.height,
            [SizingSpec.from_height_config(c.height_config) for c in current.children],
        )
        y = bounds.start_y
        for child, height in zip(current.children, heights):
            visit(
                child,
                Bounds(bounds.start_x, y, bounds.width, height, bounds.depth_mm),
                level + 1,
            )
            y += height

    def _split_vertical(current: Zone, bounds: Bounds, level: int) -> None:
        slots = len(current.children) - 1
        widths = distribute(
            bounds.width - body_thickness * slots,
            [SizingSpec.from_width_config(c.width_config) for c in current.children],
        )
        x = bounds.start_x
        for index, (child, width) in enumerate(zip(current.children, widths)):
            visit(
                child,
                Bounds(x, bounds.start_y, width, bounds.height, bounds.depth_mm),
                level + 1,
            )
            x += width
            if index >= slots:
                continue
            if index < len(current.partitions) and current.partitions[index].enabled:
                partition = current.partitions[index]
                partitions.append(
                    PartitionBounds(
                        partition=partition,
                        bounds=Bounds(
                            start_x=x,
                            start_y=bounds.start_y,
                            width=body_thickness,
                            height=bounds.height,
                            depth_mm=calculate_partition_depth(
                                partition, cabinet_depth
                            ),
                        ),
                        parent_zone_id=current.id,
                        index=index,
                    )
                )
            x += body_thickness

    visit(zone, parent_bounds, 0)

    return ZoneTreeInfo(
        leaf_zone_bounds=tuple(leaves),
        partition_bounds=tuple(partitions),
        total_zone_count=zone_count,
        max_depth=max_depth,
        nested_zone_bounds=tuple(nested),
    )
