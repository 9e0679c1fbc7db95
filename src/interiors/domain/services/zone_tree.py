"""Pure operations on zone trees.

Every operation returns a new tree and leaves its input untouched. Updates
copy only the path from the root to the edited zone; untouched subtrees are
shared between the old and new tree, which is safe because zones are frozen.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Iterator, Sequence

from ..constants import MAX_CHILDREN_PER_ZONE, MAX_ZONE_DEPTH
from ..entities import PartitionConfig, Zone
from ..value_objects import DivisionDirection, WidthConfig, ZoneContentType
from .zone_factory import (
    DEFAULT_PREFERENCES,
    ZonePreferences,
    create_drawer_config,
    create_shelves_config,
    generate_zone_id,
)

logger = logging.getLogger(__name__)

ZoneUpdater = Callable[[Zone], Zone]


def iter_zones(root: Zone) -> Iterator[Zone]:
    """Yield every zone in depth-first pre-order, children in index order."""
    stack = [root]
    while stack:
        zone = stack.pop()
        yield zone
        stack.extend(reversed(zone.children))


def find_zone_by_id(root: Zone | None, zone_id: str) -> Zone | None:
    """Find the first zone with ``zone_id`` in depth-first order.

    Args:
        root: Tree to search.
        zone_id: Id to look for.

    Returns:
        The matching zone, or None if absent.
    """
    if root is None:
        return None
    return next((zone for zone in iter_zones(root) if zone.id == zone_id), None)


def find_zone_path(root: Zone | None, zone_id: str) -> list[str] | None:
    """Ids from ``root`` to the target zone, both inclusive.

    Returns:
        Ordered ids starting with ``root.id``, or None if the id is absent.
    """
    if root is None:
        return None
    if root.id == zone_id:
        return [root.id]
    for child in root.children:
        child_path = find_zone_path(child, zone_id)
        if child_path is not None:
            return [root.id, *child_path]
    return None


def find_parent_zone(root: Zone, zone_id: str) -> Zone | None:
    """Find the zone whose children include ``zone_id``."""
    for zone in iter_zones(root):
        if any(child.id == zone_id for child in zone.children):
            return zone
    return None


def update_at_path(root: Zone, path: Sequence[str], updater: ZoneUpdater) -> Zone:
    """Replace the zone addressed by ``path`` with ``updater(zone)``.

    Args:
        root: Tree to update.
        path: Ids from the root to the target, as returned by ``find_zone_path``.
        updater: Function producing the replacement zone.

    Returns:
        New tree. The input tree is returned unchanged when the path does not
        resolve.
    """
    if not path or path[0] != root.id:
        return root
    if len(path) == 1:
        return updater(root)

    next_id = path[1]
    for index, child in enumerate(root.children):
        if child.id == next_id:
            new_child = update_at_path(child, path[1:], updater)
            if new_child is child:
                return root
            children = list(root.children)
            children[index] = new_child
            return replace(root, children=tuple(children))

    logger.debug(f"Path {list(path)} does not resolve below zone '{root.id}'")
    return root


def update_zone_by_id(root: Zone, zone_id: str, updater: ZoneUpdater) -> Zone:
    """Replace the zone with ``zone_id`` by ``updater(zone)``.

    Returns:
        New tree, or ``root`` itself when the id is absent.
    """
    path = find_zone_path(root, zone_id)
    if path is None:
        return root
    return update_at_path(root, path, updater)


def delete_zone_by_id(root: Zone, zone_id: str) -> Zone:
    """Remove the zone with ``zone_id`` from its parent's children.

    Partitions of a VERTICAL parent are truncated to one fewer than its
    remaining children. The root itself cannot be deleted, and neither can
    the only child of a zone; in both cases (and for an absent id) ``root``
    is returned unchanged.
    """
    parent = find_parent_zone(root, zone_id)
    if parent is None:
        return root
    index = next(i for i, child in enumerate(parent.children) if child.id == zone_id)
    return update_zone_by_id(root, parent.id, lambda zone: remove_child(zone, index))


def get_all_zones(root: Zone | None) -> list[Zone]:
    """All zones of the tree in depth-first pre-order."""
    if root is None:
        return []
    return list(iter_zones(root))


def get_all_partitions(root: Zone | None) -> list[PartitionConfig]:
    """All partitions of the tree in depth-first pre-order."""
    return [p for zone in get_all_zones(root) for p in zone.partitions]


def count_zones(root: Zone | None) -> int:
    return len(get_all_zones(root))


def get_max_depth(root: Zone | None) -> int:
    """Deepest ``Zone.depth`` in the tree (0 for an empty tree)."""
    return max((zone.depth for zone in get_all_zones(root)), default=0)


def _with_child_depths(child: Zone, depth: int) -> Zone:
    """Re-level a subtree so that ``child`` sits at ``depth``."""
    if child.depth == depth and all(c.depth == depth + 1 for c in child.children):
        return child
    return replace(
        child,
        depth=depth,
        children=tuple(_with_child_depths(c, depth + 1) for c in child.children),
    )


def _normalize_partitions(
    zone: Zone, children: tuple[Zone, ...]
) -> tuple[PartitionConfig, ...]:
    if zone.direction != DivisionDirection.VERTICAL:
        return zone.partitions
    return zone.partitions[: max(0, len(children) - 1)]


def add_child(zone: Zone, child: Zone, index: int | None = None) -> Zone:
    """Insert ``child`` into a NESTED zone.

    The child (and its subtree) is re-levelled below ``zone``. Children of a
    VERTICAL zone get a proportional width configuration when they have none.

    Raises:
        ValueError: If ``zone`` is not NESTED.
    """
    if zone.content_type != ZoneContentType.NESTED:
        raise ValueError(f"Zone '{zone.id}' is not NESTED")
    child = _with_child_depths(child, zone.depth + 1)
    if zone.is_vertical and child.width_config is None:
        child = replace(child, width_config=WidthConfig())
    position = len(zone.children) if index is None else index
    children = zone.children[:position] + (child,) + zone.children[position:]
    return replace(zone, children=children)


def remove_child(zone: Zone, index: int) -> Zone:
    """Remove the child at ``index`` and truncate partitions to match.

    A NESTED zone always keeps at least one child, so removing the last
    child is refused. Out-of-range indices also leave the zone unchanged.
    """
    if len(zone.children) <= 1 or not 0 <= index < len(zone.children):
        return zone
    children = zone.children[:index] + zone.children[index + 1 :]
    return replace(
        zone, children=children, partitions=_normalize_partitions(zone, children)
    )


def move_child(zone: Zone, from_index: int, to_index: int) -> Zone:
    """Move a child to a new position; partitions stay in slot order."""
    count = len(zone.children)
    if not (0 <= from_index < count and 0 <= to_index < count):
        return zone
    children = list(zone.children)
    children.insert(to_index, children.pop(from_index))
    return replace(zone, children=tuple(children))


def set_division_direction(zone: Zone, direction: DivisionDirection) -> Zone:
    """Change how a NESTED zone lays out its children.

    Switching to VERTICAL gives children a default width configuration;
    switching to HORIZONTAL drops partitions.
    """
    if direction == DivisionDirection.VERTICAL:
        children = tuple(
            c if c.width_config is not None else replace(c, width_config=WidthConfig())
            for c in zone.children
        )
        return replace(zone, division_direction=direction, children=children)
    return replace(zone, division_direction=direction, partitions=())


def add_partition(zone: Zone, partition: PartitionConfig) -> Zone:
    """Append a partition to a VERTICAL zone if a free slot exists."""
    if not zone.is_vertical or len(zone.partitions) >= len(zone.children) - 1:
        return zone
    return replace(zone, partitions=zone.partitions + (partition,))


def remove_partition(zone: Zone, partition_id: str) -> Zone:
    """Drop the partition with ``partition_id``; later partitions shift one slot."""
    partitions = tuple(p for p in zone.partitions if p.id != partition_id)
    if len(partitions) == len(zone.partitions):
        return zone
    return replace(zone, partitions=partitions)


def set_content_type(
    zone: Zone,
    content_type: ZoneContentType,
    preferences: ZonePreferences = DEFAULT_PREFERENCES,
) -> Zone:
    """Switch a zone to ``content_type``, discarding its previous content.

    SHELVES and DRAWERS zones are seeded with default configurations built
    from ``preferences``. A NESTED zone starts as a HORIZONTAL split with one
    EMPTY child. Id, sizing and depth are kept.

    Returns:
        The converted zone, or ``zone`` itself when it already has
        ``content_type`` or when it is too deep to become NESTED.
    """
    if zone.content_type == content_type:
        return zone
    if content_type == ZoneContentType.NESTED and not can_nest(zone):
        logger.debug(f"Zone '{zone.id}' at depth {zone.depth} cannot be nested")
        return zone

    cleared = replace(
        zone,
        content_type=content_type,
        division_direction=None,
        children=(),
        partitions=(),
        shelves_config=None,
        drawer_config=None,
    )
    if content_type == ZoneContentType.SHELVES:
        return replace(cleared, shelves_config=create_shelves_config(preferences))
    if content_type == ZoneContentType.DRAWERS:
        return replace(cleared, drawer_config=create_drawer_config(preferences))
    if content_type == ZoneContentType.NESTED:
        child = Zone(id=generate_zone_id(), depth=zone.depth + 1)
        return replace(
            cleared,
            division_direction=DivisionDirection.HORIZONTAL,
            children=(child,),
        )
    return cleared


def update_partition(zone: Zone, index: int, partition: PartitionConfig) -> Zone:
    """Replace the partition at ``index``."""
    if not 0 <= index < len(zone.partitions):
        return zone
    partitions = zone.partitions[:index] + (partition,) + zone.partitions[index + 1 :]
    return replace(zone, partitions=partitions)


def can_add_child(zone: Zone) -> bool:
    """Whether another child fits into ``zone``."""
    return (
        zone.content_type == ZoneContentType.NESTED
        and len(zone.children) < MAX_CHILDREN_PER_ZONE
    )


def can_nest(zone: Zone) -> bool:
    """Whether ``zone`` may be turned into a NESTED zone."""
    return zone.depth < MAX_ZONE_DEPTH - 1


def get_zone_summary(zone: Zone) -> str:
    """Short label for a zone, e.g. 'Shelves (3)' or '2 columns'."""
    if zone.content_type == ZoneContentType.SHELVES:
        count = zone.shelves_config.count if zone.shelves_config else 0
        return f"Shelves ({count})"
    if zone.content_type == ZoneContentType.DRAWERS:
        count = len(zone.drawer_config.zones) if zone.drawer_config else 0
        return f"Drawers ({count})"
    if zone.content_type == ZoneContentType.NESTED:
        kind = "columns" if zone.is_vertical else "sections"
        return f"{len(zone.children)} {kind}"
    return "Empty"
