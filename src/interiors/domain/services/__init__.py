"""Domain services operating on zone trees.

- Bounds calculation for leaf zones and partitions
- Interior generation dispatching zones to content components
- Pure tree edits and queries
- Drawer configuration edits
- Zone factories with injected editor preferences
- Structural and geometric validation
"""

from .drawer_edits import (
    add_above_box_shelf,
    add_drawer_box,
    add_drawer_zone,
    convert_to_external,
    convert_to_internal,
    move_drawer_zone,
    remove_above_box_shelf,
    remove_drawer_box,
    remove_drawer_zone,
    set_box_height_ratio,
    set_box_to_front_ratio,
    set_drawer_zone_height_ratio,
    set_slide_type,
    toggle_drawer_front,
    update_drawer_zone,
)
from .interior_generator import (
    InteriorGenerationResult,
    InteriorGenerator,
    generate_interior,
    get_interior_summary,
    has_interior_content,
    merge_hardware,
)
from .zone_bounds import (
    PartitionBounds,
    ZoneBounds,
    ZoneTreeInfo,
    calculate_bounds,
    calculate_partition_depth,
)
from .zone_factory import (
    DEFAULT_PREFERENCES,
    ZonePreferences,
    clone_zone,
    create_default_interior,
    create_default_zone,
    create_drawer_config,
    create_drawer_zone,
    create_interior_with_drawers,
    create_interior_with_shelves,
    create_nested_zone,
    create_partition,
    create_shelves_config,
    generate_zone_id,
)
from .zone_tree import (
    add_child,
    add_partition,
    can_add_child,
    can_nest,
    count_zones,
    delete_zone_by_id,
    find_parent_zone,
    find_zone_by_id,
    find_zone_path,
    get_all_partitions,
    get_all_zones,
    get_max_depth,
    get_zone_summary,
    iter_zones,
    move_child,
    remove_child,
    remove_partition,
    set_content_type,
    set_division_direction,
    update_at_path,
    update_partition,
    update_zone_by_id,
)
from .zone_validation import (
    DEFAULT_CONSTRAINTS,
    ValidationReport,
    ZoneConstraints,
    ZoneViolation,
    validate,
    validate_tree,
    validate_zone,
)

__all__ = [
    "DEFAULT_CONSTRAINTS",
    "DEFAULT_PREFERENCES",
    "InteriorGenerationResult",
    "InteriorGenerator",
    "PartitionBounds",
    "ValidationReport",
    "ZoneBounds",
    "ZoneConstraints",
    "ZonePreferences",
    "ZoneTreeInfo",
    "ZoneViolation",
    "add_above_box_shelf",
    "add_child",
    "add_drawer_box",
    "add_drawer_zone",
    "add_partition",
    "calculate_bounds",
    "calculate_partition_depth",
    "can_add_child",
    "can_nest",
    "clone_zone",
    "convert_to_external",
    "convert_to_internal",
    "count_zones",
    "create_default_interior",
    "create_default_zone",
    "create_drawer_config",
    "create_drawer_zone",
    "create_interior_with_drawers",
    "create_interior_with_shelves",
    "create_nested_zone",
    "create_partition",
    "create_shelves_config",
    "delete_zone_by_id",
    "find_parent_zone",
    "find_zone_by_id",
    "find_zone_path",
    "generate_interior",
    "generate_zone_id",
    "get_all_partitions",
    "get_all_zones",
    "get_interior_summary",
    "get_max_depth",
    "get_zone_summary",
    "has_interior_content",
    "iter_zones",
    "merge_hardware",
    "move_child",
    "move_drawer_zone",
    "remove_above_box_shelf",
    "remove_child",
    "remove_drawer_box",
    "remove_drawer_zone",
    "remove_partition",
    "set_box_height_ratio",
    "set_box_to_front_ratio",
    "set_content_type",
    "set_division_direction",
    "set_drawer_zone_height_ratio",
    "set_slide_type",
    "toggle_drawer_front",
    "update_at_path",
    "update_drawer_zone",
    "update_partition",
    "update_zone_by_id",
    "validate",
    "validate_tree",
    "validate_zone",
]
