"""Dimensional constants and limits for cabinet interiors.

All values are in millimeters unless noted otherwise.
"""

from __future__ import annotations

from .value_objects import EdgeBanding

# Carcass
BODY_THICKNESS_MM = 18.0
FRONT_THICKNESS_MM = 18.0

# Full-depth shelves and partitions stop this far behind the cabinet front.
# Independent of BODY_THICKNESS_MM.
SHELF_FRONT_SETBACK_MM = 10.0

PARTITION_DEPTH_MIN_MM = 50.0
CUSTOM_SHELF_DEPTH_MIN_MM = 100.0
CUSTOM_SHELF_DEPTH_MAX_MM = 1000.0

# Single shelf sits at mid-height of its zone
SINGLE_SHELF_POSITION = 0.5

# Zone limits
MIN_ZONE_HEIGHT_MM = 50.0
MIN_ZONE_WIDTH_MM = 100.0
MAX_ZONE_DEPTH = 3
MAX_CHILDREN_PER_ZONE = 6
MAX_SHELVES_PER_ZONE = 10

# Drawer limits
MAX_DRAWER_ZONES = 8
MAX_BOXES_PER_DRAWER_ZONE = 4
MAX_SHELVES_ABOVE_DRAWER = 4
MIN_BOX_TO_FRONT_RATIO = 0.1
MAX_BOX_TO_FRONT_RATIO = 1.0

# Drawer geometry
DRAWER_FRONT_MARGIN_MM = 2.0
DRAWER_FRONT_GAP_MM = 3.0
DRAWER_BOX_HEIGHT_REDUCTION_MM = 30.0
DRAWER_BOX_MIN_SIDE_HEIGHT_MM = 50.0
DRAWER_BOTTOM_THICKNESS_MM = 3.0

DEFAULT_SHELF_EDGE_BANDING = EdgeBanding(top=True)
DEFAULT_PARTITION_EDGE_BANDING = EdgeBanding(top=True)
DEFAULT_DRAWER_FRONT_EDGE_BANDING = EdgeBanding(
    top=True, bottom=True, left=True, right=True
)
DEFAULT_DRAWER_BOX_EDGE_BANDING = EdgeBanding(top=True)
