"""Zone tree enumerations."""

from __future__ import annotations

from enum import Enum


class ZoneContentType(str, Enum):
    """What a zone holds.

    Attributes:
        EMPTY: Open space with no generated parts.
        SHELVES: One or more shelves spread over the zone height.
        DRAWERS: A stack of drawer zones with boxes and optional fronts.
        NESTED: The zone is subdivided into child zones.
    """

    EMPTY = "EMPTY"
    SHELVES = "SHELVES"
    DRAWERS = "DRAWERS"
    NESTED = "NESTED"


class DivisionDirection(str, Enum):
    """How a NESTED zone lays out its children.

    Attributes:
        HORIZONTAL: Children are stacked bottom-to-top, sized by height.
        VERTICAL: Children sit side-by-side left-to-right, sized by width.
    """

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"


class HeightMode(str, Enum):
    """Sizing mode along the stacking (Y) axis."""

    RATIO = "RATIO"
    EXACT = "EXACT"


class WidthMode(str, Enum):
    """Sizing mode along the X axis for children of a VERTICAL zone."""

    PROPORTIONAL = "PROPORTIONAL"
    FIXED = "FIXED"


class ShelfDepthPreset(str, Enum):
    """Shelf depth presets.

    Attributes:
        FULL: Cabinet depth minus the front setback.
        HALF: Half of the FULL depth, rounded.
        CUSTOM: Explicit depth in mm, clamped to the usable range.
    """

    FULL = "FULL"
    HALF = "HALF"
    CUSTOM = "CUSTOM"


class PartitionDepthPreset(str, Enum):
    """Partition depth presets (same meaning as the shelf presets)."""

    FULL = "FULL"
    HALF = "HALF"
    CUSTOM = "CUSTOM"


class ShelvesMode(str, Enum):
    """Shelf distribution mode.

    Attributes:
        UNIFORM: All shelves share the zone-level depth preset.
        MANUAL: Each shelf may override its depth and material; positions
            stay evenly spaced.
    """

    UNIFORM = "UNIFORM"
    MANUAL = "MANUAL"


class DrawerSlideType(str, Enum):
    """Drawer slide hardware families."""

    SIDE_MOUNT = "SIDE_MOUNT"
    UNDERMOUNT = "UNDERMOUNT"
    BOTTOM_MOUNT = "BOTTOM_MOUNT"
    CENTER_MOUNT = "CENTER_MOUNT"


class PartRole(str, Enum):
    """Cabinet role tag attached to every generated part.

    Downstream cut-list grouping filters parts by this tag.
    """

    SHELF = "SHELF"
    PARTITION = "PARTITION"
    DRAWER_FRONT = "DRAWER_FRONT"
    DRAWER_BOX_FRONT = "DRAWER_BOX_FRONT"
    DRAWER_BOTTOM = "DRAWER_BOTTOM"
    DRAWER_SIDE_LEFT = "DRAWER_SIDE_LEFT"
    DRAWER_SIDE_RIGHT = "DRAWER_SIDE_RIGHT"
    DRAWER_BACK = "DRAWER_BACK"


class ShapeType(str, Enum):
    """Outline shape of a generated panel."""

    RECT = "RECT"
