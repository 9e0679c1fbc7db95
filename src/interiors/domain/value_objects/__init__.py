"""Value objects for the zone tree and generated geometry."""

from ._geometry import Bounds, EdgeBanding, HeightConfig, Vector3, WidthConfig
from ._zones import (
    DivisionDirection,
    DrawerSlideType,
    HeightMode,
    PartitionDepthPreset,
    PartRole,
    ShapeType,
    ShelfDepthPreset,
    ShelvesMode,
    WidthMode,
    ZoneContentType,
)

__all__ = [
    "Bounds",
    "DivisionDirection",
    "DrawerSlideType",
    "EdgeBanding",
    "HeightConfig",
    "HeightMode",
    "PartRole",
    "PartitionDepthPreset",
    "ShapeType",
    "ShelfDepthPreset",
    "ShelvesMode",
    "Vector3",
    "WidthConfig",
    "WidthMode",
    "ZoneContentType",
]
