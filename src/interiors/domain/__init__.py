"""Domain layer - zone tree model, layout and part generation."""

from .distribution import SizingSpec, distribute, validate_sizing_specs
from .entities import (
    AboveBoxContent,
    AboveBoxShelf,
    CabinetInteriorConfig,
    CabinetMetadata,
    CabinetSpec,
    DrawerConfig,
    DrawerZone,
    DrawerZoneBox,
    DrawerZoneFront,
    GeneratedPart,
    PartitionConfig,
    ShelfConfig,
    ShelvesConfig,
    Zone,
)
from .services import (
    InteriorGenerationResult,
    InteriorGenerator,
    ValidationReport,
    ZoneConstraints,
    calculate_bounds,
    generate_interior,
    get_interior_summary,
    has_interior_content,
    validate,
)
from .value_objects import (
    Bounds,
    DivisionDirection,
    DrawerSlideType,
    EdgeBanding,
    HeightConfig,
    HeightMode,
    PartitionDepthPreset,
    PartRole,
    ShapeType,
    ShelfDepthPreset,
    ShelvesMode,
    WidthConfig,
    WidthMode,
    ZoneContentType,
)

__all__ = [
    "AboveBoxContent",
    "AboveBoxShelf",
    "Bounds",
    "CabinetInteriorConfig",
    "CabinetMetadata",
    "CabinetSpec",
    "DivisionDirection",
    "DrawerConfig",
    "DrawerSlideType",
    "DrawerZone",
    "DrawerZoneBox",
    "DrawerZoneFront",
    "EdgeBanding",
    "GeneratedPart",
    "HeightConfig",
    "HeightMode",
    "InteriorGenerationResult",
    "InteriorGenerator",
    "PartRole",
    "PartitionConfig",
    "PartitionDepthPreset",
    "ShapeType",
    "ShelfConfig",
    "ShelfDepthPreset",
    "ShelvesConfig",
    "ShelvesMode",
    "SizingSpec",
    "ValidationReport",
    "WidthConfig",
    "WidthMode",
    "Zone",
    "ZoneConstraints",
    "ZoneContentType",
    "calculate_bounds",
    "distribute",
    "generate_interior",
    "get_interior_summary",
    "has_interior_content",
    "validate",
    "validate_sizing_specs",
]
