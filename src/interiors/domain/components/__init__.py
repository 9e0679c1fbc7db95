"""Content components generating parts for populated zones.

Importing this package registers the built-in components with
``component_registry``.
"""

from .context import ComponentContext
from .drawer import (
    DRAWER_SLIDE_PRESETS,
    DrawerBoxDimensions,
    DrawersComponent,
    DrawerSlidePreset,
    calculate_box_dimensions,
    calculate_box_width,
    get_drawer_summary,
    get_front_count,
    get_total_box_count,
    has_external_fronts,
    select_slide_length,
)
from .partition import PartitionComponent
from .protocol import Component
from .registry import ComponentRegistry, component_registry
from .results import GenerationResult, HardwareItem, ValidationResult
from .shelf import ShelvesComponent, resolve_shelf_depth, shelf_position_ratio

__all__ = [
    "DRAWER_SLIDE_PRESETS",
    "Component",
    "ComponentContext",
    "ComponentRegistry",
    "DrawerBoxDimensions",
    "DrawerSlidePreset",
    "DrawersComponent",
    "GenerationResult",
    "HardwareItem",
    "PartitionComponent",
    "ShelvesComponent",
    "ValidationResult",
    "calculate_box_dimensions",
    "calculate_box_width",
    "component_registry",
    "get_drawer_summary",
    "get_front_count",
    "get_total_box_count",
    "has_external_fronts",
    "resolve_shelf_depth",
    "select_slide_length",
    "shelf_position_ratio",
]
