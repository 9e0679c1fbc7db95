"""Configuration loading and conversion to domain objects."""

from interiors.application.config.adapter import (
    config_to_cabinet_spec,
    config_to_constraints,
    config_to_interior,
    interior_to_dict,
    zone_to_dict,
)
from interiors.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from interiors.application.config.schemas import (
    SUPPORTED_VERSIONS,
    CabinetConfigSchema,
    ConstraintsConfigSchema,
    DrawerConfigSchema,
    HeightConfigSchema,
    InteriorConfigSchema,
    InteriorConfiguration,
    PartitionConfigSchema,
    ShelvesConfigSchema,
    WidthConfigSchema,
    ZoneConfigSchema,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "CabinetConfigSchema",
    "ConfigError",
    "ConstraintsConfigSchema",
    "DrawerConfigSchema",
    "HeightConfigSchema",
    "InteriorConfigSchema",
    "InteriorConfiguration",
    "PartitionConfigSchema",
    "ShelvesConfigSchema",
    "WidthConfigSchema",
    "ZoneConfigSchema",
    "config_to_cabinet_spec",
    "config_to_constraints",
    "config_to_interior",
    "interior_to_dict",
    "load_config",
    "load_config_from_dict",
    "zone_to_dict",
]
