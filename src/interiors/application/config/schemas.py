"""Pydantic schemas for interior configuration files.

The JSON document mirrors the domain model in snake_case. Enum values use
the domain enums directly, so ``"content_type": "SHELVES"`` validates to
``ZoneContentType.SHELVES``. Sizing ratios are not range-checked here: a
non-positive ratio loads and is reported by zone validation instead.
"""

from __future__ import annotations

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from interiors.domain.constants import (
    BODY_THICKNESS_MM,
    FRONT_THICKNESS_MM,
    MAX_CHILDREN_PER_ZONE,
    MAX_ZONE_DEPTH,
    MIN_ZONE_HEIGHT_MM,
    MIN_ZONE_WIDTH_MM,
)
from interiors.domain.value_objects import (
    DivisionDirection,
    DrawerSlideType,
    HeightMode,
    PartitionDepthPreset,
    ShelfDepthPreset,
    ShelvesMode,
    WidthMode,
    ZoneContentType,
)

# Version 1.0: zone tree interiors with shelves, drawers and partitions
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class HeightConfigSchema(BaseModel):
    """Zone sizing within a HORIZONTAL parent."""

    model_config = ConfigDict(extra="forbid")

    mode: HeightMode = HeightMode.RATIO
    ratio: float = 1.0
    exact_mm: float | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def validate_exact_has_value(self) -> HeightConfigSchema:
        if self.mode == HeightMode.EXACT and self.exact_mm is None:
            raise ValueError("exact_mm is required when mode is EXACT")
        return self


class WidthConfigSchema(BaseModel):
    """Zone sizing within a VERTICAL parent."""

    model_config = ConfigDict(extra="forbid")

    mode: WidthMode = WidthMode.PROPORTIONAL
    ratio: float = 1.0
    fixed_mm: float | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def validate_fixed_has_value(self) -> WidthConfigSchema:
        if self.mode == WidthMode.FIXED and self.fixed_mm is None:
            raise ValueError("fixed_mm is required when mode is FIXED")
        return self


class PartitionConfigSchema(BaseModel):
    """Vertical divider between two neighbouring children.

    Attributes:
        id: Optional identifier; derived from the parent zone when omitted.
        depth_preset: FULL, HALF or CUSTOM.
        custom_depth_mm: Depth for the CUSTOM preset.
        material_id: Material override.
        enabled: Whether a panel is generated.
    """

    model_config = ConfigDict(extra="forbid")

    id: str | None = None
    depth_preset: PartitionDepthPreset = PartitionDepthPreset.FULL
    custom_depth_mm: float | None = Field(default=None, ge=0)
    material_id: str | None = None
    enabled: bool = True


class ShelfConfigSchema(BaseModel):
    """Per-shelf override for MANUAL shelves mode."""

    model_config = ConfigDict(extra="forbid")

    id: str | None = None
    depth_preset: ShelfDepthPreset | None = None
    custom_depth_mm: float | None = Field(default=None, ge=0)
    material_id: str | None = None


class ShelvesConfigSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    mode: ShelvesMode = ShelvesMode.UNIFORM
    count: int = Field(default=1, ge=0)
    depth_preset: ShelfDepthPreset = ShelfDepthPreset.FULL
    custom_depth_mm: float | None = Field(default=None, ge=0)
    material_id: str | None = None
    shelves: list[ShelfConfigSchema] = Field(default_factory=list)


class DrawerFrontSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    material_id: str | None = None


class DrawerBoxSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    height_ratio: float = 1.0


class AboveBoxShelfSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str | None = None
    depth_preset: ShelfDepthPreset = ShelfDepthPreset.FULL
    custom_depth_mm: float | None = Field(default=None, ge=0)


class DrawerZoneSchema(BaseModel):
    """One slot of a drawer stack.

    ``front`` set to null makes the drawer internal (no visible front).

    Attributes:
        id: Optional identifier.
        height_ratio: Weight of this slot within the stack.
        front: Visible front, or null.
        boxes: Stacked boxes, bottom-most first.
        box_to_front_ratio: Fraction of the slot height used by boxes.
        above_box_shelves: Shelves placed above a shortened box.
    """

    model_config = ConfigDict(extra="forbid")

    id: str | None = None
    height_ratio: float = 1.0
    front: DrawerFrontSchema | None = Field(default_factory=DrawerFrontSchema)
    boxes: list[DrawerBoxSchema] = Field(
        default_factory=lambda: [DrawerBoxSchema()]
    )
    box_to_front_ratio: float | None = Field(default=None, ge=0.0, le=1.0)
    above_box_shelves: list[AboveBoxShelfSchema] = Field(default_factory=list)


class DrawerConfigSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    zones: list[DrawerZoneSchema] = Field(default_factory=list)
    slide_type: DrawerSlideType = DrawerSlideType.SIDE_MOUNT
    box_material_id: str | None = None
    bottom_material_id: str | None = None
    front_material_id: str | None = None


class ZoneConfigSchema(BaseModel):
    """A node of the interior zone tree.

    Attributes:
        id: Optional identifier; derived from the tree position when omitted.
        content_type: EMPTY, SHELVES, DRAWERS or NESTED.
        height_config: Sizing within a HORIZONTAL parent.
        width_config: Sizing within a VERTICAL parent.
        division_direction: Layout of children (NESTED only).
        children: Child zones (NESTED only).
        partitions: Dividers between VERTICAL children (NESTED only).
        shelves_config: Shelf content (SHELVES only).
        drawer_config: Drawer content (DRAWERS only).
    """

    model_config = ConfigDict(extra="forbid")

    id: str | None = None
    content_type: ZoneContentType = ZoneContentType.EMPTY
    height_config: HeightConfigSchema = Field(default_factory=HeightConfigSchema)
    width_config: WidthConfigSchema | None = None
    division_direction: DivisionDirection | None = None
    children: list[ZoneConfigSchema] = Field(default_factory=list)
    partitions: list[PartitionConfigSchema] = Field(default_factory=list)
    shelves_config: ShelvesConfigSchema | None = None
    drawer_config: DrawerConfigSchema | None = None

    @model_validator(mode="after")
    def validate_content_fields(self) -> ZoneConfigSchema:
        """Only the configuration matching content_type may be present."""
        nested = self.content_type == ZoneContentType.NESTED
        if not nested and (self.children or self.partitions):
            raise ValueError("children and partitions require content_type NESTED")
        if not nested and self.division_direction is not None:
            raise ValueError("division_direction requires content_type NESTED")
        if (
            self.shelves_config is not None
            and self.content_type != ZoneContentType.SHELVES
        ):
            raise ValueError("shelves_config requires content_type SHELVES")
        if (
            self.drawer_config is not None
            and self.content_type != ZoneContentType.DRAWERS
        ):
            raise ValueError("drawer_config requires content_type DRAWERS")
        return self


class CabinetConfigSchema(BaseModel):
    """Cabinet dimensions and default materials, in millimeters.

    Attributes:
        id: Identifier stamped on generated parts.
        width: Outer width.
        height: Outer height.
        depth: Outer depth.
        body_thickness: Carcass panel thickness.
        front_thickness: Drawer front thickness.
        body_material_id: Default material for body, shelves and boxes.
        front_material_id: Default material for drawer fronts.
        bottom_material_id: Default material for drawer bottoms.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = "cabinet"
    width: float = Field(..., gt=0, le=10000)
    height: float = Field(..., gt=0, le=10000)
    depth: float = Field(..., gt=0, le=10000)
    body_thickness: float = Field(default=BODY_THICKNESS_MM, gt=0)
    front_thickness: float = Field(default=FRONT_THICKNESS_MM, gt=0)
    body_material_id: str = "body"
    front_material_id: str = "front"
    bottom_material_id: str | None = None

    @model_validator(mode="after")
    def validate_interior_space(self) -> CabinetConfigSchema:
        if self.body_thickness * 2 >= min(self.width, self.height):
            raise ValueError("body_thickness leaves no interior space")
        return self


class InteriorConfigSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    root_zone: ZoneConfigSchema | None = None


class ConstraintsConfigSchema(BaseModel):
    """Limits used when validating the zone tree."""

    model_config = ConfigDict(extra="forbid")

    min_zone_width_mm: float = Field(default=MIN_ZONE_WIDTH_MM, ge=0)
    min_zone_height_mm: float = Field(default=MIN_ZONE_HEIGHT_MM, ge=0)
    max_zone_depth: int = Field(default=MAX_ZONE_DEPTH, ge=1)
    max_children: int = Field(default=MAX_CHILDREN_PER_ZONE, ge=1)


class InteriorConfiguration(BaseModel):
    """Root schema of an interior configuration file.

    Example:
        >>> config = InteriorConfiguration(
        ...     schema_version="1.0",
        ...     cabinet=CabinetConfigSchema(width=600, height=720, depth=560),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    cabinet: CabinetConfigSchema
    interior: InteriorConfigSchema = Field(default_factory=InteriorConfigSchema)
    constraints: ConstraintsConfigSchema | None = None

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v
        major = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major in supported_majors:
            return v
        raise ValueError(
            f"Unsupported schema version: {v}. "
            f"Supported versions: {', '.join(sorted(SUPPORTED_VERSIONS))}"
        )
