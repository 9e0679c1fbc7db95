"""Domain entities for cabinet interiors.

The interior of a cabinet is a recursive tree of ``Zone`` values. Leaf zones
hold content (shelves, drawers or nothing); NESTED zones split their space
between children. Every entity is immutable: editing a tree produces a new
tree (see ``services.zone_tree``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .constants import BODY_THICKNESS_MM, FRONT_THICKNESS_MM
from .value_objects import (
    Bounds,
    DivisionDirection,
    DrawerSlideType,
    EdgeBanding,
    HeightConfig,
    PartitionDepthPreset,
    PartRole,
    ShapeType,
    ShelfDepthPreset,
    ShelvesMode,
    Vector3,
    WidthConfig,
    ZoneContentType,
)


@dataclass(frozen=True)
class PartitionConfig:
    """Vertical divider between two side-by-side sibling zones.

    Attributes:
        id: Unique identifier.
        depth_preset: FULL, HALF or CUSTOM depth.
        custom_depth_mm: Depth used when the preset is CUSTOM.
        material_id: Material override; the body material is used when None.
        enabled: Whether a physical panel is generated for this divider.
    """

    id: str
    depth_preset: PartitionDepthPreset = PartitionDepthPreset.FULL
    custom_depth_mm: float | None = None
    material_id: str | None = None
    enabled: bool = True

    def __post_init__(self) -> None:
        if self.custom_depth_mm is not None and self.custom_depth_mm < 0:
            raise ValueError("Partition custom depth must be non-negative")


@dataclass(frozen=True)
class ShelfConfig:
    """Per-shelf override used in MANUAL shelves mode.

    Unset fields fall back to the zone-level ``ShelvesConfig`` values.
    """

    id: str
    depth_preset: ShelfDepthPreset | None = None
    custom_depth_mm: float | None = None
    material_id: str | None = None


@dataclass(frozen=True)
class ShelvesConfig:
    """Content configuration of a SHELVES zone.

    Attributes:
        mode: UNIFORM or MANUAL.
        count: Number of shelves.
        depth_preset: Zone-level depth preset.
        custom_depth_mm: Zone-level custom depth (CUSTOM preset).
        material_id: Zone-level material override.
        shelves: Per-index overrides, only read in MANUAL mode.
    """

    mode: ShelvesMode = ShelvesMode.UNIFORM
    count: int = 1
    depth_preset: ShelfDepthPreset = ShelfDepthPreset.FULL
    custom_depth_mm: float | None = None
    material_id: str | None = None
    shelves: tuple[ShelfConfig, ...] = ()

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError("Shelf count must be non-negative")
        if not isinstance(self.shelves, tuple):
            object.__setattr__(self, "shelves", tuple(self.shelves))

    def shelf_override(self, index: int) -> ShelfConfig | None:
        """Get the MANUAL override for a shelf index, if any."""
        if self.mode != ShelvesMode.MANUAL or index >= len(self.shelves):
            return None
        return self.shelves[index]


@dataclass(frozen=True)
class DrawerZoneFront:
    """Visible front of a drawer zone."""

    material_id: str | None = None


@dataclass(frozen=True)
class DrawerZoneBox:
    """One box inside a drawer zone, sized by ratio within the box space."""

    height_ratio: float = 1.0


@dataclass(frozen=True)
class AboveBoxShelf:
    """Shelf placed in the void above a shortened drawer box."""

    id: str
    depth_preset: ShelfDepthPreset = ShelfDepthPreset.FULL
    custom_depth_mm: float | None = None


@dataclass(frozen=True)
class AboveBoxContent:
    """Content filling the space above a drawer box."""

    shelves: tuple[AboveBoxShelf, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.shelves, tuple):
            object.__setattr__(self, "shelves", tuple(self.shelves))


@dataclass(frozen=True)
class DrawerZone:
    """One vertical slot in a drawer stack.

    Attributes:
        id: Unique identifier.
        height_ratio: Weight of this slot within the stack.
        front: Visible front, or None for an internal drawer.
        boxes: Stacked boxes, bottom-most first.
        box_to_front_ratio: Fraction of the slot height used by boxes.
        above_box_content: Shelves in the remaining height.
    """

    id: str
    height_ratio: float = 1.0
    front: DrawerZoneFront | None = field(default_factory=DrawerZoneFront)
    boxes: tuple[DrawerZoneBox, ...] = (DrawerZoneBox(),)
    box_to_front_ratio: float | None = None
    above_box_content: AboveBoxContent | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.boxes, tuple):
            object.__setattr__(self, "boxes", tuple(self.boxes))
        if self.box_to_front_ratio is not None and not (
            0 <= self.box_to_front_ratio <= 1
        ):
            raise ValueError("box_to_front_ratio must be between 0 and 1")

    @property
    def has_front(self) -> bool:
        return self.front is not None

    @property
    def effective_box_ratio(self) -> float:
        """Box-to-front ratio with the default of 1.0 applied."""
        return 1.0 if self.box_to_front_ratio is None else self.box_to_front_ratio

    @property
    def above_box_shelves(self) -> tuple[AboveBoxShelf, ...]:
        if self.above_box_content is None:
            return ()
        return self.above_box_content.shelves


@dataclass(frozen=True)
class DrawerConfig:
    """Content configuration of a DRAWERS zone.

    Attributes:
        zones: Drawer slots, bottom-most first.
        slide_type: Slide family; sets box side and rear clearances.
        box_material_id: Box material override.
        bottom_material_id: Box bottom material override.
        front_material_id: Front material override.
    """

    zones: tuple[DrawerZone, ...] = ()
    slide_type: DrawerSlideType = DrawerSlideType.SIDE_MOUNT
    box_material_id: str | None = None
    bottom_material_id: str | None = None
    front_material_id: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.zones, tuple):
            object.__setattr__(self, "zones", tuple(self.zones))


@dataclass(frozen=True)
class Zone:
    """A node in the interior layout tree.

    Only the configuration matching ``content_type`` may be populated:
    ``shelves_config`` for SHELVES, ``drawer_config`` for DRAWERS and
    ``children``/``partitions`` for NESTED. A matching configuration may be
    absent, in which case the zone generates nothing.

    Attributes:
        id: Identifier, unique across the tree.
        content_type: What the zone holds.
        height_config: Sizing within a HORIZONTAL parent.
        width_config: Sizing within a VERTICAL parent.
        division_direction: Layout of children (NESTED only).
        children: Child zones, bottom-most or left-most first.
        partitions: ``partitions[i]`` divides ``children[i]`` and ``children[i+1]``.
        shelves_config: Shelf content.
        drawer_config: Drawer content.
        depth: Nesting level, 0 at the root.
    """

    id: str
    content_type: ZoneContentType = ZoneContentType.EMPTY
    height_config: HeightConfig = field(default_factory=HeightConfig)
    width_config: WidthConfig | None = None
    division_direction: DivisionDirection | None = None
    children: tuple[Zone, ...] = ()
    partitions: tuple[PartitionConfig, ...] = ()
    shelves_config: ShelvesConfig | None = None
    drawer_config: DrawerConfig | None = None
    depth: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))
        if not isinstance(self.partitions, tuple):
            object.__setattr__(self, "partitions", tuple(self.partitions))
        if self.depth < 0:
            raise ValueError("Zone depth must be non-negative")
        if self.content_type != ZoneContentType.NESTED and (
            self.children or self.partitions
        ):
            raise ValueError(
                f"Zone '{self.id}': children and partitions require NESTED content"
            )
        if (
            self.shelves_config is not None
            and self.content_type != ZoneContentType.SHELVES
        ):
            raise ValueError(
                f"Zone '{self.id}': shelves_config requires SHELVES content"
            )
        if (
            self.drawer_config is not None
            and self.content_type != ZoneContentType.DRAWERS
        ):
            raise ValueError(
                f"Zone '{self.id}': drawer_config requires DRAWERS content"
            )

    @property
    def is_nested(self) -> bool:
        """True when the zone has children to lay out."""
        return self.content_type == ZoneContentType.NESTED and len(self.children) > 0

    @property
    def direction(self) -> DivisionDirection:
        """Division direction with HORIZONTAL as the default."""
        return self.division_direction or DivisionDirection.HORIZONTAL

    @property
    def is_vertical(self) -> bool:
        return self.direction == DivisionDirection.VERTICAL


@dataclass(frozen=True)
class CabinetInteriorConfig:
    """Interior configuration of one cabinet."""

    root_zone: Zone | None = None


@dataclass(frozen=True)
class CabinetSpec:
    """Cabinet-level scalars supplied by the surrounding cabinet parameters.

    Attributes:
        width: Outer width in mm.
        height: Outer height in mm.
        depth: Outer depth in mm.
        body_thickness: Carcass panel thickness in mm.
        front_thickness: Front panel thickness in mm.
        body_material_id: Default material for body, shelves and boxes.
        front_material_id: Default material for drawer fronts.
        bottom_material_id: Default material for drawer bottoms.
        cabinet_id: Identifier stamped on every generated part.
    """

    width: float
    height: float
    depth: float
    body_thickness: float = BODY_THICKNESS_MM
    front_thickness: float = FRONT_THICKNESS_MM
    body_material_id: str = "body"
    front_material_id: str = "front"
    bottom_material_id: str | None = None
    cabinet_id: str = "cabinet"

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.depth <= 0:
            raise ValueError("Cabinet dimensions must be positive")
        if self.body_thickness <= 0 or self.front_thickness <= 0:
            raise ValueError("Panel thicknesses must be positive")
        if self.body_thickness * 2 >= min(self.width, self.height):
            raise ValueError("Body thickness leaves no interior space")

    @property
    def interior_width(self) -> float:
        return self.width - 2 * self.body_thickness

    @property
    def interior_height(self) -> float:
        return self.height - 2 * self.body_thickness

    @property
    def interior_bounds(self) -> Bounds:
        """Root bounds of the interior, centered on X, starting above the bottom panel."""
        return Bounds(
            start_x=-self.interior_width / 2,
            start_y=self.body_thickness,
            width=self.interior_width,
            height=self.interior_height,
            depth_mm=self.depth,
        )


@dataclass(frozen=True)
class CabinetMetadata:
    """Role tag and indices used for cut-list grouping."""

    cabinet_id: str
    role: PartRole
    index: int | None = None
    drawer_index: int | None = None
    zone_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"cabinet_id": self.cabinet_id, "role": self.role.value}
        if self.index is not None:
            data["index"] = self.index
        if self.drawer_index is not None:
            data["drawer_index"] = self.drawer_index
        if self.zone_id is not None:
            data["zone_id"] = self.zone_id
        return data


@dataclass(frozen=True)
class GeneratedPart:
    """A manufacturable flat panel produced by interior generation.

    ``width`` and ``height`` are the panel face dimensions; ``depth`` is the
    panel's own thickness. Position is the panel center in the cabinet frame
    and rotation is in radians.

    Attributes:
        name: Human-readable label.
        width: Face width in mm.
        height: Face height in mm.
        depth: Panel thickness in mm.
        position: Center (x, y, z) in mm.
        rotation: Euler rotation (rx, ry, rz) in radians.
        material_id: Material identifier.
        cabinet_metadata: Role and index information.
        edge_banding: Banded edges.
        shape_type: Outline shape.
    """

    name: str
    width: float
    height: float
    depth: float
    position: Vector3
    rotation: Vector3
    material_id: str
    cabinet_metadata: CabinetMetadata
    edge_banding: EdgeBanding = field(default_factory=EdgeBanding)
    shape_type: ShapeType = ShapeType.RECT

    @property
    def role(self) -> PartRole:
        return self.cabinet_metadata.role

    @property
    def shape_params(self) -> dict[str, Any]:
        return {"type": self.shape_type.value, "x": self.width, "y": self.height}

    @property
    def area(self) -> float:
        """Face area in square millimeters."""
        return self.width * self.height

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "name": self.name,
            "role": self.role.value,
            "shape_type": self.shape_type.value,
            "shape_params": self.shape_params,
            "width": self.width,
            "height": self.height,
            "depth": self.depth,
            "position": list(self.position),
            "rotation": list(self.rotation),
            "material_id": self.material_id,
            "edge_banding": {
                "top": self.edge_banding.top,
                "bottom": self.edge_banding.bottom,
                "left": self.edge_banding.left,
                "right": self.edge_banding.right,
            },
            "cabinet_metadata": self.cabinet_metadata.to_dict(),
        }
