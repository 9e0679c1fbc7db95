"""Validation of zone trees.

Generation accepts any tree and produces defined, possibly degenerate,
geometry. This module is where a user learns what needs fixing: structural
problems of individual zones, zones that resolve smaller than the configured
minimums, and content the components reject.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..components import ComponentContext, ComponentRegistry, component_registry
from ..constants import (
    MAX_CHILDREN_PER_ZONE,
    MAX_ZONE_DEPTH,
    MIN_ZONE_HEIGHT_MM,
    MIN_ZONE_WIDTH_MM,
)
from ..distribution import SizingSpec, validate_sizing_specs
from ..entities import CabinetSpec, Zone
from ..value_objects import HeightMode, WidthMode, ZoneContentType
from .interior_generator import CONTENT_COMPONENTS, PARTITION_COMPONENT, content_config
from .zone_bounds import calculate_bounds
from .zone_tree import iter_zones

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ZoneConstraints:
    """Limits a zone tree is validated against.

    Attributes:
        min_zone_width_mm: Smallest acceptable leaf width.
        min_zone_height_mm: Smallest acceptable leaf height.
        max_zone_depth: Number of nesting levels allowed (depths 0..n-1).
        max_children: Children allowed per NESTED zone.
    """

    min_zone_width_mm: float = MIN_ZONE_WIDTH_MM
    min_zone_height_mm: float = MIN_ZONE_HEIGHT_MM
    max_zone_depth: int = MAX_ZONE_DEPTH
    max_children: int = MAX_CHILDREN_PER_ZONE


DEFAULT_CONSTRAINTS = ZoneConstraints()


@dataclass(frozen=True)
class ZoneViolation:
    """A problem found on one zone.

    Attributes:
        zone_id: Zone the problem belongs to.
        message: Human-readable description.
        kind: Short category such as 'min_width' or 'structure'.
    """

    zone_id: str
    message: str
    kind: str = "structure"

    def __str__(self) -> str:
        return f"Zone '{self.zone_id}': {self.message}"


@dataclass
class ValidationReport:
    """Violations (blocking) and warnings (advisory) for a zone tree."""

    violations: list[ZoneViolation] = field(default_factory=list)
    warnings: list[ZoneViolation] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return len(self.violations) == 0

    @property
    def errors(self) -> list[str]:
        return [str(v) for v in self.violations]

    @property
    def warning_messages(self) -> list[str]:
        return [str(w) for w in self.warnings]

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 valid, 1 violations, 2 warnings only."""
        if self.violations:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_violation(
        self, zone_id: str, message: str, kind: str = "structure"
    ) -> ValidationReport:
        self.violations.append(ZoneViolation(zone_id, message, kind))
        return self

    def add_warning(
        self, zone_id: str, message: str, kind: str = "structure"
    ) -> ValidationReport:
        self.warnings.append(ZoneViolation(zone_id, message, kind))
        return self

    def merge(self, other: ValidationReport) -> ValidationReport:
        self.violations.extend(other.violations)
        self.warnings.extend(other.warnings)
        return self


def validate_zone(
    zone: Zone, constraints: ZoneConstraints = DEFAULT_CONSTRAINTS
) -> ValidationReport:
    """Structural checks on a single zone, children not included.

    Args:
        zone: Zone to check.
        constraints: Limits to check against.

    Returns:
        ValidationReport for this zone only.
    """
    report = ValidationReport()

    if zone.depth >= constraints.max_zone_depth:
        report.add_violation(
            zone.id,
            f"depth {zone.depth} exceeds maximum {constraints.max_zone_depth - 1}",
            "depth",
        )

    height = zone.height_config
    if height.mode == HeightMode.RATIO and height.ratio <= 0:
        report.add_violation(zone.id, "height ratio must be positive", "ratio")
    if (
        height.mode == HeightMode.EXACT
        and (height.exact_mm or 0) < constraints.min_zone_height_mm
    ):
        report.add_violation(
            zone.id,
            f"exact height must be at least {constraints.min_zone_height_mm:.0f}mm",
            "min_height",
        )

    width = zone.width_config
    if width is not None:
        if width.mode == WidthMode.PROPORTIONAL and width.ratio <= 0:
            report.add_violation(zone.id, "width ratio must be positive", "ratio")
        if (
            width.mode == WidthMode.FIXED
            and (width.fixed_mm or 0) < constraints.min_zone_width_mm
        ):
            report.add_violation(
                zone.id,
                f"fixed width must be at least {constraints.min_zone_width_mm:.0f}mm",
                "min_width",
            )

    if zone.content_type == ZoneContentType.NESTED:
        if not zone.children:
            report.add_violation(zone.id, "nested zone must have at least one child")
        if len(zone.children) > constraints.max_children:
            report.add_violation(
                zone.id,
                f"has {len(zone.children)} children, max is {constraints.max_children}",
            )
        for child in zone.children:
            if child.depth != zone.depth + 1:
                report.add_violation(
                    child.id,
                    f"depth {child.depth} does not match parent depth {zone.depth}",
                    "depth",
                )
        slots = max(0, len(zone.children) - 1)
        if zone.is_vertical and len(zone.partitions) > slots:
            report.add_warning(
                zone.id,
                f"{len(zone.partitions)} partitions for {slots} slots; extra ignored",
                "partition",
            )
        if not zone.is_vertical and zone.partitions:
            report.add_warning(
                zone.id, "partitions are ignored in horizontal zones", "partition"
            )
    elif zone.content_type in CONTENT_COMPONENTS and content_config(zone) is None:
        report.add_warning(
            zone.id,
            f"{zone.content_type.value} zone has no configuration and generates nothing",
            "content",
        )

    return report


def validate_tree(
    root: Zone, constraints: ZoneConstraints = DEFAULT_CONSTRAINTS
) -> ValidationReport:
    """Structural checks on every zone of the tree, plus id uniqueness."""
    report = ValidationReport()
    seen: set[str] = set()
    for zone in iter_zones(root):
        report.merge(validate_zone(zone, constraints))
        if zone.id in seen:
            report.add_warning(zone.id, "duplicate zone id", "duplicate_id")
        seen.add(zone.id)
    return report


def validate(
    root: Zone | None,
    constraints: ZoneConstraints | None = None,
    cabinet: CabinetSpec | None = None,
    registry: ComponentRegistry | None = None,
) -> ValidationReport:
    """Validate a zone tree.

    Without a cabinet only structural checks run. With a cabinet the tree is
    laid out with the same bounds computation used for generation; every
    leaf is checked against the minimum width and height, sibling sizing is
    checked against the span it shares, and zone content and partitions are
    validated by their components.

    Args:
        root: Root zone; None is valid.
        constraints: Limits to check against. Defaults to the built-in limits.
        cabinet: Cabinet the tree is laid out in.
        registry: Component registry for content checks.

    Returns:
        ValidationReport; ``valid`` is False when any violation was found.
    """
    constraints = constraints or DEFAULT_CONSTRAINTS
    if root is None:
        return ValidationReport()

    report = validate_tree(root, constraints)
    if cabinet is None:
        return report

    registry = registry or component_registry
    info = calculate_bounds(
        root, cabinet.interior_bounds, cabinet.body_thickness, cabinet.depth
    )

    for entry in info.nested_zone_bounds:
        zone, bounds = entry.zone, entry.bounds
        if zone.is_vertical:
            span = bounds.width - cabinet.body_thickness * (len(zone.children) - 1)
            specs = [SizingSpec.from_width_config(c.width_config) for c in zone.children]
            axis = "width"
        else:
            span = bounds.height
            specs = [SizingSpec.from_height_config(c.height_config) for c in zone.children]
            axis = "height"
        for message in validate_sizing_specs(specs, span, axis):
            report.add_violation(zone.id, message, "sizing")

    for entry in info.leaf_zone_bounds:
        zone, bounds = entry.zone, entry.bounds
        if bounds.width < constraints.min_zone_width_mm:
            report.add_violation(
                zone.id,
                f"width {bounds.width:.0f}mm is below minimum "
                f"{constraints.min_zone_width_mm:.0f}mm",
                "min_width",
            )
        if bounds.height < constraints.min_zone_height_mm:
            report.add_violation(
                zone.id,
                f"height {bounds.height:.0f}mm is below minimum "
                f"{constraints.min_zone_height_mm:.0f}mm",
                "min_height",
            )

        config = content_config(zone)
        component_id = CONTENT_COMPONENTS.get(zone.content_type)
        if config is None or component_id is None:
            continue
        context = ComponentContext(bounds=bounds, cabinet=cabinet, zone_id=zone.id)
        result = registry.create(component_id).validate(config, context)
        for error in result.errors:
            report.add_violation(zone.id, error, "content")
        for warning in result.warnings:
            report.add_warning(zone.id, warning, "content")

    partition_component = registry.create(PARTITION_COMPONENT)
    for entry in info.partition_bounds:
        context = ComponentContext(
            bounds=entry.bounds, cabinet=cabinet, zone_id=entry.parent_zone_id
        )
        result = partition_component.validate(entry.partition, context)
        for error in result.errors:
            report.add_violation(entry.parent_zone_id, error, "partition")
        for warning in result.warnings:
            report.add_warning(entry.parent_zone_id, warning, "partition")

    logger.debug(
        f"Validated {info.total_zone_count} zones: "
        f"{len(report.violations)} violations, {len(report.warnings)} warnings"
    )
    return report
