"""Tests for zone tree validation."""

from __future__ import annotations

from interiors.domain.entities import (
    CabinetInteriorConfig,
    CabinetSpec,
    PartitionConfig,
    ShelvesConfig,
    Zone,
)
from interiors.domain.services import (
    ValidationReport,
    ZoneConstraints,
    ZoneViolation,
    validate,
    validate_tree,
    validate_zone,
)
from interiors.domain.value_objects import (
    DivisionDirection,
    HeightConfig,
    PartitionDepthPreset,
    WidthConfig,
    ZoneContentType,
)

# =============================================================================
# Fixtures
# =============================================================================


def _nested(
    zone_id: str,
    children: tuple[Zone, ...],
    direction: DivisionDirection = DivisionDirection.HORIZONTAL,
    depth: int = 0,
    partitions: tuple[PartitionConfig, ...] = (),
) -> Zone:
    return Zone(
        id=zone_id,
        content_type=ZoneContentType.NESTED,
        division_direction=direction,
        children=children,
        partitions=partitions,
        depth=depth,
    )


def _kinds(report: ValidationReport) -> list[str]:
    return [v.kind for v in report.violations]


# =============================================================================
# Report tests
# =============================================================================


class TestValidationReport:
    """Tests for ValidationReport."""

    def test_empty_report_valid(self) -> None:
        report = ValidationReport()
        assert report.valid
        assert report.exit_code == 0

    def test_warnings_only(self) -> None:
        report = ValidationReport().add_warning("z", "careful")
        assert report.valid
        assert report.exit_code == 2
        assert report.warning_messages == ["Zone 'z': careful"]

    def test_violations(self) -> None:
        report = ValidationReport().add_violation("z", "broken").add_warning("z", "x")
        assert not report.valid
        assert report.exit_code == 1
        assert report.errors == ["Zone 'z': broken"]

    def test_merge(self) -> None:
        report = ValidationReport().add_violation("a", "one")
        report.merge(ValidationReport().add_warning("b", "two"))
        assert len(report.violations) == 1
        assert len(report.warnings) == 1

    def test_violation_str(self) -> None:
        assert str(ZoneViolation("root", "too small")) == "Zone 'root': too small"


# =============================================================================
# Structural tests
# =============================================================================


class TestValidateZone:
    """Tests for validate_zone() structural checks."""

    def test_valid_leaf(self) -> None:
        assert validate_zone(Zone(id="z")).valid

    def test_depth_limit(self) -> None:
        report = validate_zone(Zone(id="z", depth=3))
        assert _kinds(report) == ["depth"]
        assert "depth 3 exceeds maximum 2" in report.violations[0].message

    def test_non_positive_height_ratio(self) -> None:
        report = validate_zone(Zone(id="z", height_config=HeightConfig.of_ratio(0)))
        assert report.violations[0].message == "height ratio must be positive"

    def test_exact_height_below_minimum(self) -> None:
        report = validate_zone(Zone(id="z", height_config=HeightConfig.exact(20)))
        assert _kinds(report) == ["min_height"]
        assert "at least 50mm" in report.violations[0].message

    def test_fixed_width_below_minimum(self) -> None:
        report = validate_zone(Zone(id="z", width_config=WidthConfig.fixed(60)))
        assert _kinds(report) == ["min_width"]

    def test_non_positive_width_ratio(self) -> None:
        report = validate_zone(Zone(id="z", width_config=WidthConfig.of_ratio(-1)))
        assert report.violations[0].message == "width ratio must be positive"

    def test_nested_without_children(self) -> None:
        report = validate_zone(Zone(id="z", content_type=ZoneContentType.NESTED))
        assert "at least one child" in report.violations[0].message

    def test_too_many_children(self) -> None:
        zone = _nested("z", tuple(Zone(id=f"c{i}", depth=1) for i in range(7)))
        report = validate_zone(zone)
        assert "has 7 children, max is 6" in report.violations[0].message

    def test_child_depth_mismatch(self) -> None:
        zone = _nested("z", (Zone(id="c", depth=3),))
        report = validate_zone(zone)
        assert report.violations[0].zone_id == "c"
        assert report.violations[0].kind == "depth"

    def test_extra_partitions_warn(self) -> None:
        zone = _nested(
            "z",
            (Zone(id="a", depth=1), Zone(id="b", depth=1)),
            DivisionDirection.VERTICAL,
            partitions=(PartitionConfig(id="p0"), PartitionConfig(id="p1")),
        )
        report = validate_zone(zone)
        assert report.valid
        assert "2 partitions for 1 slots" in report.warnings[0].message

    def test_horizontal_partitions_warn(self) -> None:
        zone = _nested(
            "z",
            (Zone(id="a", depth=1), Zone(id="b", depth=1)),
            partitions=(PartitionConfig(id="p0"),),
        )
        report = validate_zone(zone)
        assert report.warnings[0].message == "partitions are ignored in horizontal zones"

    def test_content_zone_without_config_warns(self) -> None:
        report = validate_zone(Zone(id="z", content_type=ZoneContentType.DRAWERS))
        assert report.valid
        assert report.warnings[0].kind == "content"

    def test_custom_constraints(self) -> None:
        constraints = ZoneConstraints(max_zone_depth=5)
        assert validate_zone(Zone(id="z", depth=3), constraints).valid


class TestValidateTree:
    """Tests for validate_tree()."""

    def test_collects_from_all_zones(self) -> None:
        root = _nested(
            "root",
            (
                Zone(id="a", depth=1, height_config=HeightConfig.of_ratio(0)),
                _nested("b", (), depth=1),
            ),
        )
        report = validate_tree(root)
        assert {v.zone_id for v in report.violations} == {"a", "b"}

    def test_duplicate_ids_warn(self) -> None:
        root = _nested("root", (Zone(id="x", depth=1), Zone(id="x", depth=1)))
        report = validate_tree(root)
        assert report.valid
        assert report.warnings[0].kind == "duplicate_id"

    def test_depth_exceeded_deep_in_tree(self) -> None:
        leaf = Zone(id="leaf", depth=3)
        level2 = _nested("l2", (leaf,), depth=2)
        level1 = _nested("l1", (level2,), depth=1)
        report = validate_tree(_nested("root", (level1,)))
        assert [v.zone_id for v in report.violations] == ["leaf"]


# =============================================================================
# Geometric tests
# =============================================================================


class TestValidateWithCabinet:
    """Tests for validate() with a cabinet to lay the tree out in."""

    def test_none_root_is_valid(self, standard_cabinet: CabinetSpec) -> None:
        assert validate(None, cabinet=standard_cabinet).valid

    def test_valid_interiors(
        self,
        shelves_interior: CabinetInteriorConfig,
        two_column_interior: CabinetInteriorConfig,
        standard_cabinet: CabinetSpec,
    ) -> None:
        for interior in (shelves_interior, two_column_interior):
            report = validate(interior.root_zone, cabinet=standard_cabinet)
            assert report.valid
            assert report.warnings == []

    def test_narrow_leaf(self, standard_cabinet: CabinetSpec) -> None:
        root = _nested(
            "root",
            (
                Zone(id="narrow", width_config=WidthConfig.fixed(50), depth=1),
                Zone(id="wide", width_config=WidthConfig(), depth=1),
            ),
            DivisionDirection.VERTICAL,
        )
        report = validate(root, cabinet=standard_cabinet)

        narrow = [v for v in report.violations if v.zone_id == "narrow"]
        assert [v.kind for v in narrow] == ["min_width", "min_width"]
        assert "width 50mm is below minimum 100mm" in narrow[1].message

    def test_short_leaf(self, standard_cabinet: CabinetSpec) -> None:
        root = _nested(
            "root",
            (
                Zone(id="tall", height_config=HeightConfig.exact(660), depth=1),
                Zone(id="short", depth=1),
            ),
        )
        report = validate(root, cabinet=standard_cabinet)
        assert any(
            v.zone_id == "short" and "height 24mm is below minimum 50mm" in v.message
            for v in report.violations
        )

    def test_fixed_heights_exceed_span(self, standard_cabinet: CabinetSpec) -> None:
        root = _nested(
            "root",
            (
                Zone(id="a", height_config=HeightConfig.exact(400), depth=1),
                Zone(id="b", height_config=HeightConfig.exact(400), depth=1),
            ),
        )
        report = validate(root, cabinet=standard_cabinet)
        sizing = [v for v in report.violations if v.kind == "sizing"]
        assert len(sizing) == 1
        assert sizing[0].zone_id == "root"
        assert "Fixed heights (800mm) exceed available height (684mm)" in sizing[0].message

    def test_vertical_span_excludes_partition_slots(
        self, standard_cabinet: CabinetSpec
    ) -> None:
        """Two 273mm columns fill 564mm only together with the 18mm slot."""
        root = _nested(
            "root",
            (
                Zone(id="a", width_config=WidthConfig.fixed(273), depth=1),
                Zone(id="b", width_config=WidthConfig.fixed(274), depth=1),
            ),
            DivisionDirection.VERTICAL,
        )
        report = validate(root, cabinet=standard_cabinet)
        assert [v.kind for v in report.violations] == ["sizing"]

    def test_content_errors_reported(self, standard_cabinet: CabinetSpec) -> None:
        root = Zone(
            id="root",
            content_type=ZoneContentType.SHELVES,
            shelves_config=ShelvesConfig(count=11),
        )
        report = validate(root, cabinet=standard_cabinet)
        assert _kinds(report) == ["content"]
        assert report.violations[0].zone_id == "root"

    def test_partition_errors_reported(self, standard_cabinet: CabinetSpec) -> None:
        root = _nested(
            "root",
            (Zone(id="a", depth=1), Zone(id="b", depth=1)),
            DivisionDirection.VERTICAL,
            partitions=(
                PartitionConfig(
                    id="p",
                    depth_preset=PartitionDepthPreset.CUSTOM,
                    custom_depth_mm=10,
                ),
            ),
        )
        report = validate(root, cabinet=standard_cabinet)
        assert _kinds(report) == ["partition"]
        assert report.violations[0].zone_id == "root"

    def test_custom_minimums(
        self, two_column_interior: CabinetInteriorConfig, standard_cabinet: CabinetSpec
    ) -> None:
        constraints = ZoneConstraints(min_zone_width_mm=300)
        report = validate(
            two_column_interior.root_zone, constraints, cabinet=standard_cabinet
        )
        assert {v.zone_id for v in report.violations} == {"left", "right"}

    def test_structure_only_without_cabinet(self) -> None:
        root = Zone(
            id="root",
            content_type=ZoneContentType.SHELVES,
            shelves_config=ShelvesConfig(count=11),
        )
        assert validate(root).valid
