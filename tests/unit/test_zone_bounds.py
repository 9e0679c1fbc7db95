"""Tests for zone tree bounds calculation."""

from __future__ import annotations

import pytest

from interiors.domain.entities import CabinetSpec, PartitionConfig, Zone
from interiors.domain.services import calculate_bounds, calculate_partition_depth
from interiors.domain.services.zone_bounds import MAX_TRAVERSAL_DEPTH
from interiors.domain.value_objects import (
    Bounds,
    DivisionDirection,
    HeightConfig,
    PartitionDepthPreset,
    WidthConfig,
    ZoneContentType,
)

# =============================================================================
# Fixtures
# =============================================================================


def _leaf(zone_id: str, depth: int = 1, **kwargs: object) -> Zone:
    return Zone(id=zone_id, depth=depth, **kwargs)  # type: ignore[arg-type]


def _nested(
    zone_id: str,
    direction: DivisionDirection,
    children: tuple[Zone, ...],
    depth: int = 0,
    partitions: tuple[PartitionConfig, ...] = (),
    **kwargs: object,
) -> Zone:
    return Zone(
        id=zone_id,
        content_type=ZoneContentType.NESTED,
        division_direction=direction,
        children=children,
        partitions=partitions,
        depth=depth,
        **kwargs,  # type: ignore[arg-type]
    )


@pytest.fixture
def interior_bounds(standard_cabinet: CabinetSpec) -> Bounds:
    return standard_cabinet.interior_bounds


# =============================================================================
# Tests
# =============================================================================


class TestLeafRoot:
    """Tests for a root zone without children."""

    def test_leaf_root_gets_parent_bounds(self, interior_bounds: Bounds) -> None:
        root = Zone(id="root", content_type=ZoneContentType.SHELVES)
        info = calculate_bounds(root, interior_bounds, 18, 560)

        assert len(info.leaf_zone_bounds) == 1
        assert info.leaf_zone_bounds[0].bounds == interior_bounds
        assert info.partition_bounds == ()
        assert info.total_zone_count == 1
        assert info.max_depth == 0

    def test_nested_without_children_is_leaf(self, interior_bounds: Bounds) -> None:
        root = Zone(id="root", content_type=ZoneContentType.NESTED)
        info = calculate_bounds(root, interior_bounds, 18, 560)

        assert [e.zone.id for e in info.leaf_zone_bounds] == ["root"]
        assert info.nested_zone_bounds == ()


class TestHorizontalSplit:
    """Tests for HORIZONTAL zones stacking children along Y."""

    def test_single_child_fills_parent(self, interior_bounds: Bounds) -> None:
        root = _nested("root", DivisionDirection.HORIZONTAL, (_leaf("a"),))
        info = calculate_bounds(root, interior_bounds, 18, 560)

        bounds = info.leaf_zone_bounds[0].bounds
        assert bounds.start_y == 18
        assert bounds.height == 684
        assert bounds.width == 564

    def test_ratio_heights(self) -> None:
        children = (
            _leaf("a", height_config=HeightConfig.of_ratio(1)),
            _leaf("b", height_config=HeightConfig.of_ratio(2)),
            _leaf("c", height_config=HeightConfig.of_ratio(1)),
        )
        root = _nested("root", DivisionDirection.HORIZONTAL, children)
        info = calculate_bounds(root, Bounds(0, 0, 500, 800, 560), 18, 560)

        heights = [e.bounds.height for e in info.leaf_zone_bounds]
        starts = [e.bounds.start_y for e in info.leaf_zone_bounds]
        assert heights == [200, 400, 200]
        assert starts == [0, 200, 600]

    def test_exact_height_with_ratio_sibling(self) -> None:
        children = (
            _leaf("drawers", height_config=HeightConfig.exact(150)),
            _leaf("shelves"),
        )
        root = _nested("root", DivisionDirection.HORIZONTAL, children)
        info = calculate_bounds(root, Bounds(0, 100, 500, 500, 560), 18, 560)

        assert [e.bounds.height for e in info.leaf_zone_bounds] == [150, 350]
        assert info.leaf_zone_bounds[1].bounds.start_y == 250

    def test_no_slot_between_horizontal_children(self) -> None:
        """Horizontal siblings abut without a body-thickness gap."""
        root = _nested("root", DivisionDirection.HORIZONTAL, (_leaf("a"), _leaf("b")))
        info = calculate_bounds(root, Bounds(0, 0, 500, 600, 560), 18, 560)

        first, second = (e.bounds for e in info.leaf_zone_bounds)
        assert first.end_y == second.start_y

    def test_horizontal_partitions_ignored(self, interior_bounds: Bounds) -> None:
        root = _nested(
            "root",
            DivisionDirection.HORIZONTAL,
            (_leaf("a"), _leaf("b")),
            partitions=(PartitionConfig(id="p"),),
        )
        info = calculate_bounds(root, interior_bounds, 18, 560)
        assert info.partition_bounds == ()


class TestVerticalSplit:
    """Tests for VERTICAL zones placing children along X."""

    def test_two_columns_reserve_partition_slot(self, interior_bounds: Bounds) -> None:
        children = (
            _leaf("left", width_config=WidthConfig()),
            _leaf("right", width_config=WidthConfig()),
        )
        root = _nested("root", DivisionDirection.VERTICAL, children)
        info = calculate_bounds(root, interior_bounds, 18, 560)

        left, right = (e.bounds for e in info.leaf_zone_bounds)
        assert left.width == 273
        assert right.width == 273
        assert left.start_x == -282
        assert right.start_x == pytest.approx(-282 + 273 + 18)
        assert right.end_x == pytest.approx(282)

    def test_slot_reserved_without_partitions(self, interior_bounds: Bounds) -> None:
        """The slot exists even when no partition is configured."""
        root = _nested("root", DivisionDirection.VERTICAL, (_leaf("a"), _leaf("b")))
        info = calculate_bounds(root, interior_bounds, 18, 560)

        a, b = (e.bounds for e in info.leaf_zone_bounds)
        assert b.start_x - a.end_x == pytest.approx(18)
        assert info.partition_bounds == ()

    def test_fixed_width_column(self, interior_bounds: Bounds) -> None:
        children = (
            _leaf("a", width_config=WidthConfig.fixed(200)),
            _leaf("b"),
            _leaf("c"),
        )
        root = _nested("root", DivisionDirection.VERTICAL, children)
        info = calculate_bounds(root, interior_bounds, 18, 560)

        widths = [e.bounds.width for e in info.leaf_zone_bounds]
        # 564 - 2 * 18 slots = 528; 528 - 200 = 328 shared by two columns
        assert widths == [200, 164, 164]

    def test_columns_keep_parent_height(self, interior_bounds: Bounds) -> None:
        root = _nested("root", DivisionDirection.VERTICAL, (_leaf("a"), _leaf("b")))
        info = calculate_bounds(root, interior_bounds, 18, 560)

        for entry in info.leaf_zone_bounds:
            assert entry.bounds.start_y == 18
            assert entry.bounds.height == 684

    def test_enabled_partition_bounds(self, interior_bounds: Bounds) -> None:
        root = _nested(
            "root",
            DivisionDirection.VERTICAL,
            (_leaf("a"), _leaf("b")),
            partitions=(PartitionConfig(id="p0"),),
        )
        info = calculate_bounds(root, interior_bounds, 18, 560)

        assert len(info.partition_bounds) == 1
        entry = info.partition_bounds[0]
        assert entry.parent_zone_id == "root"
        assert entry.index == 0
        assert entry.bounds.start_x == pytest.approx(-282 + 273)
        assert entry.bounds.width == 18
        assert entry.bounds.height == 684
        assert entry.bounds.depth_mm == 550
        assert entry.x == pytest.approx(-282 + 273 + 9)

    def test_disabled_partition_skipped(self, interior_bounds: Bounds) -> None:
        root = _nested(
            "root",
            DivisionDirection.VERTICAL,
            (_leaf("a"), _leaf("b"), _leaf("c")),
            partitions=(
                PartitionConfig(id="p0", enabled=False),
                PartitionConfig(id="p1"),
            ),
        )
        info = calculate_bounds(root, interior_bounds, 18, 560)

        assert [p.partition.id for p in info.partition_bounds] == ["p1"]
        assert info.partition_bounds[0].index == 1

    def test_extra_partitions_ignored(self, interior_bounds: Bounds) -> None:
        root = _nested(
            "root",
            DivisionDirection.VERTICAL,
            (_leaf("a"), _leaf("b")),
            partitions=(PartitionConfig(id="p0"), PartitionConfig(id="p1")),
        )
        info = calculate_bounds(root, interior_bounds, 18, 560)
        assert [p.partition.id for p in info.partition_bounds] == ["p0"]


class TestNestedTrees:
    """Tests for multi-level trees."""

    @pytest.fixture
    def tree(self) -> Zone:
        """Root HORIZONTAL: bottom drawers, top split into two columns."""
        columns = _nested(
            "top",
            DivisionDirection.VERTICAL,
            (_leaf("top-left", depth=2), _leaf("top-right", depth=2)),
            depth=1,
            partitions=(PartitionConfig(id="p"),),
            height_config=HeightConfig.of_ratio(2),
        )
        return _nested(
            "root",
            DivisionDirection.HORIZONTAL,
            (_leaf("bottom", content_type=ZoneContentType.EMPTY), columns),
        )

    def test_leaves_in_pre_order(self, tree: Zone, interior_bounds: Bounds) -> None:
        info = calculate_bounds(tree, interior_bounds, 18, 560)
        assert [e.zone.id for e in info.leaf_zone_bounds] == [
            "bottom",
            "top-left",
            "top-right",
        ]

    def test_counts(self, tree: Zone, interior_bounds: Bounds) -> None:
        info = calculate_bounds(tree, interior_bounds, 18, 560)
        assert info.total_zone_count == 5
        assert info.max_depth == 2
        assert [e.zone.id for e in info.nested_zone_bounds] == ["root", "top"]

    def test_child_bounds_within_parent(
        self, tree: Zone, interior_bounds: Bounds
    ) -> None:
        info = calculate_bounds(tree, interior_bounds, 18, 560)

        top = info.bounds_for("top")
        assert top is not None
        assert top.start_y == 18 + 228
        assert top.height == 456
        for zone_id in ("top-left", "top-right"):
            bounds = info.bounds_for(zone_id)
            assert bounds is not None
            assert bounds.start_y == top.start_y
            assert bounds.height == top.height
            assert top.start_x <= bounds.start_x
            assert bounds.end_x <= top.end_x + 1e-9

    def test_partition_spans_nested_zone(
        self, tree: Zone, interior_bounds: Bounds
    ) -> None:
        info = calculate_bounds(tree, interior_bounds, 18, 560)
        partition = info.partition_bounds[0]
        assert partition.parent_zone_id == "top"
        assert partition.bounds.height == 456

    def test_bounds_for_unknown_zone(self, tree: Zone, interior_bounds: Bounds) -> None:
        info = calculate_bounds(tree, interior_bounds, 18, 560)
        assert info.bounds_for("missing") is None

    def test_pathological_depth_treated_as_leaf(self, interior_bounds: Bounds) -> None:
        zone = _leaf("deepest", depth=MAX_TRAVERSAL_DEPTH + 1)
        for level in range(MAX_TRAVERSAL_DEPTH, -1, -1):
            zone = _nested(
                f"z{level}", DivisionDirection.HORIZONTAL, (zone,), depth=level
            )

        info = calculate_bounds(zone, interior_bounds, 18, 560)

        assert len(info.leaf_zone_bounds) == 1
        assert info.leaf_zone_bounds[0].zone.id == f"z{MAX_TRAVERSAL_DEPTH}"


class TestPartitionDepth:
    """Tests for calculate_partition_depth()."""

    @pytest.mark.parametrize(
        ("preset", "custom", "expected"),
        [
            (PartitionDepthPreset.FULL, None, 550),
            (PartitionDepthPreset.HALF, None, 275),
            (PartitionDepthPreset.CUSTOM, 300, 300),
            (PartitionDepthPreset.CUSTOM, None, 275),
            (PartitionDepthPreset.CUSTOM, 10, 50),
            (PartitionDepthPreset.CUSTOM, 900, 550),
        ],
    )
    def test_presets(
        self, preset: PartitionDepthPreset, custom: float | None, expected: float
    ) -> None:
        partition = PartitionConfig(id="p", depth_preset=preset, custom_depth_mm=custom)
        assert calculate_partition_depth(partition, 560) == expected

    def test_half_depth_rounds_half_up(self) -> None:
        partition = PartitionConfig(id="p", depth_preset=PartitionDepthPreset.HALF)
        # (565 - 10) / 2 = 277.5
        assert calculate_partition_depth(partition, 565) == 278
