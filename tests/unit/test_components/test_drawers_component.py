"""Tests for DrawersComponent and drawer sizing helpers."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

import pytest

from interiors.domain.components import (
    ComponentContext,
    DrawersComponent,
    calculate_box_dimensions,
    calculate_box_width,
    component_registry,
    get_drawer_summary,
    get_front_count,
    get_total_box_count,
    has_external_fronts,
    select_slide_length,
)
from interiors.domain.entities import (
    AboveBoxContent,
    AboveBoxShelf,
    CabinetSpec,
    DrawerConfig,
    DrawerZone,
    DrawerZoneBox,
    DrawerZoneFront,
    GeneratedPart,
)
from interiors.domain.value_objects import Bounds, DrawerSlideType, PartRole

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def drawer_component() -> DrawersComponent:
    return DrawersComponent()


@pytest.fixture
def context(standard_cabinet: CabinetSpec) -> ComponentContext:
    """Context for a zone filling the whole 564 x 684 interior."""
    return ComponentContext(
        bounds=standard_cabinet.interior_bounds,
        cabinet=standard_cabinet,
        zone_id="drawers",
    )


@pytest.fixture
def two_drawers() -> DrawerConfig:
    return DrawerConfig(zones=(DrawerZone(id="d0"), DrawerZone(id="d1")))


def _roles(parts: Sequence[GeneratedPart]) -> list[PartRole]:
    return [part.role for part in parts]


# =============================================================================
# Helper tests
# =============================================================================


class TestBoxSizing:
    """Tests for box width, depth and slide selection."""

    def test_side_mount_box_width(self) -> None:
        # 600 - 2 * 18 - 2 * 13
        assert calculate_box_width(600, 18, DrawerSlideType.SIDE_MOUNT) == 538

    def test_undermount_box_width(self) -> None:
        assert calculate_box_width(600, 18, DrawerSlideType.UNDERMOUNT) == 522

    def test_box_dimensions(self) -> None:
        dims = calculate_box_dimensions(600, 560, 342, 18, DrawerSlideType.SIDE_MOUNT)
        assert dims.box_width == 538
        assert dims.box_depth == 510
        assert dims.box_side_height == 312
        assert dims.bottom_thickness == 3

    def test_minimum_side_height(self) -> None:
        dims = calculate_box_dimensions(600, 560, 60, 18, DrawerSlideType.SIDE_MOUNT)
        assert dims.box_side_height == 50

    @pytest.mark.parametrize(
        ("box_depth", "expected"), [(510, 500), (500, 500), (260, 250), (100, 250)]
    )
    def test_slide_length(self, box_depth: float, expected: int) -> None:
        assert select_slide_length(box_depth) == expected


class TestDrawerSummaries:
    """Tests for drawer count helpers."""

    def test_counts(self) -> None:
        config = DrawerConfig(
            zones=(
                DrawerZone(id="a", boxes=(DrawerZoneBox(), DrawerZoneBox())),
                DrawerZone(id="b", front=None),
            )
        )
        assert get_total_box_count(config) == 3
        assert get_front_count(config) == 1
        assert has_external_fronts(config)
        assert get_drawer_summary(config) == "3 drawers (2 internal)"

    def test_summary_without_drawers(self) -> None:
        assert get_drawer_summary(DrawerConfig()) == "no drawers"

    def test_summary_single_drawer(self) -> None:
        config = DrawerConfig(zones=(DrawerZone(id="a"),))
        assert get_drawer_summary(config) == "1 drawer"


# =============================================================================
# Generation tests
# =============================================================================


class TestDrawersRegistration:
    """Tests for drawers.zone registration."""

    def test_registered(self) -> None:
        assert component_registry.get("drawers.zone") is DrawersComponent


class TestDrawersGeneration:
    """Tests for DrawersComponent.generate()."""

    def test_no_zones_generates_nothing(
        self, drawer_component: DrawersComponent, context: ComponentContext
    ) -> None:
        result = drawer_component.generate(DrawerConfig(), context)
        assert result.parts == ()
        assert result.hardware == ()

    def test_two_drawers_part_roles(
        self,
        drawer_component: DrawersComponent,
        context: ComponentContext,
        two_drawers: DrawerConfig,
    ) -> None:
        result = drawer_component.generate(two_drawers, context)

        drawer_parts = [
            PartRole.DRAWER_FRONT,
            PartRole.DRAWER_BOTTOM,
            PartRole.DRAWER_SIDE_LEFT,
            PartRole.DRAWER_SIDE_RIGHT,
            PartRole.DRAWER_BACK,
        ]
        assert _roles(result.parts) == drawer_parts * 2

    def test_fronts_overlay_body(
        self,
        drawer_component: DrawersComponent,
        context: ComponentContext,
        two_drawers: DrawerConfig,
    ) -> None:
        result = drawer_component.generate(two_drawers, context)
        fronts = [p for p in result.parts if p.role == PartRole.DRAWER_FRONT]

        assert len(fronts) == 2
        # 564 + 2 * 18 - 2 * 2 margin
        assert all(front.width == 596 for front in fronts)
        # 716 split evenly; the lower front leaves a 3mm gap
        assert fronts[0].height == 355
        assert fronts[1].height == 358
        assert fronts[0].position[1] == pytest.approx(2 + 355 / 2)
        assert fronts[1].position[1] == pytest.approx(360 + 358 / 2)
        assert fronts[0].depth == 18
        assert fronts[0].position[2] == pytest.approx(280 + 9)
        assert fronts[0].material_id == "front"
        assert fronts[1].cabinet_metadata.drawer_index == 1

    def test_top_front_stops_at_margin(
        self,
        drawer_component: DrawersComponent,
        context: ComponentContext,
        two_drawers: DrawerConfig,
    ) -> None:
        result = drawer_component.generate(two_drawers, context)
        top = [p for p in result.parts if p.role == PartRole.DRAWER_FRONT][-1]
        assert top.position[1] + top.height / 2 == pytest.approx(720 - 2)

    def test_box_dimensions_in_parts(
        self,
        drawer_component: DrawersComponent,
        context: ComponentContext,
        two_drawers: DrawerConfig,
    ) -> None:
        parts = drawer_component.generate(two_drawers, context).parts
        left = next(p for p in parts if p.role == PartRole.DRAWER_SIDE_LEFT)
        back = next(p for p in parts if p.role == PartRole.DRAWER_BACK)
        bottom = next(p for p in parts if p.role == PartRole.DRAWER_BOTTOM)

        assert left.width == 510
        assert left.height == 312
        assert back.width == 502
        assert bottom.depth == 3
        # Open box: bottom runs to the front edge of the sides
        assert bottom.height == 510 - 18
        assert left.position[0] == pytest.approx(-538 / 2 + 9)

    def test_internal_drawer_gets_closed_box(
        self, drawer_component: DrawersComponent, context: ComponentContext
    ) -> None:
        config = DrawerConfig(zones=(DrawerZone(id="d", front=None),))
        parts = drawer_component.generate(config, context).parts

        assert PartRole.DRAWER_FRONT not in _roles(parts)
        assert PartRole.DRAWER_BOX_FRONT in _roles(parts)
        bottom = next(p for p in parts if p.role == PartRole.DRAWER_BOTTOM)
        assert bottom.height == 510 - 36

    def test_second_box_behind_front_is_closed(
        self, drawer_component: DrawersComponent, context: ComponentContext
    ) -> None:
        config = DrawerConfig(
            zones=(DrawerZone(id="d", boxes=(DrawerZoneBox(), DrawerZoneBox())),)
        )
        parts = drawer_component.generate(config, context).parts

        assert len(parts) == 1 + 4 + 5
        assert _roles(parts).count(PartRole.DRAWER_BOX_FRONT) == 1
        backs = [p for p in parts if p.role == PartRole.DRAWER_BACK]
        boxes = {p.cabinet_metadata.drawer_index for p in backs}
        assert boxes == {0, 1}

    def test_box_heights_follow_ratios(
        self, drawer_component: DrawersComponent, context: ComponentContext
    ) -> None:
        """A 1:2 box ratio splits the 684 mm box space into 228 and 456."""
        config = DrawerConfig(
            zones=(
                DrawerZone(
                    id="d",
                    boxes=(
                        DrawerZoneBox(height_ratio=1),
                        DrawerZoneBox(height_ratio=2),
                    ),
                ),
            )
        )
        parts = drawer_component.generate(config, context).parts
        sides = [p for p in parts if p.role == PartRole.DRAWER_SIDE_LEFT]

        lower = calculate_box_dimensions(600, 560, 228, 18, DrawerSlideType.SIDE_MOUNT)
        upper = calculate_box_dimensions(600, 560, 456, 18, DrawerSlideType.SIDE_MOUNT)
        assert [side.height for side in sides] == [198, 426]
        assert [side.height for side in sides] == [
            lower.box_side_height,
            upper.box_side_height,
        ]
        # Each box is centered in its own slot of the box space
        assert sides[0].position[1] == pytest.approx(18 + 228 / 2)
        assert sides[1].position[1] == pytest.approx(18 + 228 + 456 / 2)

    def test_front_material_precedence(
        self, drawer_component: DrawersComponent, context: ComponentContext
    ) -> None:
        config = DrawerConfig(
            zones=(
                DrawerZone(id="a", front=DrawerZoneFront(material_id="glass")),
                DrawerZone(id="b"),
            ),
            front_material_id="oak",
        )
        fronts = [
            p
            for p in drawer_component.generate(config, context).parts
            if p.role == PartRole.DRAWER_FRONT
        ]
        assert [f.material_id for f in fronts] == ["glass", "oak"]

    def test_box_and_bottom_materials(
        self, drawer_component: DrawersComponent, standard_cabinet: CabinetSpec
    ) -> None:
        cabinet = replace(standard_cabinet, bottom_material_id="hdf-3")
        context = ComponentContext(bounds=cabinet.interior_bounds, cabinet=cabinet)
        config = DrawerConfig(zones=(DrawerZone(id="a"),), box_material_id="birch")
        parts = drawer_component.generate(config, context).parts

        bottom = next(p for p in parts if p.role == PartRole.DRAWER_BOTTOM)
        side = next(p for p in parts if p.role == PartRole.DRAWER_SIDE_LEFT)
        assert bottom.material_id == "hdf-3"
        assert side.material_id == "birch"

    def test_shortened_box_with_shelf_above(
        self, drawer_component: DrawersComponent, context: ComponentContext
    ) -> None:
        config = DrawerConfig(
            zones=(
                DrawerZone(
                    id="d",
                    box_to_front_ratio=0.5,
                    above_box_content=AboveBoxContent(
                        shelves=(AboveBoxShelf(id="s"),)
                    ),
                ),
            )
        )
        parts = drawer_component.generate(config, context).parts

        shelves = [p for p in parts if p.role == PartRole.SHELF]
        assert len(shelves) == 1
        assert shelves[0].position[1] == pytest.approx(18 + 342)
        assert shelves[0].width == 564
        assert shelves[0].cabinet_metadata.drawer_index == 0

        side = next(p for p in parts if p.role == PartRole.DRAWER_SIDE_LEFT)
        assert side.height == 342 - 30
        assert shelves[0].material_id == "body"

    def test_shelf_above_box_uses_box_material(
        self, drawer_component: DrawersComponent, context: ComponentContext
    ) -> None:
        config = DrawerConfig(
            zones=(
                DrawerZone(
                    id="d",
                    box_to_front_ratio=0.5,
                    above_box_content=AboveBoxContent(
                        shelves=(AboveBoxShelf(id="s"),)
                    ),
                ),
            ),
            box_material_id="birch",
        )
        parts = drawer_component.generate(config, context).parts

        shelf = next(p for p in parts if p.role == PartRole.SHELF)
        side = next(p for p in parts if p.role == PartRole.DRAWER_SIDE_LEFT)
        assert shelf.material_id == "birch"
        assert shelf.material_id == side.material_id

    def test_hardware(
        self,
        drawer_component: DrawersComponent,
        context: ComponentContext,
        two_drawers: DrawerConfig,
    ) -> None:
        result = drawer_component.generate(two_drawers, context)

        assert len(result.hardware) == 1
        item = result.hardware[0]
        assert item.name == "Side Mount Drawer Slide Pair"
        assert item.quantity == 2
        assert item.notes == "500mm"


class TestDrawersValidation:
    """Tests for DrawersComponent.validate()."""

    def test_valid_config(
        self,
        drawer_component: DrawersComponent,
        context: ComponentContext,
        two_drawers: DrawerConfig,
    ) -> None:
        result = drawer_component.validate(two_drawers, context)
        assert result.is_valid
        assert result.warnings == ()

    def test_empty_config_warns(
        self, drawer_component: DrawersComponent, context: ComponentContext
    ) -> None:
        result = drawer_component.validate(DrawerConfig(), context)
        assert result.is_valid
        assert result.warnings == ("Drawer configuration has no drawer zones",)

    def test_box_ratio_below_minimum(
        self, drawer_component: DrawersComponent, context: ComponentContext
    ) -> None:
        config = DrawerConfig(zones=(DrawerZone(id="d", box_to_front_ratio=0.05),))
        result = drawer_component.validate(config, context)
        assert not result.is_valid
        assert "box-to-front ratio" in result.errors[0]

    def test_too_many_boxes(
        self, drawer_component: DrawersComponent, context: ComponentContext
    ) -> None:
        config = DrawerConfig(
            zones=(DrawerZone(id="d", boxes=tuple(DrawerZoneBox() for _ in range(5))),)
        )
        result = drawer_component.validate(config, context)
        assert any("box count 5 exceeds maximum of 4" in e for e in result.errors)

    def test_no_boxes(
        self, drawer_component: DrawersComponent, context: ComponentContext
    ) -> None:
        config = DrawerConfig(zones=(DrawerZone(id="d", boxes=()),))
        result = drawer_component.validate(config, context)
        assert "Drawer zone 1: at least one box is required" in result.errors

    def test_shelves_ignored_when_box_fills_zone(
        self, drawer_component: DrawersComponent, context: ComponentContext
    ) -> None:
        config = DrawerConfig(
            zones=(
                DrawerZone(
                    id="d",
                    above_box_content=AboveBoxContent(
                        shelves=(AboveBoxShelf(id="s"),)
                    ),
                ),
            )
        )
        result = drawer_component.validate(config, context)
        assert result.is_valid
        assert "ignored" in result.warnings[0]

    def test_zone_too_narrow(
        self, drawer_component: DrawersComponent, standard_cabinet: CabinetSpec
    ) -> None:
        context = ComponentContext(
            bounds=Bounds(0, 18, 40, 300, 560), cabinet=standard_cabinet
        )
        config = DrawerConfig(zones=(DrawerZone(id="d"),))
        result = drawer_component.validate(config, context)
        assert not result.is_valid
        assert "too narrow" in result.errors[0]
