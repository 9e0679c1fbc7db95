"""Tests for ComponentRegistry and component result types."""

from __future__ import annotations

import pytest

from interiors.domain.components import (
    ComponentContext,
    ComponentRegistry,
    GenerationResult,
    HardwareItem,
    ShelvesComponent,
    ValidationResult,
    component_registry,
)
from interiors.domain.entities import CabinetSpec


class TestComponentRegistry:
    """Tests for the global component registry.

    The registry is a process-wide singleton; these tests never clear it so
    the built-in components stay registered for other tests.
    """

    def test_singleton(self) -> None:
        assert ComponentRegistry() is component_registry

    def test_builtin_components_listed(self) -> None:
        registered = component_registry.list()
        for component_id in ("drawers.zone", "partition.vertical", "shelves.zone"):
            assert component_id in registered
        assert registered == sorted(registered)

    def test_create_returns_instance(self) -> None:
        assert isinstance(component_registry.create("shelves.zone"), ShelvesComponent)

    def test_unknown_component(self) -> None:
        with pytest.raises(KeyError, match="Unknown component: nope.nope"):
            component_registry.get("nope.nope")

    def test_is_registered(self) -> None:
        assert component_registry.is_registered("shelves.zone")
        assert not component_registry.is_registered("shelves.floating")

    def test_duplicate_registration_rejected(self) -> None:
        with pytest.raises(ValueError, match="already registered"):
            component_registry.register("shelves.zone")(ShelvesComponent)

    @pytest.mark.parametrize("component_id", ["shelves", "a.b.c.d", "a..b", ".a"])
    def test_malformed_id_rejected(self, component_id: str) -> None:
        with pytest.raises(ValueError, match="Invalid component ID"):
            component_registry.register(component_id)(ShelvesComponent)
        assert not component_registry.is_registered(component_id)


class TestResults:
    """Tests for ValidationResult, GenerationResult and HardwareItem."""

    def test_validation_ok_with_warnings(self) -> None:
        result = ValidationResult.ok(["careful"])
        assert result.is_valid
        assert result.warnings == ("careful",)

    def test_validation_from_lists(self) -> None:
        assert ValidationResult.from_lists([]).is_valid
        failed = ValidationResult.from_lists(["bad"], ["meh"])
        assert not failed.is_valid
        assert failed.errors == ("bad",)
        assert failed.warnings == ("meh",)

    def test_generation_result_empty(self) -> None:
        result = GenerationResult.empty()
        assert result.parts == ()
        assert result.hardware == ()
        assert result.metadata == {}

    def test_generation_result_merge(self) -> None:
        first = GenerationResult(
            hardware=(HardwareItem(name="Pin", quantity=4),), metadata={"a": 1}
        )
        second = GenerationResult(
            hardware=(HardwareItem(name="Screw", quantity=2),), metadata={"a": 2}
        )
        merged = first.merged_with(second)
        assert [item.name for item in merged.hardware] == ["Pin", "Screw"]
        assert merged.metadata == {"a": 2}

    def test_hardware_item_defaults(self) -> None:
        item = HardwareItem(name="Screw", quantity=4)
        assert item.sku is None
        assert item.notes is None


class TestComponentContext:
    """Tests for ComponentContext shortcuts."""

    def test_cabinet_shortcuts(self, standard_cabinet: CabinetSpec) -> None:
        context = ComponentContext(
            bounds=standard_cabinet.interior_bounds, cabinet=standard_cabinet
        )
        assert context.cabinet_id == "cabinet"
        assert context.cabinet_depth == 560
        assert context.body_thickness == 18
        assert context.zone_id is None
