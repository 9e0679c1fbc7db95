"""Pytest configuration and shared fixtures for interior tests."""

from __future__ import annotations

import pytest

from interiors.domain.entities import (
    CabinetInteriorConfig,
    CabinetSpec,
    DrawerConfig,
    DrawerZone,
    PartitionConfig,
    ShelvesConfig,
    Zone,
)
from interiors.domain.value_objects import (
    DivisionDirection,
    WidthConfig,
    ZoneContentType,
)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: tests exercising the CLI or REST API end-to-end"
    )
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared cabinet and zone fixtures
# =============================================================================


@pytest.fixture
def standard_cabinet() -> CabinetSpec:
    """A 600 x 720 x 560 mm base cabinet with 18 mm panels.

    Interior bounds are x in [-282, 282], y in [18, 702].
    """
    return CabinetSpec(width=600, height=720, depth=560)


@pytest.fixture
def shelves_interior() -> CabinetInteriorConfig:
    """Root HORIZONTAL zone holding a single SHELVES zone with 3 shelves."""
    return CabinetInteriorConfig(
        root_zone=Zone(
            id="root",
            content_type=ZoneContentType.NESTED,
            division_direction=DivisionDirection.HORIZONTAL,
            children=(
                Zone(
                    id="shelves",
                    content_type=ZoneContentType.SHELVES,
                    shelves_config=ShelvesConfig(count=3),
                    depth=1,
                ),
            ),
        )
    )


@pytest.fixture
def two_column_interior() -> CabinetInteriorConfig:
    """Root VERTICAL zone: shelves left, drawers right, enabled partition."""
    return CabinetInteriorConfig(
        root_zone=Zone(
            id="root",
            content_type=ZoneContentType.NESTED,
            division_direction=DivisionDirection.VERTICAL,
            children=(
                Zone(
                    id="left",
                    content_type=ZoneContentType.SHELVES,
                    width_config=WidthConfig(),
                    shelves_config=ShelvesConfig(count=2),
                    depth=1,
                ),
                Zone(
                    id="right",
                    content_type=ZoneContentType.DRAWERS,
                    width_config=WidthConfig(),
                    drawer_config=DrawerConfig(
                        zones=(DrawerZone(id="d0"), DrawerZone(id="d1"))
                    ),
                    depth=1,
                ),
            ),
            partitions=(PartitionConfig(id="p0"),),
        )
    )
