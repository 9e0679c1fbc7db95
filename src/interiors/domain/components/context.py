"""Context handed to content components."""

from __future__ import annotations

from dataclasses import dataclass

from ..entities import CabinetSpec
from ..value_objects import Bounds


@dataclass(frozen=True)
class ComponentContext:
    """Immutable context for generating the content of one zone.

    Attributes:
        bounds: Resolved rectangle of the zone (or partition slot).
        cabinet: Cabinet-level dimensions, thicknesses and materials.
        zone_id: Id of the zone being generated, if any.
    """

    bounds: Bounds
    cabinet: CabinetSpec
    zone_id: str | None = None

    @property
    def cabinet_id(self) -> str:
        return self.cabinet.cabinet_id

    @property
    def cabinet_depth(self) -> float:
        return self.cabinet.depth

    @property
    def body_thickness(self) -> float:
        return self.cabinet.body_thickness
