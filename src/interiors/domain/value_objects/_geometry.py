"""Geometry and sizing value objects in millimeters."""

from __future__ import annotations

from dataclasses import dataclass

from ._zones import HeightMode, WidthMode

Vector3 = tuple[float, float, float]


@dataclass(frozen=True)
class Bounds:
    """Resolved rectangle in cabinet-interior-local millimeters.

    X grows to the right, Y grows upward. The depth is the usable depth
    of whatever occupies the rectangle (cabinet depth for zones, preset
    depth for partitions).

    Attributes:
        start_x: Left edge.
        start_y: Bottom edge.
        width: Extent along X.
        height: Extent along Y.
        depth_mm: Extent along Z.
    """

    start_x: float
    start_y: float
    width: float
    height: float
    depth_mm: float = 0.0

    @property
    def end_x(self) -> float:
        """Right edge."""
        return self.start_x + self.width

    @property
    def end_y(self) -> float:
        """Top edge."""
        return self.start_y + self.height

    @property
    def center_x(self) -> float:
        """Horizontal midpoint."""
        return self.start_x + self.width / 2

    @property
    def center_y(self) -> float:
        """Vertical midpoint."""
        return self.start_y + self.height / 2


@dataclass(frozen=True)
class EdgeBanding:
    """Which edges of a rectangular panel receive edge banding.

    Edges are named in the panel's own width/height frame: ``top`` and
    ``bottom`` run along the width, ``left`` and ``right`` along the height.
    """

    top: bool = False
    bottom: bool = False
    left: bool = False
    right: bool = False

    @property
    def banded_edge_count(self) -> int:
        """Number of banded edges."""
        return sum((self.top, self.bottom, self.left, self.right))

    def banded_length(self, width: float, height: float) -> float:
        """Total banding length in mm for a panel of the given size."""
        return (self.top + self.bottom) * width + (self.left + self.right) * height


@dataclass(frozen=True)
class HeightConfig:
    """Sizing along the stacking axis.

    Attributes:
        mode: RATIO for a relative weight, EXACT for a fixed mm height.
        ratio: Relative weight when mode is RATIO.
        exact_mm: Fixed height when mode is EXACT.
    """

    mode: HeightMode = HeightMode.RATIO
    ratio: float = 1.0
    exact_mm: float | None = None

    def __post_init__(self) -> None:
        if self.mode == HeightMode.EXACT and self.exact_mm is None:
            raise ValueError("EXACT height requires exact_mm")
        if self.exact_mm is not None and self.exact_mm < 0:
            raise ValueError("exact_mm must be non-negative")

    @classmethod
    def exact(cls, mm: float) -> HeightConfig:
        return cls(mode=HeightMode.EXACT, exact_mm=mm)

    @classmethod
    def of_ratio(cls, ratio: float) -> HeightConfig:
        return cls(mode=HeightMode.RATIO, ratio=ratio)


@dataclass(frozen=True)
class WidthConfig:
    """Sizing along X for children of a VERTICAL zone.

    Attributes:
        mode: PROPORTIONAL for a relative weight, FIXED for a mm width.
        ratio: Relative weight when mode is PROPORTIONAL.
        fixed_mm: Fixed width when mode is FIXED.
    """

    mode: WidthMode = WidthMode.PROPORTIONAL
    ratio: float = 1.0
    fixed_mm: float | None = None

    def __post_init__(self) -> None:
        if self.mode == WidthMode.FIXED and self.fixed_mm is None:
            raise ValueError("FIXED width requires fixed_mm")
        if self.fixed_mm is not None and self.fixed_mm < 0:
            raise ValueError("fixed_mm must be non-negative")

    @classmethod
    def fixed(cls, mm: float) -> WidthConfig:
        return cls(mode=WidthMode.FIXED, fixed_mm=mm)

    @classmethod
    def of_ratio(cls, ratio: float) -> WidthConfig:
        return cls(mode=WidthMode.PROPORTIONAL, ratio=ratio)
