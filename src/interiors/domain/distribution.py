"""Size distribution between sibling zones.

Siblings are sized either by a fixed millimeter value or by a relative
ratio. Fixed sizes are taken first and the remaining span is shared between
ratio-sized siblings in proportion to their ratios.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from .value_objects import HeightConfig, HeightMode, WidthConfig, WidthMode


@dataclass(frozen=True)
class SizingSpec:
    """Sizing of one sibling along the distribution axis.

    Attributes:
        ratio: Relative weight, used when no fixed size is set.
        fixed_mm: Fixed size in millimeters, or None for ratio sizing.
    """

    ratio: float = 1.0
    fixed_mm: float | None = None

    @property
    def is_fixed(self) -> bool:
        return self.fixed_mm is not None

    @classmethod
    def from_height_config(cls, config: HeightConfig | None) -> SizingSpec:
        """Build a spec from a zone's height configuration."""
        if config is None:
            return cls()
        if config.mode == HeightMode.EXACT:
            return cls(ratio=config.ratio, fixed_mm=config.exact_mm)
        return cls(ratio=config.ratio)

    @classmethod
    def from_width_config(cls, config: WidthConfig | None) -> SizingSpec:
        """Build a spec from a zone's width configuration.

        Children without a width configuration get the default ratio of 1.
        """
        if config is None:
            return cls()
        if config.mode == WidthMode.FIXED:
            return cls(ratio=config.ratio, fixed_mm=config.fixed_mm)
        return cls(ratio=config.ratio)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return math.floor(value + 0.5)


def distribute(total_span: float, specs: Sequence[SizingSpec]) -> list[float]:
    """Split a span between siblings.

    Fixed sizes are honored as given, even when they overflow the span.
    The space left after fixed sizes (never below zero) is shared between
    ratio-sized specs, each size rounded half-up on its own. Rounding error
    is not redistributed, so sizes may differ from ``total_span`` by up to
    one millimeter per ratio-sized spec.

    Non-positive ratios carry no weight. When no ratio carries weight, every
    ratio-sized spec is weighted 1.

    Args:
        total_span: Span to distribute in millimeters.
        specs: Sibling sizing specs in order.

    Returns:
        One size per spec, in the same order.

    Example:
        >>> distribute(564, [SizingSpec(fixed_mm=100), SizingSpec(), SizingSpec()])
        [100.0, 232.0, 232.0]
    """
    if not specs:
        return []

    fixed_total = sum(spec.fixed_mm or 0.0 for spec in specs if spec.is_fixed)
    remaining = max(0.0, total_span - fixed_total)

    flexible = [spec for spec in specs if not spec.is_fixed]
    weights = [max(spec.ratio, 0.0) for spec in flexible]
    total_ratio = sum(weights)
    if total_ratio <= 0:
        weights = [1.0] * len(flexible)
        total_ratio = float(len(flexible))

    sizes: list[float] = []
    weight_iter = iter(weights)
    for spec in specs:
        if spec.is_fixed:
            sizes.append(float(spec.fixed_mm or 0.0))
        else:
            sizes.append(
                float(round_half_up(next(weight_iter) / total_ratio * remaining))
            )
    return sizes


def validate_sizing_specs(
    specs: Sequence[SizingSpec], total_span: float, axis: str = "height"
) -> list[str]:
    """Check sibling sizing specs against the span they share.

    This is the non-throwing counterpart of ``distribute``: the engine itself
    accepts any input, this function reports what a user needs to fix.

    Args:
        specs: Sibling sizing specs.
        total_span: Span available to the siblings in millimeters.
        axis: Axis name used in messages.

    Returns:
        List of error messages (empty if valid).
    """
    errors: list[str] = []

    for index, spec in enumerate(specs):
        if not spec.is_fixed and spec.ratio <= 0:
            errors.append(
                f"Zone {index + 1}: {axis} ratio must be positive, got {spec.ratio}"
            )

    fixed_total = sum(spec.fixed_mm or 0.0 for spec in specs if spec.is_fixed)
    if fixed_total > total_span:
        errors.append(
            f"Fixed {axis}s ({fixed_total:.0f}mm) exceed available "
            f"{axis} ({total_span:.0f}mm)"
        )

    return errors
