"""Result types for component validation and generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..entities import GeneratedPart


@dataclass(frozen=True)
class HardwareItem:
    """Hardware required by generated parts.

    Attributes:
        name: Human-readable name of the hardware item.
        quantity: Number of items required.
        sku: Optional vendor SKU.
        notes: Optional notes about installation or sizing.
    """

    name: str
    quantity: int
    sku: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class ValidationResult:
    """Errors and warnings found while validating a configuration.

    A configuration is valid when there are no errors, even with warnings.
    """

    errors: tuple[str, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @classmethod
    def ok(cls, warnings: list[str] | None = None) -> ValidationResult:
        return cls(warnings=tuple(warnings or []))

    @classmethod
    def fail(
        cls, errors: list[str], warnings: list[str] | None = None
    ) -> ValidationResult:
        return cls(errors=tuple(errors), warnings=tuple(warnings or []))

    @classmethod
    def from_lists(
        cls, errors: list[str], warnings: list[str] | None = None
    ) -> ValidationResult:
        """Create a result that is valid exactly when ``errors`` is empty."""
        if errors:
            return cls.fail(errors, warnings)
        return cls.ok(warnings)


@dataclass(frozen=True)
class GenerationResult:
    """Parts and hardware produced by a component.

    Attributes:
        parts: Generated parts in emission order.
        hardware: Hardware the parts need.
        metadata: Extra structured data for downstream consumers.
    """

    parts: tuple[GeneratedPart, ...] = field(default_factory=tuple)
    hardware: tuple[HardwareItem, ...] = field(default_factory=tuple)
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> GenerationResult:
        return cls()

    def merged_with(self, other: GenerationResult) -> GenerationResult:
        """Concatenate parts and hardware; metadata keys from ``other`` win."""
        return GenerationResult(
            parts=self.parts + other.parts,
            hardware=self.hardware + other.hardware,
            metadata={**self.metadata, **other.metadata},
        )
