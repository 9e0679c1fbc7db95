"""Protocol for zone content components."""

from __future__ import annotations

from typing import Any, Protocol

from .context import ComponentContext
from .results import GenerationResult, HardwareItem, ValidationResult


class Component(Protocol):
    """Interface shared by the shelf, drawer and partition generators.

    ``config`` is the content configuration of the zone (``ShelvesConfig``,
    ``DrawerConfig`` or ``PartitionConfig``). Components are registered with
    the ``ComponentRegistry`` under a 'category.type' id.

    Example:
        @component_registry.register("shelves.zone")
        class ShelvesComponent:
            def validate(self, config, context): ...
            def generate(self, config, context): ...
            def hardware(self, config, context): ...
    """

    def validate(self, config: Any, context: ComponentContext) -> ValidationResult:
        """Check ``config`` against the zone it will be generated in.

        Args:
            config: Content configuration.
            context: Resolved bounds and cabinet scalars.

        Returns:
            ValidationResult with any errors or warnings found.
        """
        ...

    def generate(self, config: Any, context: ComponentContext) -> GenerationResult:
        """Generate parts for ``config`` inside ``context.bounds``.

        Generation never raises for a structurally valid configuration; a
        configuration that fails ``validate`` still produces defined output.

        Args:
            config: Content configuration.
            context: Resolved bounds and cabinet scalars.

        Returns:
            GenerationResult with parts and hardware.
        """
        ...

    def hardware(self, config: Any, context: ComponentContext) -> list[HardwareItem]:
        """List the hardware needed by the parts of ``config``.

        Args:
            config: Content configuration.
            context: Resolved bounds and cabinet scalars.

        Returns:
            Hardware items required by this component.
        """
        ...
