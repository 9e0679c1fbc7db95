"""Registry of zone content components."""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from .protocol import Component

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=Component)


class ComponentRegistry:
    """Singleton registry mapping component ids to component classes.

    Ids take the form 'category.type' or 'category.type.variant', for
    example 'shelves.zone' or 'partition.vertical'.

    Example:
        @component_registry.register("drawers.zone")
        class DrawersComponent:
            ...

        drawers = component_registry.create("drawers.zone")
    """

    _instance: ComponentRegistry | None = None
    _components: dict[str, type[Component]]

    def __new__(cls) -> ComponentRegistry:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._components = {}
        return cls._instance

    def register(self, component_id: str) -> Callable[[type[C]], type[C]]:
        """Decorator registering a component class under ``component_id``.

        Raises:
            ValueError: If the id is already registered or malformed.
        """

        def decorator(cls: type[C]) -> type[C]:
            if component_id in self._components:
                raise ValueError(f"Component '{component_id}' already registered")
            self._validate_id(component_id)
            self._components[component_id] = cls
            logger.debug(f"Registered component '{component_id}': {cls.__name__}")
            return cls

        return decorator

    def get(self, component_id: str) -> type[Component]:
        """Get a component class by id.

        Raises:
            KeyError: If no component is registered with the id.
        """
        if component_id not in self._components:
            raise KeyError(f"Unknown component: {component_id}")
        return self._components[component_id]

    def create(self, component_id: str) -> Component:
        """Instantiate the component registered under ``component_id``."""
        return self.get(component_id)()

    def is_registered(self, component_id: str) -> bool:
        return component_id in self._components

    def list(self) -> list[str]:
        """Sorted list of registered component ids."""
        return sorted(self._components.keys())

    def _validate_id(self, component_id: str) -> None:
        parts = component_id.split(".")
        if len(parts) < 2 or len(parts) > 3 or not all(parts):
            raise ValueError(
                f"Invalid component ID '{component_id}': "
                "must be 'category.type' or 'category.type.variant'"
            )


component_registry = ComponentRegistry()
