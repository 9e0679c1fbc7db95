"""Exporter protocol and the format registry used by the CLI."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from interiors.application.dtos import InteriorOutput


logger = logging.getLogger(__name__)

E = TypeVar("E", bound=type)


@runtime_checkable
class Exporter(Protocol):
    """Writes an ``InteriorOutput`` in one file format.

    Attributes:
        format_name: Name the format is registered under (e.g. "dxf").
        file_extension: Suffix without the leading dot, used when a target
            path has none.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    def export(self, output: InteriorOutput, path: Path) -> None: ...

    def export_string(self, output: InteriorOutput) -> str: ...


class ExporterRegistry:
    """Format name to exporter class lookup.

    Exporter classes register themselves at import time:

        @ExporterRegistry.register
        class JsonPartsExporter:
            format_name = "json"
            file_extension = "json"
    """

    _by_format: ClassVar[dict[str, type]] = {}

    @classmethod
    def register(cls, exporter_class: E) -> E:
        """Class decorator registering ``exporter_class`` under its format_name.

        Raises:
            ValueError: If the format is already taken by another class.
        """
        format_name = exporter_class.format_name  # type: ignore[attr-defined]
        existing = cls._by_format.get(format_name)
        if existing is not None and existing is not exporter_class:
            raise ValueError(
                f"Format '{format_name}' is already registered to {existing.__name__}"
            )
        cls._by_format[format_name] = exporter_class
        logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
        return exporter_class

    @classmethod
    def get(cls, format_name: str) -> type:
        try:
            return cls._by_format[format_name]
        except KeyError:
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {', '.join(cls.available_formats()) or 'none'}"
            ) from None

    @classmethod
    def create(cls, format_name: str, **options: Any) -> Exporter:
        """Instantiate the exporter for ``format_name`` with ``options``."""
        exporter: Exporter = cls.get(format_name)(**options)
        return exporter

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._by_format)

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._by_format


def export_to_file(format_name: str, output: InteriorOutput, path: Path) -> Path:
    """Write ``output`` to ``path`` in the given format.

    Missing parent directories are created, and a path without a suffix
    gets the exporter's file extension.

    Returns:
        The path actually written.

    Raises:
        KeyError: If the format is not registered.
    """
    exporter = ExporterRegistry.create(format_name)
    if not path.suffix:
        path = path.with_suffix(f".{exporter.file_extension}")
    path.parent.mkdir(parents=True, exist_ok=True)
    exporter.export(output, path)
    logger.info(f"Exported {len(output.parts)} parts as {format_name} to {path}")
    return path
