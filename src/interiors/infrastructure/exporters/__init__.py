"""Exporters for generated interiors.

Importing this package registers the built-in formats.
"""

from interiors.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    export_to_file,
)
from interiors.infrastructure.exporters.dxf import LAYERS, DxfExporter
from interiors.infrastructure.exporters.json_exporter import JsonPartsExporter

__all__ = [
    "LAYERS",
    "DxfExporter",
    "Exporter",
    "ExporterRegistry",
    "JsonPartsExporter",
    "export_to_file",
]
