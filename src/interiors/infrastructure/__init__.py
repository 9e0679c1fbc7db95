"""Infrastructure layer - formatters and file exporters."""

from interiors.infrastructure.exporters import (
    DxfExporter,
    ExporterRegistry,
    JsonPartsExporter,
    export_to_file,
)
from interiors.infrastructure.formatters import (
    CutListFormatter,
    HardwareReportFormatter,
    InteriorReportFormatter,
    MaterialReportFormatter,
)

__all__ = [
    "CutListFormatter",
    "DxfExporter",
    "ExporterRegistry",
    "HardwareReportFormatter",
    "InteriorReportFormatter",
    "JsonPartsExporter",
    "MaterialReportFormatter",
    "export_to_file",
]
