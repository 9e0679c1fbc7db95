"""JSON exporter for generated interior parts."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from interiors.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from interiors.application.dtos import InteriorOutput


logger = logging.getLogger(__name__)

# Version of the exported document layout
SCHEMA_VERSION = "1.0"


@ExporterRegistry.register
class JsonPartsExporter:
    """Exports cabinet, parts and hardware as a JSON document."""

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def export(self, output: InteriorOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Exported {len(output.parts)} parts to {path}")

    def export_string(self, output: InteriorOutput) -> str:
        document = {"schema_version": SCHEMA_VERSION, **output.to_dict()}
        return json.dumps(document, indent=self.indent)
