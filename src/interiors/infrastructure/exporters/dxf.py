"""DXF exporter for generated interior parts.

Writes a 2D R2010 drawing with one rectangular outline per part, laid out
in a grid, each labelled with its name and size. Banded edges are drawn on
their own layer. Units are millimeters.
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, cast

import ezdxf
from ezdxf import units

from interiors.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from ezdxf.document import Drawing
    from ezdxf.layouts import Modelspace

    from interiors.application.dtos import InteriorOutput
    from interiors.domain.entities import GeneratedPart


logger = logging.getLogger(__name__)


LAYERS = {
    "OUTLINE": {"color": 7},  # White - panel outlines
    "BANDING": {"color": 1},  # Red - edge banded edges
    "LABELS": {"color": 5},  # Blue - text labels
}


@ExporterRegistry.register
class DxfExporter:
    """Exports generated parts to DXF for CNC nesting.

    Attributes:
        panel_spacing: Gap between panels in mm.
        panels_per_row: Panels per grid row.
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"

    def __init__(self, panel_spacing: float = 50.0, panels_per_row: int = 4) -> None:
        if panels_per_row < 1:
            raise ValueError("panels_per_row must be at least 1")
        self.panel_spacing = panel_spacing
        self.panels_per_row = panels_per_row

    def export(self, output: InteriorOutput, path: Path) -> None:
        if not output.parts:
            logger.warning("No parts to export")
            return
        doc = self.build_document(output.parts)
        doc.saveas(path)
        logger.info(f"Exported {len(output.parts)} parts to DXF {path}")

    def export_string(self, output: InteriorOutput) -> str:
        if not output.parts:
            return ""
        doc = self.build_document(output.parts)
        stream = StringIO()
        doc.write(stream)
        return stream.getvalue()

    def build_document(self, parts: list[GeneratedPart]) -> Drawing:
        doc = ezdxf.new("R2010")
        doc.units = units.MM
        for name, props in LAYERS.items():
            doc.layers.add(name, color=cast(int, props["color"]))
        self._draw_all_parts(doc.modelspace(), parts)
        return doc

    def _draw_all_parts(self, msp: Modelspace, parts: list[GeneratedPart]) -> None:
        """Draw parts left-to-right in rows, each row below the previous one."""
        rows = [
            parts[i : i + self.panels_per_row]
            for i in range(0, len(parts), self.panels_per_row)
        ]
        current_y = 0.0
        for row in rows:
            row_bottom = current_y - max(part.height for part in row)
            current_x = 0.0
            for part in row:
                self._draw_part(msp, part, current_x, row_bottom)
                current_x += part.width + self.panel_spacing
            current_y = row_bottom - self.panel_spacing

    def _draw_part(
        self, msp: Modelspace, part: GeneratedPart, x: float, y: float
    ) -> None:
        width, height = part.width, part.height
        msp.add_lwpolyline(
            [(x, y), (x + width, y), (x + width, y + height), (x, y + height)],
            close=True,
            dxfattribs={"layer": "OUTLINE"},
        )

        banding = part.edge_banding
        edges = [
            (banding.bottom, (x, y), (x + width, y)),
            (banding.top, (x, y + height), (x + width, y + height)),
            (banding.left, (x, y), (x, y + height)),
            (banding.right, (x + width, y), (x + width, y + height)),
        ]
        for banded, start, end in edges:
            if banded:
                msp.add_line(start, end, dxfattribs={"layer": "BANDING"})

        text_height = max(4.0, min(25.0, min(width, height) * 0.08))
        msp.add_mtext(
            f"{part.name}\n{width:.1f} x {height:.1f} x {part.depth:.1f} mm",
            dxfattribs={
                "layer": "LABELS",
                "char_height": text_height,
                "insert": (x + width / 2, y + height / 2),
                "attachment_point": 5,  # MIDDLE_CENTER
            },
        )
