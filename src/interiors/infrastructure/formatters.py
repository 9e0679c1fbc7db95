"""Text formatters for generated interiors."""

from __future__ import annotations

from collections import Counter

from interiors.application.dtos import InteriorOutput
from interiors.domain.components import HardwareItem
from interiors.domain.entities import GeneratedPart


class CutListFormatter:
    """Formats generated parts as a cut list table.

    Identical panels (same size, thickness and material) are grouped into
    one row with a quantity unless ``group_identical`` is False.
    """

    def __init__(self, group_identical: bool = True) -> None:
        self._group_identical = group_identical

    def format(self, parts: list[GeneratedPart]) -> str:
        if not parts:
            return "No parts in cut list."

        lines = [
            "CUT LIST",
            "=" * 86,
            f"{'Part':<28} {'Width':>8} {'Height':>8} {'Thick':>6} {'Qty':>4} "
            f"{'Material':<14} {'Area (m2)':>10}",
            "-" * 86,
        ]

        total_area = 0.0
        for part, quantity in self._rows(parts):
            area = part.area * quantity / 1_000_000
            total_area += area
            lines.append(
                f"{part.name[:28]:<28} {part.width:>8.1f} {part.height:>8.1f} "
                f"{part.depth:>6.1f} {quantity:>4} {part.material_id[:14]:<14} "
                f"{area:>10.3f}"
            )

        lines.append("-" * 86)
        lines.append(f"{'TOTAL':<73} {total_area:>10.3f}")
        return "\n".join(lines)

    def _rows(self, parts: list[GeneratedPart]) -> list[tuple[GeneratedPart, int]]:
        if not self._group_identical:
            return [(part, 1) for part in parts]

        counts: Counter[tuple[str, float, float, float, str]] = Counter()
        first: dict[tuple[str, float, float, float, str], GeneratedPart] = {}
        for part in parts:
            key = (part.role.value, part.width, part.height, part.depth, part.material_id)
            counts[key] += 1
            first.setdefault(key, part)
        return [(first[key], count) for key, count in counts.items()]


class MaterialReportFormatter:
    """Formats panel area per material."""

    def format(self, output: InteriorOutput) -> str:
        lines = ["MATERIAL ESTIMATE", "=" * 40]
        areas = output.area_by_material()
        if not areas:
            lines.append("No material required.")
            return "\n".join(lines)
        for material_id, area in sorted(areas.items()):
            lines.append(f"{material_id:<25} {area:>10.3f} m2")
        lines.append("-" * 40)
        lines.append(f"{'TOTAL':<25} {output.total_area_m2:>10.3f} m2")
        return "\n".join(lines)


class HardwareReportFormatter:
    """Formats hardware lists for display."""

    def format(self, hardware: list[HardwareItem], title: str = "HARDWARE LIST") -> str:
        lines = [title, "=" * 60]
        if not hardware:
            lines.append("No hardware required.")
            return "\n".join(lines)

        lines.append(f"{'Item':<35} {'Qty':>6}  Notes")
        lines.append("-" * 60)
        for item in hardware:
            notes = item.notes or ""
            lines.append(f"{item.name[:35]:<35} {item.quantity:>6}  {notes}")
        return "\n".join(lines)


class InteriorReportFormatter:
    """Combines summary, cut list, materials and hardware into one report."""

    def __init__(self) -> None:
        self.cut_list = CutListFormatter()
        self.materials = MaterialReportFormatter()
        self.hardware = HardwareReportFormatter()

    def format(self, output: InteriorOutput) -> str:
        cabinet = output.cabinet
        sections = [
            f"Cabinet '{cabinet.cabinet_id}': {cabinet.width:.0f} x "
            f"{cabinet.height:.0f} x {cabinet.depth:.0f} mm",
            f"Interior: {output.summary}",
        ]
        if output.warnings:
            sections.append(
                "Warnings:\n" + "\n".join(f"  - {w}" for w in output.warnings)
            )
        sections.append(self.cut_list.format(output.parts))
        sections.append(self.materials.format(output))
        sections.append(self.hardware.format(output.hardware))
        return "\n\n".join(sections)
