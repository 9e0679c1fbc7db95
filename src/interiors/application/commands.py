"""Application commands (use cases) for interior generation."""

from __future__ import annotations

import logging

from interiors.application.config import (
    InteriorConfiguration,
    config_to_cabinet_spec,
    config_to_constraints,
    config_to_interior,
)
from interiors.domain.entities import CabinetInteriorConfig, CabinetSpec
from interiors.domain.services import (
    InteriorGenerator,
    ValidationReport,
    ZoneConstraints,
    get_interior_summary,
    validate,
)

from .dtos import InteriorOutput

logger = logging.getLogger(__name__)


class GenerateInteriorCommand:
    """Command to validate and generate a cabinet interior."""

    def __init__(self, generator: InteriorGenerator | None = None) -> None:
        self.generator = generator or InteriorGenerator()

    def execute(
        self,
        interior: CabinetInteriorConfig,
        cabinet: CabinetSpec,
        constraints: ZoneConstraints | None = None,
    ) -> InteriorOutput:
        """Execute the generation command.

        The zone tree is validated first. When validation reports violations
        the output carries the errors and no parts.

        Args:
            interior: Zone tree to generate.
            cabinet: Cabinet dimensions and default materials.
            constraints: Validation limits; defaults apply when None.

        Returns:
            InteriorOutput with parts, hardware and validation messages.
        """
        report = validate(interior.root_zone, constraints, cabinet)
        summary = get_interior_summary(interior)
        if not report.valid:
            logger.info(
                f"Interior for cabinet '{cabinet.cabinet_id}' failed validation "
                f"with {len(report.violations)} errors"
            )
            return InteriorOutput(
                cabinet=cabinet,
                summary=summary,
                errors=report.errors,
                warnings=report.warning_messages,
            )

        result = self.generator.generate(interior, cabinet)
        return InteriorOutput(
            cabinet=cabinet,
            parts=list(result.parts),
            hardware=list(result.hardware),
            summary=summary,
            warnings=report.warning_messages,
        )

    def execute_config(self, config: InteriorConfiguration) -> InteriorOutput:
        """Execute the command for a loaded configuration document."""
        return self.execute(
            config_to_interior(config),
            config_to_cabinet_spec(config),
            config_to_constraints(config),
        )


class ValidateInteriorCommand:
    """Command to validate a configuration without generating parts."""

    def execute(self, config: InteriorConfiguration) -> ValidationReport:
        interior = config_to_interior(config)
        return validate(
            interior.root_zone,
            config_to_constraints(config),
            config_to_cabinet_spec(config),
        )
