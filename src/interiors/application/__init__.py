"""Application layer - use cases and configuration handling."""

from .commands import GenerateInteriorCommand, ValidateInteriorCommand
from .dtos import InteriorOutput

__all__ = [
    "GenerateInteriorCommand",
    "InteriorOutput",
    "ValidateInteriorCommand",
]
