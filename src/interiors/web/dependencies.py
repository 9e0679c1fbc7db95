"""FastAPI dependency injection for interior services."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from interiors.application.commands import (
    GenerateInteriorCommand,
    ValidateInteriorCommand,
)


@lru_cache(maxsize=1)
def get_generate_command() -> GenerateInteriorCommand:
    """Cached GenerateInteriorCommand; commands hold no per-request state."""
    return GenerateInteriorCommand()


def get_validate_command() -> ValidateInteriorCommand:
    return ValidateInteriorCommand()


GenerateCommandDep = Annotated[GenerateInteriorCommand, Depends(get_generate_command)]
ValidateCommandDep = Annotated[ValidateInteriorCommand, Depends(get_validate_command)]
