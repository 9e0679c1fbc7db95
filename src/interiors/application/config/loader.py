"""Configuration file loader with error reporting.

Loads interior configuration JSON and validates it against the pydantic
schema. File system, JSON syntax, schema and version problems are all
raised as ``ConfigError`` with a category and per-field details.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from interiors.application.config.schemas import InteriorConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message.
        error_type: Category of error (file_not_found, json_parse,
            validation, version).
        path: Path to the configuration file, if loaded from disk.
        details: Additional details (line/column for JSON, field errors
            for validation).
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a pydantic location tuple as a JSON path.

    Examples:
        >>> _format_json_path(("interior", "root_zone", "children", 0, "id"))
        'interior.root_zone.children[0].id'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    return [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {detail['path']}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def _validation_config_error(
    error: PydanticValidationError, path: Path | None = None
) -> ConfigError:
    details = _extract_validation_errors(error)
    version_only = bool(details) and all(
        d["path"] == "schema_version" for d in details
    )
    return ConfigError(
        message=_format_validation_error_message(details),
        error_type="version" if version_only else "validation",
        path=path,
        details=details,
    )


def load_config(path: Path) -> InteriorConfiguration:
    """Load and validate an interior configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file.

    Returns:
        A validated InteriorConfiguration instance.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated. The
            ``error_type`` attribute is one of "file_not_found",
            "json_parse", "validation" or "version".
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in config file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    try:
        config = InteriorConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise _validation_config_error(e, path) from e

    logger.debug(f"Loaded configuration {path} (schema {config.schema_version})")
    return config


def load_config_from_dict(data: dict[str, Any]) -> InteriorConfiguration:
    """Load and validate an interior configuration from a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    try:
        return InteriorConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise _validation_config_error(e) from e
