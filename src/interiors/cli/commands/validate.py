"""Validate command for checking interior configuration files.

Loads the configuration, lays the zone tree out in the configured cabinet
and reports structural problems, undersized zones and content errors.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from interiors.application import ValidateInteriorCommand
from interiors.application.config import ConfigError, load_config
from interiors.domain.services import ValidationReport


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate an interior configuration file.

    Exit codes:
        0 - Configuration is valid with no warnings
        1 - Configuration has errors
        2 - Configuration is valid but has warnings

    Example:
        interiors validate my-interior.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    report = ValidateInteriorCommand().execute(config)
    _display_report(report)
    raise typer.Exit(code=report.exit_code)


def display_load_error(error: ConfigError) -> None:
    """Print a configuration loading error to stderr."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type in ("validation", "version"):
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo(err=True)
    typer.echo("Validation failed.", err=True)


def _display_report(report: ValidationReport) -> None:
    if report.violations:
        typer.echo("Errors:", err=True)
        for violation in report.violations:
            typer.echo(f"  {violation}", err=True)
        typer.echo()

    if report.warnings:
        typer.echo("Warnings:")
        for warning in report.warnings:
            typer.echo(f"  {warning}")
        typer.echo()

    if report.violations:
        typer.echo(
            f"Validation failed: {len(report.violations)} error(s), "
            f"{len(report.warnings)} warning(s)",
            err=True,
        )
    elif report.warnings:
        typer.echo(f"Validation passed with {len(report.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")
