"""Typer CLI for cabinet interior generation."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated

import typer

from interiors.application import GenerateInteriorCommand
from interiors.application.config import (
    ConfigError,
    config_to_interior,
    load_config,
)
from interiors.cli.commands import display_load_error, validate_command
from interiors.domain.services import (
    count_zones,
    get_all_zones,
    get_interior_summary,
    get_max_depth,
    get_zone_summary,
)
from interiors.infrastructure import (
    ExporterRegistry,
    InteriorReportFormatter,
    export_to_file,
)

OUTPUT_FORMATS = ("text", "json")

app = typer.Typer(
    name="interiors",
    help="Generate shelves, drawers and partitions for cabinet interiors.",
)

app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Cabinet interior generator."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def generate(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option(
            "--output", "-o", help="Write output (or the export file) to this path"
        ),
    ] = None,
    export_format: Annotated[
        str | None,
        typer.Option("--export", "-e", help="Export parts to a file: dxf, json"),
    ] = None,
) -> None:
    """Generate interior parts from a configuration file."""
    if output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Unknown format '{output_format}'. "
            f"Available formats: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)

    if export_format is not None:
        if not ExporterRegistry.is_registered(export_format):
            available = ", ".join(ExporterRegistry.available_formats())
            typer.echo(
                f"Unknown export format '{export_format}'. Available formats: {available}",
                err=True,
            )
            raise typer.Exit(code=1)
        if output_file is None:
            typer.echo("--export requires --output", err=True)
            raise typer.Exit(code=1)

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    result = GenerateInteriorCommand().execute_config(config)
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)
    for warning in result.warnings:
        typer.echo(f"Warning: {warning}", err=True)

    if export_format is not None and output_file is not None:
        path = export_to_file(export_format, result, output_file)
        typer.echo(f"Exported {len(result.parts)} parts to {path}")
        return

    if output_format == "json":
        content = json.dumps(result.to_dict(), indent=2)
    else:
        content = InteriorReportFormatter().format(result)

    if output_file is not None:
        output_file.write_text(content, encoding="utf-8")
        typer.echo(f"Output written to {output_file}")
    else:
        typer.echo(content)


@app.command()
def summary(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file"),
    ],
) -> None:
    """Show the zone tree of a configuration file."""
    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    interior = config_to_interior(config)
    typer.echo(f"Interior: {get_interior_summary(interior)}")
    root = interior.root_zone
    if root is None:
        return

    typer.echo(f"Zones: {count_zones(root)} (max depth {get_max_depth(root)})")
    for zone in get_all_zones(root):
        indent = "  " * zone.depth
        typer.echo(f"{indent}- {zone.id}: {get_zone_summary(zone)}")


if __name__ == "__main__":
    app()
