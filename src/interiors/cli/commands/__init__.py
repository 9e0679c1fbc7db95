"""CLI command implementations for the interiors application."""

from interiors.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
