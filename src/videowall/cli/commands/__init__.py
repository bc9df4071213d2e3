"""CLI command implementations for the videowall application.

This package contains subcommands for the videowall CLI, including:
- validate: Validate a wall request file
- catalog: List cabinet types and aspect ratio presets
"""

from videowall.cli.commands.catalog import catalog_app
from videowall.cli.commands.validate import validate_command

__all__ = ["catalog_app", "validate_command"]
