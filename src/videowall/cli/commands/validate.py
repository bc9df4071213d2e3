"""Validate command for checking wall request files."""

from pathlib import Path
from typing import Annotated

import typer

from videowall.application.config import ConfigError, config_to_input, load_config


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON request file to validate"),
    ],
) -> None:
    """Validate a wall request file.

    Checks JSON syntax, the request schema, and the parameter values.

    Exit codes:
        0 - Request is valid
        1 - Request has errors

    Example:
        videowall validate lobby-wall.json
    """
    typer.echo(f"Validating {config_file}...")

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    errors = config_to_input(config).validate()
    if errors:
        typer.echo("Errors:", err=True)
        for error in errors:
            typer.echo(f"  {error}", err=True)
        raise typer.Exit(code=1)

    params = ", ".join(f"{key.value}={value:g}" for key, value in config.parameters.items())
    typer.echo(f"OK: {config.cabinet_type.value} cabinets, {params} ({config.unit.value})")


def _display_load_error(error: ConfigError) -> None:
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            typer.echo(
                f"  Line {detail.get('line', '?')}, column {detail.get('column', '?')}: "
                f"{detail.get('message', '')}",
                err=True,
            )
    elif error.error_type == "validation" and error.details:
        for detail in error.details:
            path = detail.get("path") or "(root)"
            typer.echo(f"  {path}: {detail.get('message', '')}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)
