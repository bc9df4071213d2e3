"""Typer CLI for video wall calculations."""

import asyncio
import logging
from pathlib import Path
from typing import Annotated

import typer

from videowall.application import CalculateConfigurationCommand, CalculationInput
from videowall.application.config import (
    ConfigError,
    LlmConfig,
    config_to_input,
    load_config,
)
from videowall.cli.commands import catalog_app, validate_command
from videowall.domain import CabinetType, ParamKey, Unit, format_dimension
from videowall.domain import convert as convert_units
from videowall.infrastructure import (
    JsonExporter,
    ResultReportFormatter,
    ResultSummaryFormatter,
)

app = typer.Typer(
    name="videowall",
    help="Find video wall cabinet grids that fit a target size or aspect ratio.",
)

app.command(name="validate")(validate_command)
app.add_typer(catalog_app, name="catalog")

OUTPUT_FORMATS = ("text", "summary", "json")


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Video wall cabinet calculator."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _cli_parameters(
    ar: float | None,
    height: float | None,
    width: float | None,
    diagonal: float | None,
) -> dict[str, float]:
    """Parameters given on the command line, in ar/height/width/diagonal order."""
    given = {
        ParamKey.AR.value: ar,
        ParamKey.HEIGHT.value: height,
        ParamKey.WIDTH.value: width,
        ParamKey.DIAGONAL.value: diagonal,
    }
    return {key: value for key, value in given.items() if value is not None}


def _build_input(
    config_file: Path | None,
    cabinet: str | None,
    unit: str | None,
    parameters: dict[str, float],
) -> CalculationInput:
    """Merge a request file (if any) with command line options.

    Command line parameters replace the file's parameters as a whole, since
    the selection must stay exactly two keys.
    """
    if config_file is not None:
        try:
            base = config_to_input(load_config(config_file))
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
    else:
        base = CalculationInput(cabinet_type=CabinetType.WIDE.value, unit=Unit.MM.value)

    if cabinet is not None:
        base.cabinet_type = cabinet
    if unit is not None:
        base.unit = unit
    if parameters:
        base.selected_params = list(parameters)
        base.values = dict(parameters)
    return base


@app.command()
def calculate(
    cabinet: Annotated[
        str | None,
        typer.Option("--cabinet", help="Cabinet type: 16:9 or 1:1 (default: 16:9)"),
    ] = None,
    unit: Annotated[
        str | None,
        typer.Option("--unit", "-u", help="Unit of length values: mm, m, ft, in (default: mm)"),
    ] = None,
    ar: Annotated[
        float | None,
        typer.Option("--ar", help="Target aspect ratio as width/height, e.g. 1.778"),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", help="Target height"),
    ] = None,
    width: Annotated[
        float | None,
        typer.Option("--width", help="Target width"),
    ] = None,
    diagonal: Annotated[
        float | None,
        typer.Option("--diagonal", help="Target diagonal"),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON request file"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, summary, json"),
    ] = "text",
) -> None:
    """Find the closest lower and upper cabinet grids.

    Give exactly two of --ar, --height, --width, --diagonal, or a request
    file with --config.

    Examples:
        videowall calculate --width 3600 --height 2025
        videowall calculate --cabinet 1:1 --unit ft --ar 1.778 --diagonal 12
    """
    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(OUTPUT_FORMATS)}", err=True)
        raise typer.Exit(code=1)

    calculation_input = _build_input(
        config_file, cabinet, unit, _cli_parameters(ar, height, width, diagonal)
    )
    result = CalculateConfigurationCommand().execute(calculation_input)

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    if output_format == "json":
        typer.echo(JsonExporter().export(result))
    elif output_format == "summary":
        typer.echo(ResultSummaryFormatter().format(result.output, result.unit))
    else:
        typer.echo(ResultReportFormatter().format(result))


@app.command()
def convert(
    value: Annotated[float, typer.Argument(help="Value to convert")],
    from_unit: Annotated[
        str, typer.Option("--from", help="Source unit: mm, m, ft, in")
    ],
    to_unit: Annotated[
        str, typer.Option("--to", help="Target unit: mm, m, ft, in")
    ],
) -> None:
    """Convert a length between units.

    Example:
        videowall convert 12 --from ft --to mm
    """
    valid_units = [u.value for u in Unit]
    for name in (from_unit, to_unit):
        if name not in valid_units:
            typer.echo(f"Error: Unknown unit: {name}", err=True)
            typer.echo(f"Available units: {', '.join(valid_units)}", err=True)
            raise typer.Exit(code=1)

    converted = convert_units(value, from_unit, to_unit)
    typer.echo(f"{format_dimension(value, from_unit)} = {format_dimension(converted, to_unit)}")


@app.command()
def ask(
    prompt: Annotated[str, typer.Argument(help="Describe the wall you want")],
    model: Annotated[
        str | None,
        typer.Option("--model", help="Ollama model name (default: llama3.2)"),
    ] = None,
    ollama_url: Annotated[
        str | None,
        typer.Option("--ollama-url", help="Ollama server URL"),
    ] = None,
    timeout: Annotated[
        float | None,
        typer.Option("--timeout", help="Agent timeout in seconds (default: 30)"),
    ] = None,
) -> None:
    """Ask the planning agent about a wall in plain language.

    Requires a running Ollama server with the model pulled.

    Example:
        videowall ask "16:9 wall about 4 meters wide using 1:1 cabinets"
    """
    from videowall.infrastructure.llm import check_ollama_sync, run_wall_agent_sync

    settings = LlmConfig.from_env()
    model_name = model or settings.model
    base_url = ollama_url or settings.ollama_url
    run_timeout = timeout if timeout is not None else settings.timeout_seconds

    ready, message = check_ollama_sync(base_url=base_url, model_name=model_name)
    if not ready:
        typer.echo(f"Error: {message}", err=True)
        raise typer.Exit(code=1)

    try:
        answer = run_wall_agent_sync(
            prompt, model=model_name, ollama_url=base_url, timeout=run_timeout
        )
    except asyncio.TimeoutError:
        typer.echo(f"Error: Agent timed out after {run_timeout:g}s", err=True)
        raise typer.Exit(code=1)

    typer.echo(answer)


if __name__ == "__main__":
    app()
