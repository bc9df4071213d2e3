"""Catalog commands for listing cabinet types and aspect ratio presets."""

import typer

from videowall.domain import ASPECT_RATIO_PRESETS, CABINETS

catalog_app = typer.Typer(
    name="catalog",
    help="Show cabinet types and aspect ratio presets.",
)


@catalog_app.command(name="cabinets")
def list_cabinets() -> None:
    """List the available cabinet modules.

    Example:
        videowall catalog cabinets
    """
    typer.echo("Cabinet types:")
    typer.echo()
    for cabinet_type, spec in CABINETS.items():
        typer.echo(
            f"  {cabinet_type.value:<6} {spec.width_mm:g} mm x {spec.height_mm:g} mm"
            f"  (aspect ratio {spec.aspect_ratio:.3f})"
        )


@catalog_app.command(name="presets")
def list_presets() -> None:
    """List aspect ratio presets usable with --ar.

    Example:
        videowall catalog presets
    """
    typer.echo("Aspect ratio presets:")
    typer.echo()
    for preset in ASPECT_RATIO_PRESETS:
        typer.echo(f"  {preset.label:<6} {preset.value:.3f}")
