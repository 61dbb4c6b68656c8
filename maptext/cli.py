"""Command-line interface for the text renderer."""

import logging
from datetime import datetime
from functools import wraps
from pathlib import Path
from typing import Optional

import click
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import get_config
from .models.bounding_box import BoundingBox
from .models.text_style import TextAnchor, TextJustify, TextStyle
from .services.layout_service import UnsupportedJustificationError
from .services.marker_service import DEFAULT_Z_INDEX, MarkerService
from .services.text_drawer_service import TextDrawerService
from .utils.image_utils import load_image, save_image


def timestamped_filename(base_name: str, extension: str = "png") -> str:
    """Generate a filename with timestamp to avoid overwrites.

    Args:
        base_name: Base name for the file (e.g., 'My_Marker')
        extension: File extension without dot (default: 'png')

    Returns:
        Filename like 'My_Marker_20240201_143052.png'
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{base_name}_{timestamp}.{extension}"


def _slug(text: str, limit: int = 32) -> str:
    cleaned = "".join(ch if ch.isalnum() else "_" for ch in text.strip())
    return cleaned[:limit].strip("_") or "text"


console = Console(soft_wrap=True)


def style_options(func):
    """Attach the shared style options and pass a built ``style`` kwarg."""

    @click.option("--style", "style_file", type=click.Path(exists=True, dir_okay=False),
                  help="YAML style file; other options override it")
    @click.option("--size", type=int, help="Font size in pixels")
    @click.option("--color", help="Text colour (hex or name)")
    @click.option("--opacity", type=float, help="Text opacity (0.0-1.0)")
    @click.option("--justify", type=click.Choice([j.value for j in TextJustify], case_sensitive=False),
                  help="Line justification")
    @click.option("--max-width", type=int, help="Maximum line width in pixels")
    @click.option("--halo-color", help="Halo colour (hex or name)")
    @click.option("--halo-width", type=float, help="Halo blur radius in pixels")
    @click.option("--offset", type=(int, int), default=None, help="Pixel offset X Y")
    @click.option("--anchor", help="Anchor: " + ", ".join(a.value for a in TextAnchor))
    @click.option("--font", "fonts", multiple=True, help="Font name or path (repeatable)")
    @click.option("--rotation", type=float, help="Marker rotation in degrees")
    @wraps(func)
    def wrapper(style_file, size, color, opacity, justify, max_width, halo_color,
                halo_width, offset, anchor, fonts, rotation, **kwargs):
        overrides = {
            "size": size,
            "color": color,
            "opacity": opacity,
            "justification": justify,
            "max_width": max_width,
            "halo_color": halo_color,
            "halo_width": halo_width,
            "offset": offset,
            "anchor": anchor,
            "fonts": list(fonts) or None,
            "rotation": rotation,
        }
        overrides = {key: value for key, value in overrides.items() if value is not None}

        try:
            base = TextStyle.from_yaml(Path(style_file)) if style_file else TextStyle()
            style = base.with_changes(**overrides)
        except (ValidationError, yaml.YAMLError) as e:
            console.print(f"[red]Error:[/red] Invalid style: {e}")
            raise SystemExit(1)

        return func(style=style, **kwargs)

    return wrapper


@click.group()
@click.version_option(version="0.1.0")
@click.option("--verbose", "-v", is_flag=True, help="Log layout details")
def main(verbose: bool):
    """Map Text - Render styled text bitmaps for map markers."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


@main.command()
@click.argument("text")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Output image path")
@style_options
def render(text: str, output: Optional[str], style: TextStyle):
    """Render TEXT to a PNG image."""
    config = get_config()
    if output:
        output_path = Path(output)
    else:
        config.ensure_directories()
        output_path = config.output_dir / timestamped_filename(_slug(text))

    drawer = TextDrawerService(config=config)
    try:
        image = drawer.draw_text(text, style)
    except UnsupportedJustificationError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    save_image(image, output_path)
    console.print(f"[bold]Canvas:[/bold] {image.width} x {image.height} px")
    console.print(f"[green]Saved:[/green] {output_path}")


@main.command()
@click.argument("text")
@style_options
def measure(text: str, style: TextStyle):
    """Show the computed layout geometry for TEXT without drawing it."""
    drawer = TextDrawerService()
    geometry, layout = drawer.compute_geometry(text, style)

    table = Table(title=f"Layout: {text!r}")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Anchor", style.anchor.value)
    table.add_row("Offset", f"{style.offset[0]}, {style.offset[1]}")
    table.add_row("Halo Width", f"{style.halo_width:g} px")
    table.add_row("Lines", str(len(layout.lines)))
    table.add_row("Text Size", f"{geometry.text.width} x {geometry.text.height} px")
    table.add_row("Canvas Size", f"{geometry.canvas.width} x {geometry.canvas.height} px")
    table.add_row("Anchor Ratio", f"{geometry.ratio.x:g}, {geometry.ratio.y:g}")
    table.add_row("Translation", f"{geometry.translation.x:g}, {geometry.translation.y:g}")

    console.print(table)


@main.command("init-style")
@click.argument("path", type=click.Path(dir_okay=False))
@click.option("--force", is_flag=True, help="Overwrite an existing file")
@style_options
def init_style(path: str, force: bool, style: TextStyle):
    """Write a style YAML file to PATH."""
    style_path = Path(path)
    if style_path.exists() and not force:
        console.print(f"[red]Error:[/red] {style_path} already exists (use --force)")
        raise SystemExit(1)

    style_path.parent.mkdir(parents=True, exist_ok=True)
    style.to_yaml(style_path)
    console.print(f"[green]Created style:[/green] {style_path}")


@main.command("place-marker")
@click.argument("map_image", type=click.Path(exists=True, dir_okay=False))
@click.argument("text")
@click.option("--lat", type=float, required=True, help="Marker latitude")
@click.option("--lon", type=float, required=True, help="Marker longitude")
@click.option("--north", type=float, required=True, help="Map north latitude")
@click.option("--south", type=float, required=True, help="Map south latitude")
@click.option("--east", type=float, required=True, help="Map east longitude")
@click.option("--west", type=float, required=True, help="Map west longitude")
@click.option("--z-index", type=float, default=DEFAULT_Z_INDEX, help="Stacking order")
@click.option("--output", "-o", type=click.Path(dir_okay=False), required=True, help="Output image path")
@style_options
def place_marker(
    map_image: str,
    text: str,
    lat: float,
    lon: float,
    north: float,
    south: float,
    east: float,
    west: float,
    z_index: float,
    output: str,
    style: TextStyle,
):
    """Render TEXT as a marker and composite it onto MAP_IMAGE."""
    try:
        bbox = BoundingBox(north=north, south=south, east=east, west=west)
    except ValidationError as e:
        console.print(f"[red]Error:[/red] Invalid bounds: {e}")
        raise SystemExit(1)

    if not bbox.contains(lat, lon):
        console.print(f"[red]Error:[/red] Marker ({lat}, {lon}) is outside the map bounds")
        raise SystemExit(1)

    service = MarkerService()
    marker = service.build_marker(text, style, lat, lon, z_index=z_index)
    result = service.composite_markers(load_image(map_image), [marker], bbox)

    output_path = save_image(result, output)
    console.print(f"[bold]Marker icon:[/bold] {marker.icon.width} x {marker.icon.height} px")
    console.print(f"[green]Saved:[/green] {output_path}")


if __name__ == "__main__":
    main()
