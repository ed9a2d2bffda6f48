"""
ili-lights - Inspect light rigs from the terminal.

Usage:
    ili-lights                    # Show configured lights (or a demo rig)
    ili-lights --xml              # Dump lights as <Light> markup
    ili-lights --json             # Dump lights as JSON
    ili-lights --cct-ramp 12      # Draw the warm-to-cool display color ramp
    ili-lights --color ff8000     # Show RGB and HSB values of a color
    ili-lights --save-demo        # Write the demo rig to the config file
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from .cct_light import CCTLight
from .color import cct_ramp, color_to_hex, hex_to_color, pack_rgb, rgb_to_hsb, unpack_rgb
from .color_light import ColorLight
from .config import CONFIG_FILE, build_lights, load_config, save_config
from .exceptions import LightsError
from .light import Light
from .serialization import to_dict, to_xml

logger = logging.getLogger(__name__)

SWATCH = "      "


def demo_rig() -> list[Light]:
    """One light of each kind, used when no config exists."""
    plain = Light(180)
    plain.set_light_id(1)

    tunable = CCTLight(255, 64)
    tunable.set_light_id(2)

    colored = ColorLight.from_color(220, 0xFF8000)
    colored.set_light_id(3)

    return [plain, tunable, colored]


def swatch_color(light: Light) -> int:
    """Color to draw for a light: what it would look like right now."""
    if light.is_off:
        return 0x000000
    if isinstance(light, ColorLight):
        return light.color
    if isinstance(light, CCTLight):
        return light.display_color
    span = light.max_intensity - light.min_intensity
    level = 255 if span <= 0 else int(255 * (light.intensity - light.min_intensity) / span)
    return pack_rgb(level, level, level)


def _detail(light: Light) -> str:
    if isinstance(light, ColorLight):
        return (
            f"rgb {light.red},{light.green},{light.blue}  "
            f"hsb {light.hue},{light.saturation},{light.brightness}"
        )
    if isinstance(light, CCTLight):
        return f"cct {light.cct} ({light.min_cct}-{light.max_cct})"
    return ""


def show_lights(console: Console, lights: list[Light], title: str):
    """Render lights as a table with a color swatch per light."""
    table = Table(title=title, box=box.ROUNDED, show_header=True)
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Type")
    table.add_column("State", justify="center")
    table.add_column("Intensity", justify="right")
    table.add_column("Detail")
    table.add_column("", justify="center")

    for light in lights:
        hex_color = color_to_hex(swatch_color(light))
        table.add_row(
            str(light.light_id),
            light.TYPE_TAG,
            "[green]on[/green]" if light.is_on else "[dim]off[/dim]",
            f"{light.intensity} ({light.min_intensity}-{light.max_intensity})",
            _detail(light),
            Text(SWATCH, style=f"on {hex_color}"),
        )

    console.print(table)


def show_cct_ramp(console: Console, steps: int, max_cct: int = 255):
    """Draw display colors across the cct range, warm to cool."""
    light = CCTLight()
    line = Text()
    for cct in cct_ramp(max_cct, steps):
        light.set_cct(cct, fire_event=False)
        line.append("  ", style=f"on {color_to_hex(light.display_color)}")
    console.print(line)
    console.print(f"[dim]cct 0-{max_cct}, {steps} steps[/dim]")


def show_color(console: Console, value: str):
    color = hex_to_color(value)
    r, g, b = unpack_rgb(color)
    h, s, v = rgb_to_hsb(r, g, b)
    console.print(Text(SWATCH, style=f"on {color_to_hex(color)}"), f"{color_to_hex(color)}  packed {color}")
    console.print(f"  rgb {r},{g},{b}  hsb {h},{s},{v}")


def main():
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Inspect light rigs")
    parser.add_argument("--config", type=Path, metavar="PATH", help=f"Config file (default: {CONFIG_FILE})")
    parser.add_argument("--xml", action="store_true", help="Output lights as markup")
    parser.add_argument("--json", action="store_true", help="Output lights as JSON")
    parser.add_argument("--cct-ramp", type=int, metavar="N", help="Draw the cct display color ramp in N steps")
    parser.add_argument("--color", type=str, metavar="HEX", help="Show RGB and HSB values of a color")
    parser.add_argument("--save-demo", action="store_true", help="Write the demo rig to the config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )
    console = Console()

    if args.color:
        try:
            show_color(console, args.color)
        except ValueError:
            console.print(f"[red]Not a hex color: {args.color}[/red]")
            sys.exit(1)
        return

    if args.cct_ramp is not None:
        show_cct_ramp(console, args.cct_ramp)
        return

    if args.save_demo:
        path = save_config(demo_rig(), args.config)
        console.print(f"Saved demo rig to {path}")
        return

    try:
        config = load_config(args.config)
        lights = build_lights(config)
    except LightsError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    title = "Lights"
    if not lights:
        logger.info("No lights configured, showing demo rig")
        lights = demo_rig()
        title = "Lights (demo)"

    if args.json:
        print(json.dumps([to_dict(light) for light in lights], indent=2))
        return

    if args.xml:
        for light in lights:
            print(to_xml(light))
        return

    show_lights(console, lights, title)


if __name__ == "__main__":
    main()
