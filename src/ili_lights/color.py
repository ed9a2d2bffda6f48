"""Packed-color utilities and RGB <-> HSB conversion.

All components live in 0-255, including hue. The HSB conversions truncate at
every step, so RGB -> HSB -> RGB is lossy: hue is quantized to 256 steps and
then to whole degrees on the way back.
"""

from __future__ import annotations

import re

import numpy as np

from .ranges import constrain, map_range

# Hue is spread over 0-359 degrees, six 60 degree phases of the HSV hexagon
HUE_DEGREES = 359
PHASE_WIDTH = 60

HEX_COLOR = re.compile(r"[0-9a-fA-F]{6}")


def pack_rgb(r: int, g: int, b: int) -> int:
    """Pack 8-bit channels into a single 0xRRGGBB integer."""
    return (r << 16) | (g << 8) | b


def unpack_rgb(color: int) -> tuple[int, int, int]:
    """Split a packed 0xRRGGBB integer into its channels (alpha bits are ignored)."""
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Convert '#rrggbb' (hash optional) to an (r, g, b) tuple."""
    hex_color = hex_color.lstrip("#")
    if not HEX_COLOR.fullmatch(hex_color):
        raise ValueError(f"Expected 6 hex digits, got {hex_color!r}")
    r = int(hex_color[0:2], 16)
    g = int(hex_color[2:4], 16)
    b = int(hex_color[4:6], 16)
    return r, g, b


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f"#{r:02x}{g:02x}{b:02x}"


def color_to_hex(color: int) -> str:
    return rgb_to_hex(*unpack_rgb(color))


def hex_to_color(hex_color: str) -> int:
    return pack_rgb(*hex_to_rgb(hex_color))


def rgb_to_hsb(r: int, g: int, b: int) -> tuple[int, int, int]:
    """
    Convert RGB to HSB (HSV), every component scaled to 0-255.

    Uses the standard max/min formulation: brightness is the largest channel,
    saturation is the spread relative to it and hue is picked from whichever
    channel dominates. Achromatic colors (max == min) get hue 0.

    The arithmetic runs in single precision, so results that land exactly on
    a whole number in real arithmetic may truncate one step lower, e.g.
    (0, 6, 15) has hue 152.

    Returns:
        (hue, saturation, brightness), each truncated to int
    """
    f = np.float32
    rd, gd, bd = f(r) / f(255), f(g) / f(255), f(b) / f(255)
    max_val = max(rd, gd, bd)
    min_val = min(rd, gd, bd)
    d = max_val - min_val

    s = f(0) if max_val == 0 else d / max_val

    if max_val == min_val:
        h = f(0)
    else:
        if max_val == rd:
            h = (gd - bd) / d + f(6 if gd < bd else 0)
        elif max_val == gd:
            h = (bd - rd) / d + f(2)
        else:
            h = (rd - gd) / d + f(4)
        h = h / f(6)

    return int(h * f(255)), int(s * f(255)), int(max_val * f(255))


def hsb_to_rgb(hue: int, saturation: int, brightness: int) -> tuple[int, int, int]:
    """
    Convert HSB (0-255 each) back to RGB.

    The hue is mapped onto 0-359 degrees and split into six phases. Inside a
    phase one channel sits at the top (brightness), one at the bottom
    (brightness scaled by 1 - saturation) and the third ramps between them.
    A hue outside 0-255 that falls past the last phase yields white.
    """
    degrees = int(map_range(hue, 0, 255, 0, HUE_DEGREES))
    phase = int(degrees / PHASE_WIDTH)
    offset = degrees - phase * PHASE_WIDTH

    bottom = int((255 - saturation) * (brightness / 255.0))
    top = brightness
    rising = int((top - bottom) * offset / PHASE_WIDTH) + bottom
    falling = int((top - bottom) * (PHASE_WIDTH - offset) / PHASE_WIDTH) + bottom

    phases = {
        0: (top, rising, bottom),
        1: (falling, top, bottom),
        2: (bottom, top, rising),
        3: (bottom, falling, top),
        4: (rising, bottom, top),
        5: (top, bottom, falling),
    }
    return phases.get(phase, (255, 255, 255))


def lerp_color(start: int, stop: int, amount: float) -> int:
    """
    Blend two packed colors channel by channel.

    amount is clamped to [0, 1]; 0 gives start, 1 gives stop. Channels are
    rounded half-up.
    """
    amount = constrain(amount, 0.0, 1.0)
    a = np.array(unpack_rgb(start), dtype=float)
    b = np.array(unpack_rgb(stop), dtype=float)
    blended = np.floor(a + (b - a) * amount + 0.5).astype(int)
    return pack_rgb(*(int(c) for c in blended))


def cct_ramp(max_cct: int, steps: int) -> list[int]:
    """Evenly spaced color temperature values covering [0, max_cct]."""
    if steps <= 0:
        return []
    return [int(v) for v in np.linspace(0, max_cct, steps)]
