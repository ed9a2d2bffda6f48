"""Full-color light that keeps RGB and HSB views of one color in sync."""

from __future__ import annotations

from .color import hsb_to_rgb, pack_rgb, rgb_to_hsb, unpack_rgb
from .events import EventKind
from .light import Light

DEFAULT_HUE = 127
DEFAULT_SATURATION = 0
DEFAULT_BRIGHTNESS = 255


class ColorLight(Light):
    """
    A light with a 24-bit color, editable as RGB channels or as HSB components.

    Writing any RGB channel recomputes hue, saturation and brightness; writing
    any HSB component recomputes the RGB channels. Channel setters store what
    they are given without range checks. The conversions truncate, so a color
    set through one view may read back slightly different through the other.
    """

    TYPE_TAG = "rgb"

    def __init__(
        self,
        intensity: int | None = None,
        red: int | None = None,
        green: int | None = None,
        blue: int | None = None,
    ):
        super().__init__(intensity)
        self._red = 255
        self._green = 255
        self._blue = 255
        self._hue = DEFAULT_HUE
        self._saturation = DEFAULT_SATURATION
        self._brightness = DEFAULT_BRIGHTNESS

        if red is not None:
            self.set_red(red, fire_event=False)
        if green is not None:
            self.set_green(green, fire_event=False)
        if blue is not None:
            self.set_blue(blue, fire_event=False)

    @classmethod
    def from_hsb(cls, intensity: int | None, hue: int, saturation: int, brightness: int) -> ColorLight:
        light = cls(intensity)
        light.set_hue(hue, fire_event=False)
        light.set_saturation(saturation, fire_event=False)
        light.set_brightness(brightness, fire_event=False)
        return light

    @classmethod
    def from_color(cls, intensity: int | None, color: int) -> ColorLight:
        light = cls(intensity)
        light.set_color(color, fire_event=False)
        return light

    # -- packed color -----------------------------------------------------------

    @property
    def color(self) -> int:
        """Current color as 0xRRGGBB."""
        return pack_rgb(self._red, self._green, self._blue)

    def set_color(self, color: int, *, fire_event: bool = True) -> bool:
        """
        Set all three channels from a packed color.

        Bits above the low 24 are ignored. A single COLOR event is fired, and
        only when the color actually changes.

        Returns:
            True if the color changed
        """
        color &= 0xFFFFFF
        if color == self.color:
            return False

        r, g, b = unpack_rgb(color)
        self.set_red(r, fire_event=False)
        self.set_green(g, fire_event=False)
        self.set_blue(b, fire_event=False)
        if fire_event:
            self.fire_event(EventKind.COLOR)
        return True

    # -- RGB ------------------------------------------------------------------

    @property
    def red(self) -> int:
        return self._red

    @property
    def green(self) -> int:
        return self._green

    @property
    def blue(self) -> int:
        return self._blue

    def set_red(self, red: int, *, fire_event: bool = True) -> int:
        self._red = int(red)
        return self._rgb_changed(EventKind.RED, fire_event)

    def set_green(self, green: int, *, fire_event: bool = True) -> int:
        self._green = int(green)
        return self._rgb_changed(EventKind.GREEN, fire_event)

    def set_blue(self, blue: int, *, fire_event: bool = True) -> int:
        self._blue = int(blue)
        return self._rgb_changed(EventKind.BLUE, fire_event)

    def _rgb_changed(self, kind: EventKind, fire_event: bool) -> int:
        if fire_event:
            self.fire_event(kind)
        self._hue, self._saturation, self._brightness = rgb_to_hsb(self._red, self._green, self._blue)
        return self.color

    # -- HSB ------------------------------------------------------------------

    @property
    def hue(self) -> int:
        return self._hue

    @property
    def saturation(self) -> int:
        return self._saturation

    @property
    def brightness(self) -> int:
        return self._brightness

    def set_hue(self, hue: float, *, fire_event: bool = True) -> int:
        self._hue = int(hue)
        return self._hsb_changed(EventKind.HUE, fire_event)

    def set_saturation(self, saturation: float, *, fire_event: bool = True) -> int:
        self._saturation = int(saturation)
        return self._hsb_changed(EventKind.SATURATION, fire_event)

    def set_brightness(self, brightness: float, *, fire_event: bool = True) -> int:
        self._brightness = int(brightness)
        return self._hsb_changed(EventKind.BRIGHTNESS, fire_event)

    def _hsb_changed(self, kind: EventKind, fire_event: bool) -> int:
        if fire_event:
            self.fire_event(kind)
        self._red, self._green, self._blue = hsb_to_rgb(self._hue, self._saturation, self._brightness)
        return self.color

    def set_parameters(self, on: bool, intensity: int, color: int | None = None, *, fire_event: bool = True) -> None:
        """
        Update state, intensity and color together, reported as one ALL_PARAMETERS_RGB event.

        Without a color this is the plain Light update and fires ALL_PARAMETERS.
        """
        if color is None:
            super().set_parameters(on, intensity, fire_event=fire_event)
            return
        self.set_state(on, fire_event=False)
        self.set_intensity(intensity, fire_event=False)
        self.set_color(color, fire_event=False)
        if fire_event:
            self.fire_event(EventKind.ALL_PARAMETERS_RGB)

    def _describe(self) -> list[str]:
        return [
            *super()._describe(),
            f"[r:{self._red} g:{self._green} b:{self._blue}]",
            f"[h:{self._hue} s:{self._saturation} b:{self._brightness}]",
        ]
