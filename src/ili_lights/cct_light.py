"""Tunable-white light with a correlated color temperature (CCT) axis."""

from __future__ import annotations

import logging

from .color import lerp_color
from .events import EventKind
from .light import Light
from .ranges import ParameterRange, map_range

logger = logging.getLogger(__name__)

WARM_WHITE = 0xF9E9B7
WHITE = 0xF9F9ED
COOL_WHITE = 0x96C3E2

DEFAULT_CCT = 128
DEFAULT_MIN_CCT = 0
DEFAULT_MAX_CCT = 255


class CCTLight(Light):
    """
    A light whose color runs from warm white (low cct) to cool white (high cct).

    Unlike intensity, cct writes are clamped into [min_cct, max_cct].
    """

    TYPE_TAG = "cct"

    def __init__(self, intensity: int | None = None, cct: int | None = None):
        super().__init__(intensity)
        self._cct_range = ParameterRange(DEFAULT_MIN_CCT, DEFAULT_MAX_CCT)
        self._cct = DEFAULT_CCT
        if cct is not None:
            self.set_cct(cct, fire_event=False)

    @property
    def cct(self) -> int:
        return self._cct

    @property
    def min_cct(self) -> int:
        return self._cct_range.minimum

    @property
    def max_cct(self) -> int:
        return self._cct_range.maximum

    def set_cct(self, cct: float, *, fire_event: bool = True) -> bool:
        """
        Set the color temperature, clamped into the cct range.

        Returns:
            True if the stored value changed (only then is a CCT event fired)
        """
        cct = self._cct_range.clamp(int(cct))
        if cct == self._cct:
            return False

        self._cct = cct
        if fire_event:
            self.fire_event(EventKind.CCT)
        return True

    def set_min_cct(self, cct: int) -> None:
        self._cct_range = self._cct_range.with_minimum(cct)

    def set_max_cct(self, cct: int) -> None:
        self._cct_range = self._cct_range.with_maximum(cct)

    def set_range_cct(self, min_cct: int, max_cct: int) -> None:
        """
        Replace the cct bounds, keeping the current cct at the same relative position.

        A cct of 64 in 0-255 becomes 250 in 0-1000. No event is fired.
        """
        target = ParameterRange(min_cct, max_cct)
        rescaled = self._cct_range.rescale(self._cct, target)
        logger.debug(
            "Light %d: cct %d rescaled to %d (%s -> %s)", self.light_id, self._cct, rescaled, self._cct_range, target
        )
        self._cct = target.clamp(rescaled)
        self._cct_range = target

    @property
    def display_color(self) -> int:
        """
        Packed RGB approximation of the current color temperature.

        Blends warm white into neutral white over the lower half of
        [0, max_cct] and neutral white into cool white over the upper half.
        """
        pivot = int(self.max_cct / 2)
        if self._cct <= pivot:
            amount = map_range(self._cct, 0, pivot, 0.0, 1.0)
            return lerp_color(WARM_WHITE, WHITE, amount)
        amount = map_range(self._cct, pivot, self.max_cct, 0.0, 1.0)
        return lerp_color(WHITE, COOL_WHITE, amount)

    def set_parameters(self, on: bool, intensity: int, cct: int | None = None, *, fire_event: bool = True) -> None:
        """
        Update state, intensity and cct together, reported as one ALL_PARAMETERS_CCT event.

        Without a cct this is the plain Light update and fires ALL_PARAMETERS.
        """
        if cct is None:
            super().set_parameters(on, intensity, fire_event=fire_event)
            return
        self.set_state(on, fire_event=False)
        self.set_intensity(intensity, fire_event=False)
        self.set_cct(cct, fire_event=False)
        if fire_event:
            self.fire_event(EventKind.ALL_PARAMETERS_CCT)

    def _describe(self) -> list[str]:
        return [*super()._describe(), f"[cct: ({self.min_cct})-{self._cct}({self.max_cct})]"]
