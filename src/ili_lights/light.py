"""Base light: on/off state, bounded intensity, identifier and listeners."""

from __future__ import annotations

import logging

from .events import EventKind, LightEvent, LightListener, ListenerRegistry
from .ranges import ParameterRange

logger = logging.getLogger(__name__)

DEFAULT_MIN_INTENSITY = 0
DEFAULT_MAX_INTENSITY = 255


class Light:
    """
    A dimmable light source.

    Intensity writes outside [min_intensity, max_intensity] are rejected, never
    clamped, and report failure through their return value. Every setter can
    skip notification with fire_event=False; compound setters emit a single
    summary event instead of one per field.

    Example:
        light = Light()
        light.add_listener(my_listener)
        light.set_intensity(128)   # my_listener gets an INTENSITY event
        light.turn_on()            # back to 255, one TURN_ON event
    """

    TYPE_TAG = "light"

    def __init__(self, intensity: int | None = None):
        self._intensity_range = ParameterRange(DEFAULT_MIN_INTENSITY, DEFAULT_MAX_INTENSITY)
        self._intensity = self._intensity_range.maximum
        self._light_id = 0
        self._uses_light_id = False
        self._on = True
        self._listeners = ListenerRegistry()

        if intensity is not None:
            self.set_intensity(intensity, fire_event=False)

    # -- identifier -----------------------------------------------------------

    @property
    def light_id(self) -> int:
        return self._light_id

    @property
    def uses_light_id(self) -> bool:
        """Whether the id distinguishes this light among several in one object."""
        return self._uses_light_id

    def set_light_id(self, light_id: int) -> None:
        """Set the identifier (negative values become 0) and start using it."""
        self._light_id = max(0, int(light_id))
        self._uses_light_id = True

    def enable_light_id(self) -> None:
        self._uses_light_id = True

    def disable_light_id(self) -> None:
        self._uses_light_id = False

    # -- intensity ------------------------------------------------------------

    @property
    def intensity(self) -> int:
        return self._intensity

    @property
    def min_intensity(self) -> int:
        return self._intensity_range.minimum

    @property
    def max_intensity(self) -> int:
        return self._intensity_range.maximum

    def set_intensity(self, intensity: float, *, fire_event: bool = True) -> bool:
        """
        Set the intensity if it lies within the range and differs from the current one.

        Args:
            intensity: New value; floats are truncated
            fire_event: Notify listeners with an INTENSITY event

        Returns:
            True if the intensity changed, False if the write was rejected
        """
        intensity = int(intensity)
        if not self._intensity_range.contains(intensity) or intensity == self._intensity:
            logger.debug(
                "Light %d: intensity %d rejected (current %d, range %s)",
                self._light_id,
                intensity,
                self._intensity,
                self._intensity_range,
            )
            return False

        self._intensity = self._intensity_range.clamp(intensity)
        if fire_event:
            self.fire_event(EventKind.INTENSITY)
        return True

    def set_min_intensity(self, intensity: int) -> None:
        self._intensity_range = self._intensity_range.with_minimum(intensity)

    def set_max_intensity(self, intensity: int) -> None:
        self._intensity_range = self._intensity_range.with_maximum(intensity)

    def set_range(self, min_intensity: int, max_intensity: int) -> None:
        """
        Replace the intensity bounds.

        The bounds are not checked against each other and the current
        intensity is left as it is, even if it now falls outside.
        """
        self._intensity_range = ParameterRange(min_intensity, max_intensity)

    # -- state ----------------------------------------------------------------

    @property
    def state(self) -> bool:
        return self._on

    @property
    def is_on(self) -> bool:
        return self._on

    @property
    def is_off(self) -> bool:
        return not self._on

    def set_state(self, on: bool, *, fire_event: bool = True) -> bool:
        """Switch the light on or off. Always writes and returns the new state."""
        self._on = bool(on)
        if fire_event:
            self.fire_event(EventKind.STATE)
        return self._on

    def turn_on(self, *, fire_event: bool = True) -> None:
        """Switch on at full intensity, reported as one TURN_ON event."""
        self.set_intensity(self.max_intensity, fire_event=False)
        self.set_state(True, fire_event=False)
        if fire_event:
            self.fire_event(EventKind.TURN_ON)

    def turn_off(self, *, fire_event: bool = True) -> bool:
        """Switch off. Listeners receive a STATE event."""
        return self.set_state(False, fire_event=fire_event)

    def set_parameters(self, on: bool, intensity: int, *, fire_event: bool = True) -> None:
        """Update state and intensity together, reported as one ALL_PARAMETERS event."""
        self.set_state(on, fire_event=False)
        self.set_intensity(intensity, fire_event=False)
        if fire_event:
            self.fire_event(EventKind.ALL_PARAMETERS)

    # -- listeners ------------------------------------------------------------

    @property
    def listeners(self) -> tuple[LightListener, ...]:
        return self._listeners.snapshot()

    def add_listener(self, listener: LightListener) -> None:
        self._listeners.add(listener)

    def remove_listener(self, listener: LightListener) -> bool:
        return self._listeners.remove(listener)

    def fire_event(self, kind: EventKind) -> None:
        """Synchronously notify every listener that kind changed on this light."""
        self._listeners.dispatch(LightEvent(self, kind))

    # -- rendering ------------------------------------------------------------

    def _describe(self) -> list[str]:
        return [
            f"[id:{self._light_id}]",
            "[on]" if self._on else "[off]",
            f"[intensity: ({self.min_intensity})-{self._intensity}({self.max_intensity})]",
        ]

    def __str__(self) -> str:
        return " ".join([f"(type: {type(self).__name__})", *self._describe()])
