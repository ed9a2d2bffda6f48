"""Light events, the listener protocol and per-light listener registries."""

from __future__ import annotations

import logging
import threading
import weakref
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .light import Light

logger = logging.getLogger(__name__)

DEFAULT_EVENT_CCT = 128
DEFAULT_EVENT_COLOR = 0xFFFFFF


class EventKind(IntEnum):
    """What changed on the light that fired an event."""

    STATE = 1
    TURN_ON = 2
    TURN_OFF = 3  # reserved, turn_off() fires STATE

    INTENSITY = 20
    MIN_INTENSITY = 21  # reserved
    MAX_INTENSITY = 22  # reserved

    CCT = 30
    MIN_CCT = 31  # reserved
    MAX_CCT = 32  # reserved

    COLOR = 40
    RGB = 41  # reserved
    MIN_RGB = 42  # reserved
    MAX_RGB = 43  # reserved
    HSB = 44  # reserved
    MIN_HSB = 45  # reserved
    MAX_HSB = 45  # reserved, alias of MIN_HSB
    RED = 51
    GREEN = 52
    BLUE = 53
    HUE = 54
    SATURATION = 55
    BRIGHTNESS = 56

    ALL_PARAMETERS = 60
    ALL_PARAMETERS_CCT = 61
    ALL_PARAMETERS_RGB = 62
    ALL_PARAMETERS_HSB = 63  # reserved

    @classmethod
    def reserved(cls) -> frozenset[EventKind]:
        """Kinds that are declared for listeners but never fired by any light."""
        return frozenset(
            {
                cls.TURN_OFF,
                cls.MIN_INTENSITY,
                cls.MAX_INTENSITY,
                cls.MIN_CCT,
                cls.MAX_CCT,
                cls.RGB,
                cls.MIN_RGB,
                cls.MAX_RGB,
                cls.HSB,
                cls.MIN_HSB,
                cls.ALL_PARAMETERS_HSB,
            }
        )


CCT_KINDS = frozenset({EventKind.CCT, EventKind.ALL_PARAMETERS_CCT})
COLOR_KINDS = frozenset(
    {
        EventKind.COLOR,
        EventKind.RGB,
        EventKind.MIN_RGB,
        EventKind.MAX_RGB,
        EventKind.HSB,
        EventKind.MIN_HSB,
        EventKind.RED,
        EventKind.GREEN,
        EventKind.BLUE,
        EventKind.HUE,
        EventKind.SATURATION,
        EventKind.BRIGHTNESS,
        EventKind.ALL_PARAMETERS_RGB,
        EventKind.ALL_PARAMETERS_HSB,
    }
)


@dataclass(frozen=True, init=False)
class LightEvent:
    """
    Notification that a parameter of a light changed.

    The event only holds a weak reference to its source; it is built for one
    dispatch pass and not meant to be kept. Listeners read the new values
    straight from the source light.
    """

    kind: EventKind
    _source: weakref.ReferenceType = field(repr=False)

    def __init__(self, source: Light, kind: EventKind | int):
        object.__setattr__(self, "kind", EventKind(kind))
        object.__setattr__(self, "_source", weakref.ref(source))

    @property
    def source(self) -> Light | None:
        """The light that fired this event, or None if it no longer exists."""
        return self._source()

    @property
    def light(self) -> Light:
        light = self._source()
        if light is None:
            raise ReferenceError("source light of this event no longer exists")
        return light

    @property
    def state(self) -> bool:
        return self.light.state

    @property
    def light_id(self) -> int:
        return self.light.light_id

    @property
    def intensity(self) -> int:
        return self.light.intensity

    @property
    def cct(self) -> int:
        """Color temperature of the source for CCT events, 128 otherwise."""
        if self.kind in CCT_KINDS:
            return self.light.cct
        return DEFAULT_EVENT_CCT

    @property
    def color(self) -> int:
        """Packed color of the source for color events, white otherwise."""
        if self.kind in COLOR_KINDS:
            return self.light.color
        return DEFAULT_EVENT_COLOR


@runtime_checkable
class LightListener(Protocol):
    """
    Anything that wants to hear about light changes.

    Callbacks run synchronously on the thread that mutated the light, while
    that light's registry lock is held. They must return promptly: a blocking
    listener stalls the mutator and every other listener of the light.
    """

    def light_event_received(self, event: LightEvent) -> None:
        """Handle one event."""
        ...


class ListenerRegistry:
    """
    Ordered listeners of a single light.

    Registration order is delivery order and the same listener may be added
    more than once. Mutation and dispatch share one re-entrant lock, so they
    never interleave across threads, while a listener may still touch its own
    light (or the registry) from inside a callback. Each dispatch pass walks a
    snapshot taken when it starts.
    """

    def __init__(self):
        self._listeners: list[LightListener] = []
        self._lock = threading.RLock()

    def add(self, listener: LightListener) -> None:
        if not isinstance(listener, LightListener):
            raise TypeError(f"{type(listener).__name__} does not implement light_event_received()")
        with self._lock:
            self._listeners.append(listener)

    def remove(self, listener: LightListener) -> bool:
        """Remove the first registration of listener. Returns False if it was not registered."""
        with self._lock:
            if listener not in self._listeners:
                return False
            self._listeners.remove(listener)
            return True

    def clear(self) -> None:
        with self._lock:
            self._listeners.clear()

    def snapshot(self) -> tuple[LightListener, ...]:
        with self._lock:
            return tuple(self._listeners)

    def dispatch(self, event: LightEvent) -> None:
        """Deliver event to every listener, in registration order."""
        with self._lock:
            listeners = tuple(self._listeners)
            logger.debug("Dispatching %s to %d listener(s)", event.kind.name, len(listeners))
            for listener in listeners:
                listener.light_event_received(event)

    def __len__(self) -> int:
        with self._lock:
            return len(self._listeners)

    def __contains__(self, listener: object) -> bool:
        with self._lock:
            return listener in self._listeners
