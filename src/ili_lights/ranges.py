"""Bounded integer ranges shared by every numeric light parameter."""

from __future__ import annotations

from dataclasses import dataclass, replace


def constrain(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high] (low wins when the bounds are inverted)."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def map_range(value: float, start1: float, stop1: float, start2: float, stop2: float) -> float:
    """
    Re-map a value from one range into another.

    The result is not clamped, so values outside [start1, stop1] land outside
    [start2, stop2]. A zero-width source range maps everything to start2.
    """
    if stop1 == start1:
        return float(start2)
    return start2 + (stop2 - start2) * ((value - start1) / (stop1 - start1))


@dataclass(frozen=True)
class ParameterRange:
    """
    Inclusive [minimum, maximum] bounds of a light parameter.

    Bounds are stored as given; nothing checks that minimum <= maximum.
    """

    minimum: int = 0
    maximum: int = 255

    def contains(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum

    def clamp(self, value: int) -> int:
        return int(constrain(value, self.minimum, self.maximum))

    def rescale(self, value: int, target: ParameterRange) -> int:
        """Move value to the same relative position inside target (truncated)."""
        return int(map_range(value, self.minimum, self.maximum, target.minimum, target.maximum))

    def with_minimum(self, minimum: int) -> ParameterRange:
        return replace(self, minimum=minimum)

    def with_maximum(self, maximum: int) -> ParameterRange:
        return replace(self, maximum=maximum)

    def __str__(self) -> str:
        return f"{self.minimum}-{self.maximum}"
