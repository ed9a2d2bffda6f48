"""Shared pytest fixtures for ili-lights tests."""

from __future__ import annotations

import pytest

from ili_lights.cct_light import CCTLight
from ili_lights.color_light import ColorLight
from ili_lights.light import Light


class RecordingListener:
    """Listener that keeps every event and a snapshot of the source at delivery time."""

    def __init__(self):
        self.events = []
        self.intensities = []

    def light_event_received(self, event):
        self.events.append(event)
        self.intensities.append(event.intensity)

    @property
    def kinds(self):
        return [e.kind for e in self.events]


# =============================================================================
# Listener fixtures
# =============================================================================

@pytest.fixture
def listener():
    """A fresh recording listener."""
    return RecordingListener()


@pytest.fixture
def make_listener():
    """Factory for additional recording listeners."""
    return RecordingListener


# =============================================================================
# Light fixtures
# =============================================================================

@pytest.fixture
def light(listener):
    """Plain light with the recording listener attached."""
    light = Light()
    light.add_listener(listener)
    return light


@pytest.fixture
def cct_light(listener):
    """CCT light with the recording listener attached."""
    light = CCTLight()
    light.add_listener(listener)
    return light


@pytest.fixture
def color_light(listener):
    """Color light with the recording listener attached."""
    light = ColorLight()
    light.add_listener(listener)
    return light


@pytest.fixture
def config_path(tmp_path):
    """Config file location inside a temporary directory (file not created)."""
    return tmp_path / "ili-lights" / "config.json"
