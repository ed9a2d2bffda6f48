"""End-to-end scenarios: lights driving listeners the way a sketch or device bridge would."""

from __future__ import annotations

import threading

from ili_lights.cct_light import CCTLight
from ili_lights.color_light import ColorLight
from ili_lights.events import EventKind
from ili_lights.light import Light
from ili_lights.serialization import from_xml, to_xml


class MirrorListener:
    """Keeps a serialized copy of every light it hears from, keyed by light id."""

    def __init__(self):
        self.mirror: dict[int, str] = {}

    def light_event_received(self, event):
        self.mirror[event.light_id] = to_xml(event.light)


class ExclusiveListener:
    """Counts deliveries and records any that overlap in time."""

    def __init__(self):
        self._busy = False
        self.count = 0
        self.overlaps = 0

    def light_event_received(self, event):
        if self._busy:
            self.overlaps += 1
        self._busy = True
        self.count += 1
        self._busy = False


class TestMirroring:
    def test_mirror_tracks_rig(self):
        """A bridge listener can rebuild every light from the events it received."""
        mirror = MirrorListener()
        rig = [Light(), CCTLight(), ColorLight()]
        for idx, light in enumerate(rig, start=1):
            light.set_light_id(idx)
            light.add_listener(mirror)

        rig[0].set_parameters(False, 30)
        rig[1].set_cct(10)
        rig[2].set_color(0x00FF00)

        assert set(mirror.mirror) == {1, 2, 3}
        restored = {lid: from_xml(xml) for lid, xml in mirror.mirror.items()}
        assert restored[1].is_off and restored[1].intensity == 30
        assert restored[2].cct == 10
        assert restored[3].color == 0x00FF00

    def test_one_listener_on_many_lights(self, listener):
        lights = [Light() for _ in range(3)]
        for light in lights:
            light.add_listener(listener)
        for light in lights:
            light.turn_off()
        assert [e.source for e in listener.events] == lights
        assert listener.kinds == [EventKind.STATE] * 3

    def test_reserved_kinds_never_emitted(self, make_listener):
        """Driving every operation never produces a reserved kind."""
        recorder = make_listener()
        light = CCTLight()
        color = ColorLight()
        light.add_listener(recorder)
        color.add_listener(recorder)

        light.set_intensity(10)
        light.set_state(False)
        light.turn_on()
        light.turn_off()
        light.set_cct(3)
        light.set_range_cct(0, 1000)
        light.set_parameters(True, 5, 7)
        color.set_red(1)
        color.set_hue(50)
        color.set_color(0x112233)
        color.set_parameters(True, 4, 0x445566)

        assert recorder.events
        assert not set(recorder.kinds) & EventKind.reserved()


class TestConcurrency:
    def test_dispatch_passes_do_not_interleave(self):
        light = Light()
        exclusive = ExclusiveListener()
        light.add_listener(exclusive)

        def toggle(on):
            for _ in range(500):
                light.set_state(on)

        threads = [threading.Thread(target=toggle, args=(flag,)) for flag in (True, False)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert exclusive.count == 1000
        assert exclusive.overlaps == 0

    def test_lights_do_not_share_a_lock(self):
        """A listener blocked inside one light's dispatch does not stall another light."""
        first, second = Light(), Light()
        entered = threading.Event()
        release = threading.Event()

        class Blocker:
            def light_event_received(self, event):
                entered.set()
                release.wait(timeout=5)

        first.add_listener(Blocker())
        worker = threading.Thread(target=first.turn_off)
        worker.start()
        try:
            assert entered.wait(timeout=5)
            finished = threading.Event()

            class Flag:
                def light_event_received(self, event):
                    finished.set()

            second.add_listener(Flag())
            second.turn_off()
            assert finished.is_set()
        finally:
            release.set()
            worker.join()
