"""ili-lights library modules."""

from .cct_light import CCTLight
from .color import hsb_to_rgb, rgb_to_hsb
from .color_light import ColorLight
from .events import EventKind, LightEvent, LightListener
from .light import Light
from .serialization import from_dict, from_xml, to_dict, to_xml

__all__ = [
    "Light",
    "CCTLight",
    "ColorLight",
    "EventKind",
    "LightEvent",
    "LightListener",
    "rgb_to_hsb",
    "hsb_to_rgb",
    "to_dict",
    "from_dict",
    "to_xml",
    "from_xml",
]
