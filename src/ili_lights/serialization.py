"""Markup and dict representations of lights.

Every light serializes to a single ``Light`` element:

    <Light type="cct" lightid="3" state="true" intensity="200"
           min_intensity="0" max_intensity="255" cct="128" min_cct="0" max_cct="255" />

``type`` is "light", "cct" or "rgb"; CCT lights add the cct fields and color
lights add ``color`` (packed 0xRRGGBB as a decimal integer). The dict form
uses the same keys with native Python values and is what the JSON config
stores.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Callable, Mapping
from functools import singledispatch
from typing import Any

from .cct_light import CCTLight
from .color_light import ColorLight
from .exceptions import SerializationError, ValidationError
from .light import Light
from .ranges import ParameterRange

ELEMENT_TAG = "Light"


@singledispatch
def to_dict(light: Light) -> dict[str, Any]:
    """Describe a light as a flat dict of its persistent parameters."""
    return _common_fields(light, Light.TYPE_TAG)


@to_dict.register
def _cct_to_dict(light: CCTLight) -> dict[str, Any]:
    data = _common_fields(light, CCTLight.TYPE_TAG)
    data["cct"] = light.cct
    data["min_cct"] = light.min_cct
    data["max_cct"] = light.max_cct
    return data


@to_dict.register
def _color_to_dict(light: ColorLight) -> dict[str, Any]:
    data = _common_fields(light, ColorLight.TYPE_TAG)
    data["color"] = light.color
    return data


def _common_fields(light: Light, type_tag: str) -> dict[str, Any]:
    return {
        "type": type_tag,
        "lightid": light.light_id,
        "state": light.state,
        "intensity": light.intensity,
        "min_intensity": light.min_intensity,
        "max_intensity": light.max_intensity,
    }


def to_element(light: Light) -> ET.Element:
    """Build the ``Light`` element for a light."""
    attributes = {key: _format_attribute(value) for key, value in to_dict(light).items()}
    return ET.Element(ELEMENT_TAG, attributes)


def to_xml(light: Light) -> str:
    return ET.tostring(to_element(light), encoding="unicode")


def _format_attribute(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def from_xml(source: str | ET.Element) -> Light:
    """
    Rebuild a light from its ``Light`` element (or the element's markup).

    Raises:
        SerializationError: Not well-formed, wrong tag or missing/invalid attributes
        ValidationError: Values outside their own ranges
    """
    if isinstance(source, str):
        try:
            element = ET.fromstring(source)
        except ET.ParseError as e:
            raise SerializationError(f"Malformed light markup: {e}") from e
    else:
        element = source

    if element.tag != ELEMENT_TAG:
        raise SerializationError(f"Expected <{ELEMENT_TAG}> element, got <{element.tag}>")
    return from_dict(element.attrib)


def from_dict(data: Mapping[str, Any]) -> Light:
    """
    Rebuild a light from its dict form. No events are fired while restoring.

    Raises:
        SerializationError: Unknown type or missing/invalid fields
        ValidationError: Values outside their own ranges
    """
    type_tag = data.get("type")
    builder = _BUILDERS.get(type_tag)
    if builder is None:
        raise SerializationError(f"Unknown light type: {type_tag!r}")
    return builder(data)


def _build_light(data: Mapping[str, Any]) -> Light:
    light = Light()
    _restore_common(light, data)
    return light


def _build_cct_light(data: Mapping[str, Any]) -> CCTLight:
    light = CCTLight()
    _restore_common(light, data)

    cct_range = _read_range(data, "min_cct", "max_cct")
    cct = _read_int(data, "cct")
    if not cct_range.contains(cct):
        raise ValidationError(f"cct {cct} outside range {cct_range}")
    light.set_min_cct(cct_range.minimum)
    light.set_max_cct(cct_range.maximum)
    light.set_cct(cct, fire_event=False)
    return light


def _build_color_light(data: Mapping[str, Any]) -> ColorLight:
    light = ColorLight()
    _restore_common(light, data)
    light.set_color(_read_int(data, "color"), fire_event=False)
    return light


_BUILDERS: dict[str, Callable[[Mapping[str, Any]], Light]] = {
    Light.TYPE_TAG: _build_light,
    CCTLight.TYPE_TAG: _build_cct_light,
    ColorLight.TYPE_TAG: _build_color_light,
}


def _restore_common(light: Light, data: Mapping[str, Any]) -> None:
    intensity_range = _read_range(data, "min_intensity", "max_intensity")
    intensity = _read_int(data, "intensity")
    if not intensity_range.contains(intensity):
        raise ValidationError(f"intensity {intensity} outside range {intensity_range}")

    light.set_range(intensity_range.minimum, intensity_range.maximum)
    light.set_intensity(intensity, fire_event=False)
    light.set_state(_read_bool(data, "state"), fire_event=False)
    light.set_light_id(_read_int(data, "lightid"))


def _read_range(data: Mapping[str, Any], min_key: str, max_key: str) -> ParameterRange:
    minimum = _read_int(data, min_key)
    maximum = _read_int(data, max_key)
    if minimum > maximum:
        raise ValidationError(f"{min_key} ({minimum}) is greater than {max_key} ({maximum})")
    return ParameterRange(minimum, maximum)


def _read_int(data: Mapping[str, Any], key: str) -> int:
    if key not in data:
        raise SerializationError(f"Missing field: {key}")
    value = data[key]
    if isinstance(value, bool):
        raise SerializationError(f"Field {key} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Field {key} must be an integer, got {value!r}") from e


def _read_bool(data: Mapping[str, Any], key: str) -> bool:
    if key not in data:
        raise SerializationError(f"Missing field: {key}")
    value = data[key]
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ("true", "false"):
        return value.lower() == "true"
    raise SerializationError(f"Field {key} must be a boolean, got {value!r}")
