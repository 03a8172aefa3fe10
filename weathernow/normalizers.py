"""Turn raw NWS point and observation payloads into display records.

Every field is read independently through :func:`dig`, so a missing or
malformed value degrades that single field to ``None`` or the placeholder
and never fails the whole record.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from .compass import wind_direction_to_cardinal
from .entities import PLACEHOLDER, NormalizedObservation, NormalizedPoint
from .lookup import dig, safe_float
from .timefmt import format_local_date, format_local_time
from .units import fahrenheit_to_celsius, is_fahrenheit, round_half_up


def normalize_observation(raw: Any, time_zone: Optional[str] = None) -> NormalizedObservation:
    props = _properties(raw)

    temperature = _celsius(dig(props, "temperature", "value"), dig(props, "temperature", "unitCode"))

    feels_like = dig(props, "heatIndex", "value")
    if feels_like is None:
        feels_like = dig(props, "windChill", "value")
    feels_like_unit = dig(props, "heatIndex", "unitCode") or dig(props, "windChill", "unitCode")

    description = dig(props, "textDescription")

    return NormalizedObservation(
        temperature_celsius=temperature,
        feels_like_celsius=_celsius(feels_like, feels_like_unit),
        description=description if isinstance(description, str) and description else None,
        humidity_percent=safe_float(dig(props, "relativeHumidity", "value")),
        wind_text=_wind_text(dig(props, "windSpeed", "value"), dig(props, "windDirection", "value")),
        date_text=format_local_date(dig(props, "timestamp"), time_zone),
    )


def normalize_point(raw: Any) -> NormalizedPoint:
    props = dig(raw, "properties", default={})
    city = dig(props, "relativeLocation", "properties", "city", default="")
    state = dig(props, "relativeLocation", "properties", "state", default="")
    location_name = ", ".join(str(part) for part in (city, state) if part) or "Unknown"

    time_zone = dig(props, "timeZone") or None
    sunrise = sunset = PLACEHOLDER
    astro = dig(props, "astronomicalData")
    if astro:
        sunrise = format_local_time(dig(astro, "sunrise"), time_zone)
        sunset = format_local_time(dig(astro, "sunset"), time_zone)

    return NormalizedPoint(
        location_name=location_name,
        time_zone=time_zone,
        sunrise_text=sunrise,
        sunset_text=sunset,
        observation_stations_url=dig(props, "observationStations"),
    )


# helpers ------------------------------------------------------------
def _properties(raw: Any) -> Mapping:
    # Accept both the GeoJSON feature envelope and a bare properties object.
    if not isinstance(raw, Mapping):
        return {}
    props = raw.get("properties")
    if props is None:
        return raw
    return props if isinstance(props, Mapping) else {}


def _celsius(value: Any, unit_code: Any) -> Optional[float]:
    number = safe_float(value)
    if number is None:
        return None
    if is_fahrenheit(unit_code if isinstance(unit_code, str) else None):
        return fahrenheit_to_celsius(number)
    return number


def _wind_text(speed: Any, direction: Any) -> str:
    speed_value = safe_float(speed)
    if speed_value is None:
        return PLACEHOLDER
    label = wind_direction_to_cardinal(safe_float(direction))
    if label is None and direction is not None:
        label = str(direction)
    mph = round_half_up(speed_value)
    return f"{label} {mph} mph" if label else f"{mph} mph"


__all__ = ["normalize_observation", "normalize_point"]
