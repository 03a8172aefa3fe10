"""Render a :class:`WeatherReport` for people, in either temperature unit.

Switching units only re-renders the same report; nothing is refetched or
mutated.
"""
from __future__ import annotations

from typing import Dict, Optional

from .entities import PLACEHOLDER, WeatherReport
from .units import celsius_to_fahrenheit, round_half_up

CELSIUS = "C"
FAHRENHEIT = "F"

_UNIT_ALIASES = {
    "c": CELSIUS,
    "celsius": CELSIUS,
    "metric": CELSIUS,
    "f": FAHRENHEIT,
    "fahrenheit": FAHRENHEIT,
    "imperial": FAHRENHEIT,
}


def parse_units(value: Optional[str], default: str = CELSIUS) -> str:
    if value is None or not value.strip():
        return default
    try:
        return _UNIT_ALIASES[value.strip().lower()]
    except KeyError:
        raise ValueError(f"unsupported units {value!r}; expected C or F") from None


def format_temperature(celsius: Optional[float], units: str = CELSIUS) -> str:
    if celsius is None:
        return PLACEHOLDER
    value = celsius_to_fahrenheit(celsius) if units == FAHRENHEIT else celsius
    return f"{round_half_up(value)}°{units}"


def format_humidity(percent: Optional[float]) -> str:
    if percent is None:
        return PLACEHOLDER
    return f"{round_half_up(percent)}%"


def render_report(report: WeatherReport, units: str = CELSIUS) -> Dict[str, str]:
    observation = report.observation
    point = report.point
    return {
        "location": point.location_name,
        "date": observation.date_text,
        "temperature": format_temperature(observation.temperature_celsius, units),
        "feels_like": format_temperature(observation.feels_like_celsius, units),
        "description": observation.description or PLACEHOLDER,
        "humidity": format_humidity(observation.humidity_percent),
        "wind": observation.wind_text,
        "sunrise": point.sunrise_text,
        "sunset": point.sunset_text,
        "station": report.station_id,
        "units": units,
    }


def render_text(report: WeatherReport, units: str = CELSIUS) -> str:
    view = render_report(report, units)
    lines = [
        f"{view['location']} ({view['station']})",
        view["date"],
        f"{view['temperature']}  {view['description']}",
        f"Feels like: {view['feels_like']}",
        f"Humidity:   {view['humidity']}",
        f"Wind:       {view['wind']}",
        f"Sunrise:    {view['sunrise']}",
        f"Sunset:     {view['sunset']}",
    ]
    return "\n".join(lines)


__all__ = [
    "CELSIUS",
    "FAHRENHEIT",
    "parse_units",
    "format_temperature",
    "format_humidity",
    "render_report",
    "render_text",
]
