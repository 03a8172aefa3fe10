from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

PLACEHOLDER = "—"


@dataclass(frozen=True)
class NormalizedObservation:
    """Display-ready snapshot of a station observation.

    Temperatures are always stored in Celsius regardless of the unit the
    station reported; the display layer converts on demand.
    """

    temperature_celsius: Optional[float]
    feels_like_celsius: Optional[float]
    description: Optional[str]
    humidity_percent: Optional[float]
    wind_text: str
    date_text: str


@dataclass(frozen=True)
class NormalizedPoint:
    """Location metadata resolved from an NWS point."""

    location_name: str
    time_zone: Optional[str]
    sunrise_text: str
    sunset_text: str
    observation_stations_url: Optional[str]


@dataclass(frozen=True)
class GeoLocation:
    latitude: float
    longitude: float
    display_name: Optional[str] = None


@dataclass(frozen=True)
class WeatherReport:
    """Everything a renderer needs for one completed search."""

    query: str
    location: GeoLocation
    station_id: str
    point: NormalizedPoint
    observation: NormalizedObservation


__all__ = [
    "PLACEHOLDER",
    "NormalizedObservation",
    "NormalizedPoint",
    "GeoLocation",
    "WeatherReport",
]
