from __future__ import annotations

from typing import Any, Optional

from .base import HttpProvider
from ..entities import GeoLocation
from ..lookup import safe_float


class NominatimGeocoder(HttpProvider):
    """Resolve free-text place names through OpenStreetMap Nominatim."""

    base_url = "https://nominatim.openstreetmap.org/search"

    def __init__(self, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = base_url or self.base_url

    def geocode(self, query: str) -> Optional[GeoLocation]:
        params = {"q": query, "format": "json", "limit": 1}
        data = self._get_json(self.base_url, params=params)
        location = parse_geocode_results(data)
        if location is None:
            self._log.info("No geocoding match for %r", query)
        return location


def parse_geocode_results(data: Any) -> Optional[GeoLocation]:
    """Return the first candidate when its coordinates are usable."""
    if not isinstance(data, list) or not data:
        return None
    first = data[0]
    if not isinstance(first, dict):
        return None
    latitude = safe_float(first.get("lat"))
    longitude = safe_float(first.get("lon"))
    if latitude is None or longitude is None:
        return None
    if not (-90 <= latitude <= 90 and -180 <= longitude <= 180):
        return None
    return GeoLocation(latitude=latitude, longitude=longitude, display_name=first.get("display_name"))


__all__ = ["NominatimGeocoder", "parse_geocode_results"]
