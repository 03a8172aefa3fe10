from __future__ import annotations

from typing import Any, Dict, Optional

from .base import HttpProvider
from ..lookup import dig

GEO_JSON = "application/geo+json"


class NwsClient(HttpProvider):
    """Thin client for the api.weather.gov resources the lookup chain needs."""

    base_url = "https://api.weather.gov"

    def __init__(self, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = (base_url or self.base_url).rstrip("/")

    def point(self, latitude: float, longitude: float) -> Dict[str, Any]:
        url = f"{self.base_url}/points/{format_coordinate(latitude)},{format_coordinate(longitude)}"
        return self._get_geojson(url)

    def stations(self, stations_url: str) -> Dict[str, Any]:
        return self._get_geojson(stations_url)

    def latest_observation(self, station_id: str) -> Dict[str, Any]:
        url = f"{self.base_url}/stations/{station_id}/observations/latest"
        return self._get_geojson(url)

    def _get_geojson(self, url: str) -> Dict[str, Any]:
        data = self._get_json(url, headers={"Accept": GEO_JSON})
        if not isinstance(data, dict):
            self._log.warning("Unexpected payload type %s from %s", type(data).__name__, url)
            return {}
        return data


def format_coordinate(value: float) -> str:
    """NWS rejects more than four decimal places."""
    return f"{round(value, 4):.4f}".rstrip("0").rstrip(".")


def first_station_id(payload: Any) -> Optional[str]:
    features = dig(payload, "features")
    if not isinstance(features, list) or not features:
        return None
    station_id = dig(features[0], "properties", "stationIdentifier")
    return station_id or None


__all__ = ["NwsClient", "first_station_id", "format_coordinate"]
