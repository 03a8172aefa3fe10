from __future__ import annotations

import logging
from typing import Optional

from ..entities import WeatherReport
from ..normalizers import normalize_observation, normalize_point
from ..providers.base import NotFound
from ..providers.nominatim import NominatimGeocoder
from ..providers.nws import NwsClient, first_station_id


class WeatherServiceError(RuntimeError):
    """Raised when a lookup cannot produce a report."""


class LocationNotFound(WeatherServiceError):
    pass


class StationNotFound(WeatherServiceError):
    pass


class WeatherService:
    """Run the geocode -> point -> stations -> latest observation chain."""

    def __init__(
        self,
        *,
        geocoder: NominatimGeocoder,
        nws: NwsClient,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.geocoder = geocoder
        self.nws = nws
        self._log = logger or logging.getLogger(self.__class__.__name__)

    # Public API ---------------------------------------------------------
    def lookup(self, query: str) -> WeatherReport:
        query = (query or "").strip()
        if not query:
            raise ValueError("query must not be empty")

        location = self.geocoder.geocode(query)
        if location is None:
            raise LocationNotFound(f"Location not found: {query}")
        self._log.info("Resolved %r to %.4f,%.4f", query, location.latitude, location.longitude)

        try:
            raw_point = self.nws.point(location.latitude, location.longitude)
        except NotFound as exc:
            raise LocationNotFound(f"No NWS coverage for {query}") from exc
        point = normalize_point(raw_point)

        station_id = self._first_station(point.observation_stations_url)
        try:
            raw_observation = self.nws.latest_observation(station_id)
        except NotFound as exc:
            raise StationNotFound(f"No recent observation from station {station_id}") from exc
        observation = normalize_observation(raw_observation, point.time_zone)

        return WeatherReport(
            query=query,
            location=location,
            station_id=station_id,
            point=point,
            observation=observation,
        )

    # Helpers ------------------------------------------------------------
    def _first_station(self, stations_url: Optional[str]) -> str:
        if not stations_url:
            raise StationNotFound("Point has no observation stations")
        station_id = first_station_id(self.nws.stations(stations_url))
        if station_id is None:
            self._log.warning("Station list %s is empty", stations_url)
            raise StationNotFound("No observation stations near this location")
        self._log.debug("Using station %s", station_id)
        return station_id


__all__ = ["WeatherService", "WeatherServiceError", "LocationNotFound", "StationNotFound"]
