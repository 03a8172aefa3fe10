"""REST API views for current weather conditions."""
from __future__ import annotations

from dataclasses import asdict
from functools import lru_cache
from typing import Any, Dict

from django.conf import settings
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from weathernow.display import parse_units, render_report
from weathernow.entities import WeatherReport
from weathernow.providers.base import ProviderError, RequestConfig
from weathernow.providers.nominatim import NominatimGeocoder
from weathernow.providers.nws import NwsClient
from weathernow.services.weather import LocationNotFound, StationNotFound, WeatherService


@lru_cache(maxsize=1)
def get_weather_service() -> WeatherService:
    request_config = RequestConfig(
        timeout=settings.WEATHER_HTTP_TIMEOUT,
        retries=settings.WEATHER_HTTP_RETRIES,
    )
    shared = {"request_config": request_config, "user_agent": settings.WEATHER_USER_AGENT}
    return WeatherService(
        geocoder=NominatimGeocoder(base_url=settings.GEOCODER_URL, **shared),
        nws=NwsClient(base_url=settings.NWS_BASE_URL, **shared),
    )


def serialize_report(report: WeatherReport, units: str) -> Dict[str, Any]:
    return {
        "query": report.query,
        "latitude": report.location.latitude,
        "longitude": report.location.longitude,
        "station": report.station_id,
        "units": units,
        "display": render_report(report, units),
        "observation": asdict(report.observation),
        "point": asdict(report.point),
    }


class WeatherView(APIView):
    """Look up current conditions for a place name."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return the rendered report for ``?q=<place>&units=C|F``."""
        query = (request.query_params.get("q") or "").strip()
        if not query:
            return Response({"detail": "q query parameter is required"}, status=status.HTTP_400_BAD_REQUEST)
        try:
            units = parse_units(request.query_params.get("units"), default=settings.WEATHER_DEFAULT_UNITS)
        except ValueError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            report = get_weather_service().lookup(query)
        except (LocationNotFound, StationNotFound) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except ProviderError as exc:
            return Response({"detail": f"Weather provider failed: {exc}"}, status=status.HTTP_502_BAD_GATEWAY)

        return Response(serialize_report(report, units), status=status.HTTP_200_OK)
