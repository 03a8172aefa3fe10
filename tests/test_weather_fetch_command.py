from __future__ import annotations

import json
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from backend.api.management.commands import weather_fetch
from weathernow.providers.base import ProviderError
from weathernow.services.weather import LocationNotFound, WeatherService

from .stubs import AUSTIN, FailingService, StubGeocoder, StubNws


@pytest.fixture
def use_service(monkeypatch):
    def install(service) -> None:
        monkeypatch.setattr(weather_fetch, "get_weather_service", lambda: service)

    return install


def test_command_prints_text_report(use_service) -> None:
    use_service(WeatherService(geocoder=StubGeocoder(AUSTIN), nws=StubNws()))
    out = StringIO()

    call_command("weather_fetch", "Austin, TX", "--units", "F", stdout=out)

    text = out.getvalue()
    assert "Austin, TX (KATT)" in text
    assert "72°F  Sunny" in text
    assert "Wind:       S 10 mph" in text


def test_command_prints_json(use_service) -> None:
    use_service(WeatherService(geocoder=StubGeocoder(AUSTIN), nws=StubNws()))
    out = StringIO()

    call_command("weather_fetch", "Austin, TX", "--json", stdout=out)

    payload = json.loads(out.getvalue())
    assert payload["station"] == "KATT"
    assert payload["display"]["temperature"] == "22°C"


@pytest.mark.parametrize("exc", [LocationNotFound("Location not found: Atlantis"), ProviderError("timeout")])
def test_command_wraps_failures(use_service, exc) -> None:
    use_service(FailingService(exc))

    with pytest.raises(CommandError):
        call_command("weather_fetch", "Atlantis", stdout=StringIO())


def test_command_rejects_unknown_units(use_service) -> None:
    use_service(WeatherService(geocoder=StubGeocoder(AUSTIN), nws=StubNws()))

    with pytest.raises(CommandError):
        call_command("weather_fetch", "Austin", "--units", "K", stdout=StringIO())
