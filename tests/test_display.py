from __future__ import annotations

import pytest

from weathernow.display import (
    CELSIUS,
    FAHRENHEIT,
    format_humidity,
    format_temperature,
    parse_units,
    render_report,
    render_text,
)
from weathernow.entities import PLACEHOLDER, GeoLocation, NormalizedObservation, NormalizedPoint, WeatherReport


def make_report(**observation_overrides) -> WeatherReport:
    observation = dict(
        temperature_celsius=20.0,
        feels_like_celsius=None,
        description="Clear",
        humidity_percent=64.6,
        wind_text="W 10 mph",
        date_text="Wed, Feb 12, 2025",
    )
    observation.update(observation_overrides)
    return WeatherReport(
        query="Austin, TX",
        location=GeoLocation(latitude=30.27, longitude=-97.74),
        station_id="KATT",
        point=NormalizedPoint(
            location_name="Austin, TX",
            time_zone="America/Chicago",
            sunrise_text="7:12 AM",
            sunset_text="6:20 PM",
            observation_stations_url="https://api.weather.gov/gridpoints/EWX/156,91/stations",
        ),
        observation=NormalizedObservation(**observation),
    )


@pytest.mark.parametrize("value, expected", [
    (None, CELSIUS),
    ("", CELSIUS),
    ("c", CELSIUS),
    ("F", FAHRENHEIT),
    (" fahrenheit ", FAHRENHEIT),
    ("imperial", FAHRENHEIT),
])
def test_parse_units(value, expected) -> None:
    assert parse_units(value) == expected


def test_parse_units_uses_supplied_default() -> None:
    assert parse_units(None, default=FAHRENHEIT) == FAHRENHEIT


def test_parse_units_rejects_unknown() -> None:
    with pytest.raises(ValueError):
        parse_units("kelvin")


def test_format_temperature() -> None:
    assert format_temperature(20.0, CELSIUS) == "20°C"
    assert format_temperature(20.0, FAHRENHEIT) == "68°F"
    assert format_temperature(22.5, CELSIUS) == "23°C"
    assert format_temperature(None, FAHRENHEIT) == PLACEHOLDER


def test_format_humidity() -> None:
    assert format_humidity(64.6) == "65%"
    assert format_humidity(None) == PLACEHOLDER


def test_unit_toggle_rerenders_same_report() -> None:
    report = make_report()

    celsius = render_report(report, CELSIUS)
    fahrenheit = render_report(report, FAHRENHEIT)

    assert celsius["temperature"] == "20°C"
    assert fahrenheit["temperature"] == "68°F"
    assert celsius["wind"] == fahrenheit["wind"] == "W 10 mph"
    assert report.observation.temperature_celsius == 20.0


def test_render_report_fills_placeholders() -> None:
    view = render_report(make_report(description=None, humidity_percent=None))

    assert view["feels_like"] == PLACEHOLDER
    assert view["description"] == PLACEHOLDER
    assert view["humidity"] == PLACEHOLDER
    assert view["station"] == "KATT"
    assert view["units"] == CELSIUS


def test_render_text() -> None:
    text = render_text(make_report(), FAHRENHEIT)

    assert text.splitlines()[0] == "Austin, TX (KATT)"
    assert "68°F  Clear" in text
    assert "Sunset:     6:20 PM" in text
