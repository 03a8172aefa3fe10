"""Management command to look up weather using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from backend.api.views import get_weather_service, serialize_report
from weathernow.display import parse_units, render_text
from weathernow.providers.base import ProviderError
from weathernow.services.weather import WeatherServiceError


class Command(BaseCommand):
    help = "Show current weather conditions for a place name"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("place", type=str, help="Place name, e.g. 'Austin, TX'")
        parser.add_argument("--units", type=str, default=None, help="C or F")
        parser.add_argument("--json", action="store_true", help="Print the API payload instead of text")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        try:
            units = parse_units(options.get("units"), default=settings.WEATHER_DEFAULT_UNITS)
        except ValueError as exc:
            raise CommandError(str(exc)) from exc

        try:
            report = get_weather_service().lookup(options["place"])
        except ValueError as exc:
            raise CommandError(str(exc)) from exc
        except WeatherServiceError as exc:
            raise CommandError(str(exc)) from exc
        except ProviderError as exc:
            raise CommandError(f"Weather provider failed: {exc}") from exc

        if options.get("json"):
            self.stdout.write(json.dumps(serialize_report(report, units), ensure_ascii=False))
        else:
            self.stdout.write(render_text(report, units))
