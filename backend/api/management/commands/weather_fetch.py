"""Management command to fetch weather using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from backend.api.views import get_lookup_service
from backend.core.errors import WeatherError


class Command(BaseCommand):
    help = "Fetch current weather for a city or for the provided coordinates"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--city", type=str, help="City name")
        parser.add_argument("--lat", type=float, help="Latitude")
        parser.add_argument("--lon", type=float, help="Longitude")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        city = options.get("city")
        latitude = options.get("lat")
        longitude = options.get("lon")
        service = get_lookup_service()

        try:
            if city:
                record = service.get_by_city(city)
            else:
                if latitude is None or longitude is None:
                    raise CommandError("--lat and --lon are required unless --city is given")
                record = service.get_by_coordinates(latitude, longitude)
        except WeatherError as exc:
            raise CommandError(str(exc)) from exc

        self.stdout.write(json.dumps(record.to_payload()))
