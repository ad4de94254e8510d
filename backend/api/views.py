"""REST API views for weather information."""
from __future__ import annotations

import math
from functools import lru_cache
from typing import Optional

from django.conf import settings
from django.core.cache import caches
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from backend.core.cache import WeatherCache
from backend.core.config import WeatherApiConfig
from backend.core.errors import InvalidCoordinatesError, WeatherError
from backend.core.providers.openweather import OpenWeatherProvider
from backend.core.services.weather_service import WeatherLookupService


@lru_cache(maxsize=1)
def get_lookup_service() -> WeatherLookupService:
    cache = WeatherCache(
        caches[settings.WEATHER_CACHE_ALIAS],
        timeout=settings.WEATHER_CACHE_TIMEOUT,
    )
    provider = OpenWeatherProvider(WeatherApiConfig.from_settings(settings))
    return WeatherLookupService(provider=provider, cache=cache)


def _parse_coordinate(raw_value: Optional[str], name: str, limit: float) -> float:
    if raw_value is None:
        raise InvalidCoordinatesError(f"Missing {name} query parameter")
    try:
        value = float(raw_value)
    except ValueError as exc:
        raise InvalidCoordinatesError(f"{name} must be a valid floating point number", cause=exc) from exc
    if not math.isfinite(value) or not -limit <= value <= limit:
        raise InvalidCoordinatesError(f"{name} must be between {-limit:g} and {limit:g}")
    return value


class CityWeatherView(APIView):
    """Current weather for a city name."""

    permission_classes = [AllowAny]

    def get(self, request, city: str, *args, **kwargs):  # noqa: D401
        try:
            record = get_lookup_service().get_by_city(city)
        except WeatherError as exc:
            return Response({"error": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        return Response(record.to_payload(), status=status.HTTP_200_OK)


class CoordinatesWeatherView(APIView):
    """Current weather for a latitude/longitude pair."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        try:
            latitude = _parse_coordinate(request.query_params.get("lat"), "lat", 90.0)
            longitude = _parse_coordinate(request.query_params.get("lon"), "lon", 180.0)
            record = get_lookup_service().get_by_coordinates(latitude, longitude)
        except WeatherError as exc:
            return Response({"error": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        return Response(record.to_payload(), status=status.HTTP_200_OK)


class HealthView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        return Response({"status": "UP", "service": "Weather API"}, status=status.HTTP_200_OK)
