"""OpenWeather weather provider."""
from __future__ import annotations

import logging

from backend.core.abstractions import WeatherRecord, WeatherProvider
from backend.core.errors import CityNotFoundError, InvalidCoordinatesError
from backend.core.providers.base import HttpWeatherProvider
from backend.core.providers.demo import demo_city_record, demo_coordinates_record


logger = logging.getLogger(__name__)


class OpenWeatherProvider(HttpWeatherProvider, WeatherProvider):
    """Integration with the OpenWeather current weather endpoint.

    With the demo API key no request is sent and fixed synthetic records are
    returned instead.
    """

    def fetch_by_city(self, city: str) -> WeatherRecord:
        if self.config.is_demo:
            logger.debug("Demo key configured, serving synthetic weather for %s", city)
            return demo_city_record(city)
        return self._request(
            {"q": city},
            client_error=lambda exc: CityNotFoundError(city, cause=exc),
        )

    def fetch_by_coordinates(self, latitude: float, longitude: float) -> WeatherRecord:
        if self.config.is_demo:
            logger.debug("Demo key configured, serving synthetic weather for (%s, %s)", latitude, longitude)
            return demo_coordinates_record(latitude, longitude)
        return self._request(
            {"lat": latitude, "lon": longitude},
            client_error=lambda exc: InvalidCoordinatesError(cause=exc),
        )


__all__ = ["OpenWeatherProvider"]
