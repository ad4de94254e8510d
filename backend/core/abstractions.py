"""Core abstractions for the weather domain."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Protocol, Tuple


@dataclass(frozen=True, slots=True)
class Condition:
    """A single weather condition reported for an observation."""

    summary: str
    description: str
    icon_id: str


@dataclass(frozen=True, slots=True)
class WeatherRecord:
    """Normalized current-weather observation.

    Values use the provider's metric units:
    - temperature in Celsius
    - pressure in hectopascal (hPa)
    - wind speed in metres per second (m/s), direction in degrees
    """

    location_name: str
    temperature_c: float
    feels_like_c: float
    humidity_pct: int
    pressure_hpa: int
    conditions: Tuple[Condition, ...]
    wind_speed_ms: float
    wind_direction_deg: int
    country_code: str

    def is_valid(self) -> bool:
        return len(self.conditions) > 0

    def to_payload(self) -> Dict[str, Any]:
        """Render the record using the provider's field names."""
        return {
            "name": self.location_name,
            "main": {
                "temp": self.temperature_c,
                "feels_like": self.feels_like_c,
                "humidity": self.humidity_pct,
                "pressure": self.pressure_hpa,
            },
            "weather": [
                {"main": item.summary, "description": item.description, "icon": item.icon_id}
                for item in self.conditions
            ],
            "wind": {"speed": self.wind_speed_ms, "deg": self.wind_direction_deg},
            "sys": {"country": self.country_code},
        }


class WeatherProvider(Protocol):
    """A data source capable of returning current weather."""

    def fetch_by_city(self, city: str) -> WeatherRecord:
        """Fetch the current weather for a city name."""
        ...

    def fetch_by_coordinates(self, latitude: float, longitude: float) -> WeatherRecord:
        """Fetch the current weather for the provided coordinates."""
        ...


class WeatherService(Protocol):
    """High level service that exposes weather information to the API layer."""

    def get_by_city(self, city: str) -> WeatherRecord:
        ...

    def get_by_coordinates(self, latitude: float, longitude: float) -> WeatherRecord:
        ...


__all__ = ["Condition", "WeatherRecord", "WeatherProvider", "WeatherService"]
