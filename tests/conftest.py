from __future__ import annotations

from typing import Any, Dict

import pytest

from backend.core.config import WeatherApiConfig

API_URL = "https://owm.test/data/2.5/weather"


@pytest.fixture
def live_config() -> WeatherApiConfig:
    return WeatherApiConfig(api_key="secret-key", api_url=API_URL, timeout=2.0)


@pytest.fixture
def demo_config() -> WeatherApiConfig:
    return WeatherApiConfig()


@pytest.fixture
def london_payload() -> Dict[str, Any]:
    return {
        "coord": {"lon": -0.1257, "lat": 51.5085},
        "weather": [{"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04d"}],
        "base": "stations",
        "main": {
            "temp": 14.2,
            "feels_like": 13.6,
            "temp_min": 12.9,
            "temp_max": 15.3,
            "pressure": 1019,
            "humidity": 77,
        },
        "visibility": 10000,
        "wind": {"speed": 4.12, "deg": 250, "gust": 7.2},
        "clouds": {"all": 75},
        "dt": 1697710000,
        "sys": {"type": 2, "id": 2075535, "country": "GB", "sunrise": 1697697000, "sunset": 1697734000},
        "timezone": 3600,
        "id": 2643743,
        "name": "London",
        "cod": 200,
    }
