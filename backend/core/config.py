"""Provider configuration resolved once at startup."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

DEMO_API_KEY = "demo_key"
DEFAULT_API_URL = "https://api.openweathermap.org/data/2.5/weather"
DEFAULT_TIMEOUT = 5.0


@dataclass(frozen=True)
class WeatherApiConfig:
    api_key: str = DEMO_API_KEY
    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT

    @property
    def is_demo(self) -> bool:
        """True when no real provider credential is configured."""
        return self.api_key == DEMO_API_KEY

    @classmethod
    def from_settings(cls, source: Optional[Any] = None) -> "WeatherApiConfig":
        if source is None:
            from django.conf import settings

            source = settings
        return cls(
            api_key=getattr(source, "WEATHER_API_KEY", DEMO_API_KEY),
            api_url=getattr(source, "WEATHER_API_URL", DEFAULT_API_URL),
            timeout=float(getattr(source, "WEATHER_API_TIMEOUT", DEFAULT_TIMEOUT)),
        )


__all__ = ["WeatherApiConfig", "DEMO_API_KEY", "DEFAULT_API_URL", "DEFAULT_TIMEOUT"]
