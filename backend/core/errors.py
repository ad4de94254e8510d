"""Errors raised by weather lookups."""
from __future__ import annotations

from typing import Optional


class WeatherError(RuntimeError):
    """Base error for a failed lookup; scoped to a single request."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class CityNotFoundError(WeatherError):
    """The provider does not recognise the requested city."""

    def __init__(self, city: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(f"City not found: {city}", cause)
        self.city = city


class InvalidCoordinatesError(WeatherError):
    """The coordinates were rejected, either locally or by the provider."""

    def __init__(
        self,
        message: str = "Invalid coordinates",
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message, cause)


class FetchError(WeatherError):
    """Network, decoding or server-side failure while talking to the provider."""

    def __init__(self, cause: Optional[BaseException] = None) -> None:
        super().__init__("Error fetching weather data", cause)


__all__ = ["WeatherError", "CityNotFoundError", "InvalidCoordinatesError", "FetchError"]
