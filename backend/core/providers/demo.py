"""Synthetic records served when no provider credential is configured."""
from __future__ import annotations

from backend.core.abstractions import Condition, WeatherRecord


def demo_city_record(city: str) -> WeatherRecord:
    return WeatherRecord(
        location_name=city,
        temperature_c=22.5,
        feels_like_c=24.0,
        humidity_pct=65,
        pressure_hpa=1013,
        conditions=(Condition(summary="Clear", description="clear sky", icon_id="01d"),),
        wind_speed_ms=3.5,
        wind_direction_deg=180,
        country_code="Demo",
    )


def demo_coordinates_record(latitude: float, longitude: float) -> WeatherRecord:
    return WeatherRecord(
        location_name=f"Location ({latitude}, {longitude})",
        temperature_c=20.0,
        feels_like_c=21.5,
        humidity_pct=70,
        pressure_hpa=1015,
        conditions=(Condition(summary="Clouds", description="scattered clouds", icon_id="03d"),),
        wind_speed_ms=2.8,
        wind_direction_deg=220,
        country_code="Demo",
    )


__all__ = ["demo_city_record", "demo_coordinates_record"]
