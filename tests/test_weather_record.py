from __future__ import annotations

import pytest
from pydantic import ValidationError

from backend.core.abstractions import Condition, WeatherRecord
from backend.core.providers.demo import demo_city_record
from backend.core.schemas import parse_weather_record


def test_decoding_ignores_unknown_fields(london_payload) -> None:
    london_payload["brand_new_field"] = {"nested": [1, 2, 3]}
    london_payload["main"]["sea_level"] = 1019

    record = parse_weather_record(london_payload)

    assert record == WeatherRecord(
        location_name="London",
        temperature_c=14.2,
        feels_like_c=13.6,
        humidity_pct=77,
        pressure_hpa=1019,
        conditions=(Condition(summary="Clouds", description="broken clouds", icon_id="04d"),),
        wind_speed_ms=4.12,
        wind_direction_deg=250,
        country_code="GB",
    )
    assert record.is_valid()


def test_decoding_tolerates_missing_and_null_blocks() -> None:
    record = parse_weather_record({"name": "Nowhere", "main": None, "weather": None})

    assert record.location_name == "Nowhere"
    assert record.temperature_c == 0.0
    assert record.country_code == ""
    assert record.conditions == ()
    assert not record.is_valid()


def test_decoding_truncates_fractional_integers() -> None:
    record = parse_weather_record(
        {"main": {"humidity": 64.0, "pressure": 1012.7}, "wind": {"deg": 179.9}, "weather": [{"main": "Rain"}]}
    )

    assert record.humidity_pct == 64
    assert record.pressure_hpa == 1012
    assert record.wind_direction_deg == 179


def test_decoding_rejects_unusable_values() -> None:
    with pytest.raises(ValidationError):
        parse_weather_record({"main": {"temp": "warm"}})


def test_payload_uses_provider_field_names() -> None:
    payload = demo_city_record("Paris").to_payload()

    assert payload == {
        "name": "Paris",
        "main": {"temp": 22.5, "feels_like": 24.0, "humidity": 65, "pressure": 1013},
        "weather": [{"main": "Clear", "description": "clear sky", "icon": "01d"}],
        "wind": {"speed": 3.5, "deg": 180},
        "sys": {"country": "Demo"},
    }
    assert parse_weather_record(payload) == demo_city_record("Paris")


def test_records_are_immutable() -> None:
    record = demo_city_record("Paris")

    with pytest.raises(AttributeError):
        record.location_name = "Lyon"  # type: ignore[misc]
