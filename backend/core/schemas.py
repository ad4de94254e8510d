"""Pydantic schemas for the OpenWeather current-weather payload.

Only the fields the service exposes are declared.  Everything else the
provider sends is ignored, so new upstream fields never break decoding.
"""
from __future__ import annotations

from typing import Any, List, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from backend.core.abstractions import Condition, WeatherRecord

__all__ = ["OpenWeatherPayload", "parse_weather_record"]


def _whole_number(value: Any) -> Any:
    if isinstance(value, float):
        return int(value)
    return value


class _Block(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class MainBlock(_Block):
    temp: float = 0.0
    feels_like: float = 0.0
    humidity: int = 0
    pressure: int = 0

    @field_validator("humidity", "pressure", mode="before")
    @classmethod
    def truncate_fraction(cls, value: Any) -> Any:
        return _whole_number(value)


class ConditionBlock(_Block):
    main: str = ""
    description: str = ""
    icon: str = ""

    def to_condition(self) -> Condition:
        return Condition(summary=self.main, description=self.description, icon_id=self.icon)


class WindBlock(_Block):
    speed: float = 0.0
    deg: int = 0

    @field_validator("deg", mode="before")
    @classmethod
    def truncate_fraction(cls, value: Any) -> Any:
        return _whole_number(value)


class SysBlock(_Block):
    country: str = ""


class OpenWeatherPayload(_Block):
    name: str = ""
    main: MainBlock = Field(default_factory=MainBlock)
    weather: List[ConditionBlock] = Field(default_factory=list)
    wind: WindBlock = Field(default_factory=WindBlock)
    sys: SysBlock = Field(default_factory=SysBlock)

    @field_validator("main", "wind", "sys", mode="before")
    @classmethod
    def null_block(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("weather", mode="before")
    @classmethod
    def null_list(cls, value: Any) -> Any:
        return [] if value is None else value

    def to_record(self) -> WeatherRecord:
        return WeatherRecord(
            location_name=self.name,
            temperature_c=self.main.temp,
            feels_like_c=self.main.feels_like,
            humidity_pct=self.main.humidity,
            pressure_hpa=self.main.pressure,
            conditions=tuple(item.to_condition() for item in self.weather),
            wind_speed_ms=self.wind.speed,
            wind_direction_deg=self.wind.deg,
            country_code=self.sys.country,
        )


def parse_weather_record(payload: Mapping[str, Any]) -> WeatherRecord:
    """Decode a provider (or cached) payload into a :class:`WeatherRecord`.

    Raises :class:`pydantic.ValidationError` when a declared field has an
    unusable value.
    """

    return OpenWeatherPayload.model_validate(payload).to_record()
