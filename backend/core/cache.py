from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import quote

from django.core.cache.backends.base import BaseCache
from pydantic import ValidationError

from backend.core.abstractions import WeatherRecord
from backend.core.schemas import parse_weather_record


logger = logging.getLogger(__name__)


def _fixed(value: float) -> str:
    text = f"{value:.4f}"
    return "0.0000" if text == "-0.0000" else text


class WeatherCache:
    """Store weather records in a Django cache backend.

    Records are kept as provider-shaped payloads so any backend that can
    pickle a dict (local memory, Redis) works.  ``timeout=None`` keeps entries
    until :meth:`clear` is called.
    """

    def __init__(self, backend: BaseCache, timeout: Optional[float] = None) -> None:
        self._backend = backend
        self._timeout = timeout

    @staticmethod
    def city_key(city: str) -> str:
        return f"weather:city:{quote(city.strip(), safe='')}"

    @staticmethod
    def coordinates_key(latitude: float, longitude: float) -> str:
        return f"weather:coords:{_fixed(latitude)}:{_fixed(longitude)}"

    def get(self, key: str) -> Optional[WeatherRecord]:
        payload = self._backend.get(key)
        if payload is None:
            return None
        try:
            return parse_weather_record(payload)
        except ValidationError:
            logger.warning("Discarding unreadable cache entry %s", key, exc_info=True)
            self._backend.delete(key)
            return None

    def put(self, key: str, record: WeatherRecord) -> None:
        self._backend.set(key, record.to_payload(), timeout=self._timeout)

    def clear(self) -> None:
        self._backend.clear()


__all__ = ["WeatherCache"]
