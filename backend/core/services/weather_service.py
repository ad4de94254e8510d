"""Weather lookups backed by a provider and a cache."""
from __future__ import annotations

import logging
from typing import Callable

from backend.core.abstractions import WeatherProvider, WeatherRecord, WeatherService
from backend.core.cache import WeatherCache
from backend.core.errors import WeatherError


logger = logging.getLogger(__name__)


class WeatherLookupService(WeatherService):
    """Serve lookups from the cache, falling through to the provider on a miss.

    Provider errors propagate unchanged.  Concurrent misses for the same key
    each call the provider; the last successful write wins.
    """

    def __init__(self, provider: WeatherProvider, cache: WeatherCache) -> None:
        self._provider = provider
        self._cache = cache

    @property
    def cache(self) -> WeatherCache:
        return self._cache

    def get_by_city(self, city: str) -> WeatherRecord:
        return self._lookup(WeatherCache.city_key(city), lambda: self._provider.fetch_by_city(city))

    def get_by_coordinates(self, latitude: float, longitude: float) -> WeatherRecord:
        return self._lookup(
            WeatherCache.coordinates_key(latitude, longitude),
            lambda: self._provider.fetch_by_coordinates(latitude, longitude),
        )

    def _lookup(self, cache_key: str, fetch: Callable[[], WeatherRecord]) -> WeatherRecord:
        cached = self._cache.get(cache_key)
        if cached is not None:
            logger.debug("Cache hit for %s", cache_key)
            return cached

        logger.debug("Cache miss for %s, querying provider", cache_key)
        try:
            record = fetch()
        except WeatherError as exc:
            logger.warning("Weather lookup for %s failed: %s", cache_key, exc)
            raise

        self._cache.put(cache_key, record)
        return record


__all__ = ["WeatherLookupService"]
