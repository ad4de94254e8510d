from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, Optional

import requests
from pydantic import ValidationError
from requests import Response

from backend.core.abstractions import WeatherRecord
from backend.core.config import WeatherApiConfig
from backend.core.errors import FetchError, WeatherError
from backend.core.schemas import parse_weather_record


class HttpWeatherProvider:
    """Base class that adds timeouts and error mapping for HTTP providers."""

    def __init__(
        self,
        config: WeatherApiConfig,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()
        self.call_count = 0
        self._count_lock = threading.Lock()
        self._log = logging.getLogger(self.__class__.__name__)

    def _request(
        self,
        params: Dict[str, Any],
        client_error: Callable[[requests.HTTPError], WeatherError],
    ) -> WeatherRecord:
        with self._count_lock:
            self.call_count += 1
        query = dict(params, appid=self.config.api_key, units="metric")
        try:
            response = self.session.get(self.config.api_url, params=query, timeout=self.config.timeout)
        except requests.Timeout as exc:
            self._log.error("Request timed out after %ss", self.config.timeout, exc_info=exc)
            raise FetchError(exc) from exc
        except requests.RequestException as exc:
            self._log.error("Request failed", exc_info=exc)
            raise FetchError(exc) from exc
        self._handle_response(response, client_error)
        return self._decode(response)

    def _handle_response(
        self,
        response: Response,
        client_error: Callable[[requests.HTTPError], WeatherError],
    ) -> None:
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            if 400 <= response.status_code < 500:
                self._log.warning("Provider rejected request with %s: %s", response.status_code, response.text[:200])
                raise client_error(exc) from exc
            self._log.error("Provider returned %s: %s", response.status_code, response.text[:200])
            raise FetchError(exc) from exc

    def _decode(self, response: Response) -> WeatherRecord:
        try:
            record = parse_weather_record(response.json())
        except (ValueError, TypeError, ValidationError) as exc:
            self._log.error("Could not decode provider payload", exc_info=exc)
            raise FetchError(exc) from exc
        if not record.is_valid():
            self._log.error("Provider payload has no weather conditions")
            raise FetchError()
        return record


__all__ = ["HttpWeatherProvider"]
