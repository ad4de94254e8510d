from __future__ import annotations

import os

import django
import pytest
import requests_mock as requests_mock_lib


os.environ.setdefault("DJANGO_SECRET_KEY", "test-secret")
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "backend.settings")
# Tests must never reach the real provider or a shared Redis.
os.environ["WEATHER_API_KEY"] = "demo_key"
os.environ.pop("REDIS_URL", None)
os.environ.pop("WEATHER_CACHE_TIMEOUT", None)

django.setup()


@pytest.fixture()
def requests_mock():
    with requests_mock_lib.Mocker() as mocker:
        yield mocker


@pytest.fixture(autouse=True)
def fresh_weather_cache():
    from django.conf import settings
    from django.core.cache import caches

    from backend.api.views import get_lookup_service

    caches[settings.WEATHER_CACHE_ALIAS].clear()
    get_lookup_service.cache_clear()
    yield
    caches[settings.WEATHER_CACHE_ALIAS].clear()
    get_lookup_service.cache_clear()
