"""Base Django settings for the weather service."""
from __future__ import annotations

from pathlib import Path
import os

from django.core.exceptions import ImproperlyConfigured

BASE_DIR = Path(__file__).resolve().parent.parent


def env(name: str, default: str | None = None) -> str:
    """Fetch environment variables while allowing explicit defaults."""

    value = os.environ.get(name, default)
    if value is None:
        raise ImproperlyConfigured(f"Environment variable {name} is required")
    return value


def optional_float(name: str) -> float | None:
    value = os.environ.get(name)
    if value in (None, ""):
        return None
    try:
        return float(value)
    except ValueError as exc:
        raise ImproperlyConfigured(f"Environment variable {name} must be a number") from exc


SECRET_KEY = env("DJANGO_SECRET_KEY")
DEBUG = os.environ.get("DJANGO_DEBUG", "0") == "1"
ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "*").split(",")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "backend.api",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "backend.api.middleware.ApiCorsMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "backend.urls"

WSGI_APPLICATION = "backend.wsgi.application"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# No persisted state; Django falls back to its dummy database backend.
DATABASES: dict = {}

# Weather provider ---------------------------------------------------------
WEATHER_API_KEY = env("WEATHER_API_KEY", "demo_key")
WEATHER_API_URL = env("WEATHER_API_URL", "https://api.openweathermap.org/data/2.5/weather")
WEATHER_API_TIMEOUT = float(env("WEATHER_API_TIMEOUT", "5.0"))

# Weather cache ------------------------------------------------------------
WEATHER_CACHE_ALIAS = os.environ.get("WEATHER_CACHE_ALIAS", "weather")
# None keeps records until the cache is cleared.
WEATHER_CACHE_TIMEOUT = optional_float("WEATHER_CACHE_TIMEOUT")

REDIS_URL = os.environ.get("REDIS_URL")
if REDIS_URL:
    WEATHER_CACHE_BACKEND = {
        "BACKEND": "django_redis.cache.RedisCache",
        "LOCATION": REDIS_URL,
        "KEY_PREFIX": "weather-api",
        "OPTIONS": {
            "CLIENT_CLASS": "django_redis.client.DefaultClient",
        },
    }
else:
    WEATHER_CACHE_BACKEND = {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "weather-records",
        "OPTIONS": {"MAX_ENTRIES": 10000},
    }

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "weather-default",
    },
    WEATHER_CACHE_ALIAS: WEATHER_CACHE_BACKEND,
}

# HTTP surface -------------------------------------------------------------
API_CORS_PATH_PREFIX = "/api/"
API_CORS_ALLOW_ORIGIN = os.environ.get("API_CORS_ALLOW_ORIGIN", "*")

FRONTEND_BUILD_DIR = Path(os.environ.get("FRONTEND_BUILD_DIR", str(BASE_DIR / "frontend" / "build")))

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "UNAUTHENTICATED_USER": None,
}

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "console": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "console"},
    },
    "root": {"handlers": ["console"], "level": LOG_LEVEL},
    "loggers": {
        "django": {"handlers": ["console"], "level": "INFO", "propagate": False},
    },
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"
