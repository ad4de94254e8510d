"""API URL configuration."""
from __future__ import annotations

from django.urls import path

from backend.api.views import CityWeatherView, CoordinatesWeatherView, HealthView

urlpatterns = [
    path("city/<str:city>", CityWeatherView.as_view(), name="weather-city"),
    path("coordinates", CoordinatesWeatherView.as_view(), name="weather-coordinates"),
    path("health", HealthView.as_view(), name="weather-health"),
]
