"""Root URL configuration.

Only the weather API and the front-end allow-list are routed; every other
path is answered with 404.
"""
from __future__ import annotations

import re

from django.urls import include, path, re_path

from backend.web.views import FRONTEND_FILES, frontend_asset

_frontend_files = "|".join(re.escape(name) for name in sorted(FRONTEND_FILES))

urlpatterns = [
    path("api/weather/", include("backend.api.urls")),
    path("", frontend_asset, {"path": "index.html"}, name="frontend-index"),
    re_path(rf"^(?P<path>{_frontend_files})$", frontend_asset, name="frontend-file"),
    re_path(r"^(?P<path>static/.+)$", frontend_asset, name="frontend-static"),
]
