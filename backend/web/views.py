"""Serve the bundled React build for a fixed set of paths."""
from __future__ import annotations

import posixpath

from django.conf import settings
from django.http import Http404
from django.views.decorators.http import require_safe
from django.views.static import serve

FRONTEND_FILES = frozenset(
    {"index.html", "favicon.ico", "manifest.json", "logo192.png", "logo512.png"}
)


def is_allowed_asset(path: str) -> bool:
    normalized = posixpath.normpath(path).lstrip("/")
    return normalized in FRONTEND_FILES or normalized.startswith("static/")


@require_safe
def frontend_asset(request, path: str):
    """Return a file from the front-end build directory or raise 404."""
    if not is_allowed_asset(path):
        raise Http404("Not found")
    return serve(request, path, document_root=settings.FRONTEND_BUILD_DIR)
