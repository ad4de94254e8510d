"""Cross-origin headers for the public API."""
from __future__ import annotations

from django.conf import settings
from django.http import HttpResponse


class ApiCorsMiddleware:
    """Allow cross-origin calls to ``/api/`` from any origin.

    Preflight ``OPTIONS`` requests are answered directly without reaching the
    views.
    """

    allow_methods = "GET, OPTIONS"
    max_age = "86400"

    def __init__(self, get_response) -> None:
        self.get_response = get_response

    def __call__(self, request):
        if not request.path.startswith(settings.API_CORS_PATH_PREFIX):
            return self.get_response(request)

        if request.method == "OPTIONS" and "HTTP_ACCESS_CONTROL_REQUEST_METHOD" in request.META:
            response = HttpResponse(status=200)
            response["Access-Control-Allow-Methods"] = self.allow_methods
            response["Access-Control-Allow-Headers"] = request.META.get(
                "HTTP_ACCESS_CONTROL_REQUEST_HEADERS", "Content-Type"
            )
            response["Access-Control-Max-Age"] = self.max_age
        else:
            response = self.get_response(request)

        response["Access-Control-Allow-Origin"] = settings.API_CORS_ALLOW_ORIGIN
        return response
