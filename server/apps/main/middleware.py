"""Middleware translating service errors into JSON responses."""

import logging
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse, JsonResponse

from server.apps.main.exceptions import ServiceError

logger = logging.getLogger(__name__)


class ServiceErrorMiddleware:
    """Render ``ServiceError`` as ``{"error": message}``.

    Any other exception is left to Django and ends up as a 500.
    """

    def __init__(
        self,
        get_response: Callable[[HttpRequest], HttpResponse],
    ) -> None:
        """Initialize the middleware.

        Args:
            get_response: Next handler in the middleware chain.
        """
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Pass the request through unchanged."""
        return self.get_response(request)

    def process_exception(
        self,
        request: HttpRequest,
        exception: Exception,
    ) -> HttpResponse | None:
        """Convert a service error raised by a view.

        Args:
            request: HTTP request being handled.
            exception: Exception raised by the view.

        Returns:
            JSON error response, or None to let Django handle it.
        """
        if not isinstance(exception, ServiceError):
            return None

        logger.info(
            '%s %s -> %d %s',
            request.method,
            request.path,
            exception.status_code,
            exception.message,
        )
        return JsonResponse(
            {'error': exception.message},
            status=exception.status_code,
        )
