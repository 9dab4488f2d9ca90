"""Service status views."""

from django.http import HttpRequest, JsonResponse
from django.views.decorators.http import require_GET

from server.apps.main.logic.health import get_stats, get_status


@require_GET
def status(request: HttpRequest) -> JsonResponse:
    """Report whether the cache and database are reachable."""
    return JsonResponse(get_status())


@require_GET
def stats(request: HttpRequest) -> JsonResponse:
    """Report the number of users and file nodes."""
    return JsonResponse(get_stats())
