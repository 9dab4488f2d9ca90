"""Token exchange views."""

from typing import Final

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.views.decorators.http import require_GET

from server.apps.authentication.decorators import get_request_token
from server.apps.authentication.exceptions import UnauthorizedError
from server.apps.authentication.logic.session_manager import (
    authenticate,
    revoke,
    validate,
)

# Scheme prefix of the Authorization header
_BASIC_PREFIX: Final = 'Basic '


@require_GET
def connect(request: HttpRequest) -> JsonResponse:
    """Exchange Basic auth credentials for a session token."""
    header = request.headers.get('Authorization', '')
    if not header.startswith(_BASIC_PREFIX):
        raise UnauthorizedError

    token = authenticate(header.removeprefix(_BASIC_PREFIX).strip())
    return JsonResponse({'token': token})


@require_GET
def disconnect(request: HttpRequest) -> HttpResponse:
    """Revoke the session token sent with the request."""
    token = get_request_token(request)
    validate(token)
    revoke(token)  # type: ignore[arg-type]
    return HttpResponse(status=204)
