"""View decorators resolving the ``X-Token`` header."""

from collections.abc import Callable
from functools import wraps
from typing import Any, Final

from django.http import HttpRequest, HttpResponse

from server.apps.authentication.logic.session_manager import validate

# Request header carrying the session token
TOKEN_HEADER: Final = 'X-Token'


def get_request_token(request: HttpRequest) -> str | None:
    """Read the session token sent with the request."""
    return request.headers.get(TOKEN_HEADER)


def token_required(
    view: Callable[..., HttpResponse],
) -> Callable[..., HttpResponse]:
    """Reject requests without a valid session token.

    The resolved id is passed to the view as the ``user_id`` keyword.
    """

    @wraps(view)
    def wrapper(request: HttpRequest, *args: Any, **kwargs: Any) -> HttpResponse:
        user_id = validate(get_request_token(request))
        return view(request, *args, user_id=user_id, **kwargs)

    return wrapper
