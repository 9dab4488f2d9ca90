"""Exceptions for authentication app."""

from server.apps.main.exceptions import ServiceError


class UnauthorizedError(ServiceError):
    """Raised for missing or invalid credentials and tokens."""

    status_code = 401
    default_message = 'Unauthorized'
