"""Session management for API tokens.

A session is a single cache entry ``auth_<token>`` holding the owner's
user id. It lives until it is revoked or its TTL elapses; expiry is
enforced by the cache, nothing is stored in the database.
"""

import base64
import binascii
import logging
import secrets
from typing import Final

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.cache import BaseCache, caches

from server.apps.authentication.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)

# Token length in bytes (generates 32 hex chars)
_TOKEN_BYTES: Final = 16

# Prefix of session keys in the cache
_TOKEN_KEY_PREFIX: Final = 'auth_'

# Separator between email and password in decoded credentials
_CREDENTIALS_SEPARATOR: Final = ':'


def get_session_ttl() -> int:
    """Get session lifetime in seconds.

    Returns:
        TTL from settings or default of 86400 (24 hours).
    """
    return getattr(settings, 'SESSION_TOKEN_TTL', 86400)


def _get_cache() -> BaseCache:
    """Get the cache holding session tokens."""
    return caches[getattr(settings, 'SESSION_CACHE_ALIAS', 'default')]


def make_token_key(token: str) -> str:
    """Build the cache key for a token.

    Args:
        token: Opaque session token.

    Returns:
        Cache key (e.g., 'auth_0f3c...').
    """
    return f'{_TOKEN_KEY_PREFIX}{token}'


def decode_credentials(credentials: str) -> tuple[str, str]:
    """Decode base64 ``email:password`` credentials.

    Only the first colon separates the parts, passwords may contain more.

    Args:
        credentials: Base64 text from the Basic auth header.

    Returns:
        Tuple of email and password.

    Raises:
        UnauthorizedError: If decoding fails or a part is missing.
    """
    try:
        decoded = base64.b64decode(credentials, validate=True).decode('utf-8')
    except (binascii.Error, UnicodeDecodeError, ValueError) as error:
        raise UnauthorizedError from error

    email, separator, password = decoded.partition(_CREDENTIALS_SEPARATOR)
    if not separator or not email or not password:
        raise UnauthorizedError
    return email, password


def authenticate(credentials: str, cache: BaseCache | None = None) -> str:
    """Exchange encoded credentials for a new session token.

    Args:
        credentials: Base64 ``email:password`` pair.
        cache: Cache to store the session in, defaults to the session cache.

    Returns:
        Newly minted token.

    Raises:
        UnauthorizedError: If credentials are malformed or do not match.
    """
    email, password = decode_credentials(credentials)

    user = get_user_model().objects.filter(email=email).first()
    if user is None or not user.check_password(password):
        logger.warning('Authentication failed for user: %s', email)
        raise UnauthorizedError
    if not user.is_active:
        logger.warning('Inactive user attempted login: %s', email)
        raise UnauthorizedError

    token = secrets.token_hex(_TOKEN_BYTES)
    session_cache = _get_cache() if cache is None else cache
    session_cache.set(
        make_token_key(token),
        user.pk,
        timeout=get_session_ttl(),
    )

    logger.info('Session created for user %s: %s', email, token[:8])
    return token


def validate(token: str | None, cache: BaseCache | None = None) -> int:
    """Resolve a token to the id of its user.

    Args:
        token: Token from the request, possibly missing.
        cache: Cache holding sessions, defaults to the session cache.

    Returns:
        User id the token was issued for.

    Raises:
        UnauthorizedError: If the token is missing, revoked or expired.
    """
    if not token:
        raise UnauthorizedError

    session_cache = _get_cache() if cache is None else cache
    user_id = session_cache.get(make_token_key(token))
    if user_id is None:
        raise UnauthorizedError
    return int(user_id)


def revoke(token: str, cache: BaseCache | None = None) -> bool:
    """End a session.

    Revoking an unknown or already revoked token is not an error.

    Args:
        token: Token to revoke.
        cache: Cache holding sessions, defaults to the session cache.

    Returns:
        True if a session was found and deleted, False otherwise.
    """
    session_cache = _get_cache() if cache is None else cache
    deleted = session_cache.delete(make_token_key(token))

    if deleted:
        logger.info('Session ended: %s', token[:8])

    return bool(deleted)


def resolve_optional(token: str | None, cache: BaseCache | None = None) -> int | None:
    """Resolve a token if one was sent, without failing.

    Args:
        token: Token from the request, possibly missing.
        cache: Cache holding sessions, defaults to the session cache.

    Returns:
        User id, or None for a missing or invalid token.
    """
    if not token:
        return None
    try:
        return validate(token, cache=cache)
    except UnauthorizedError:
        return None
