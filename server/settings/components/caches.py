"""Cache configuration.

Sessions live only in the cache: ``auth_<token>`` -> owner id.
Keys are stored verbatim and owner ids as integers, which the Redis
serializer writes as plain digits, so other processes can read them.
"""

from typing import Final

from server.settings.components import config

# Seconds before connect/read operations against Redis give up
_REDIS_SOCKET_TIMEOUT: Final = 5


def make_raw_key(key: str, key_prefix: str, version: int) -> str:
    """Use cache keys as given, without Django's prefix and version."""
    return key


CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.redis.RedisCache',
        'LOCATION': config('REDIS_URL', default='redis://localhost:6379/0'),
        'KEY_FUNCTION': make_raw_key,
        'OPTIONS': {
            'socket_connect_timeout': _REDIS_SOCKET_TIMEOUT,
            'socket_timeout': _REDIS_SOCKET_TIMEOUT,
        },
    },
}

# Cache alias holding session tokens
SESSION_CACHE_ALIAS = 'default'

# Session token lifetime: 24 hours
SESSION_TOKEN_TTL = config('SESSION_TOKEN_TTL', cast=int, default=86400)
