"""Backend health and usage statistics."""

import logging

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.cache import caches
from django.db import connection

from server.apps.files.models import FileNode

logger = logging.getLogger(__name__)

# Key written by the cache probe, expires almost immediately
_PROBE_KEY = 'status_probe'


def is_cache_alive() -> bool:
    """Check that the session cache accepts reads and writes.

    Returns:
        True if a probe value round-trips through the cache.
    """
    cache = caches[settings.SESSION_CACHE_ALIAS]
    try:
        cache.set(_PROBE_KEY, '1', timeout=1)
        return cache.get(_PROBE_KEY) == '1'
    except Exception:
        logger.exception('Cache health check failed')
        return False


def is_database_alive() -> bool:
    """Check that the database connection can be established.

    Returns:
        True if the default database is reachable.
    """
    try:
        connection.ensure_connection()
    except Exception:
        logger.exception('Database health check failed')
        return False
    return True


def get_status() -> dict[str, bool]:
    """Report the state of the backing services."""
    return {
        'redis': is_cache_alive(),
        'db': is_database_alive(),
    }


def get_stats() -> dict[str, int]:
    """Count registered users and stored nodes."""
    return {
        'users': get_user_model().objects.count(),
        'files': FileNode.objects.count(),
    }
