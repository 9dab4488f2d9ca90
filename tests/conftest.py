"""Backend overrides shared by every test app."""

import pytest
from django.core.cache import caches


@pytest.fixture(autouse=True)
def _locmem_cache(settings):
    """Keep sessions in process memory instead of Redis.

    Yields:
        Nothing, clears the cache afterwards.
    """
    settings.CACHES = {
        'default': {
            'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
            'LOCATION': 'files-manager-tests',
            'KEY_FUNCTION': 'server.settings.components.caches.make_raw_key',
        },
    }
    yield
    caches['default'].clear()


@pytest.fixture(autouse=True)
def blob_root(settings, tmp_path):
    """Point the blob storage at a temporary content root.

    Returns:
        Path of the content root.
    """
    settings.MEDIA_ROOT = str(tmp_path)
    return tmp_path
