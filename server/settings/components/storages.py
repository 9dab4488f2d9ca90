"""Django storage configuration for blob content.

File and image content is written to a local content root,
one file per blob. Thumbnail variants are sibling files.
"""

from typing import Any, Final

from server.settings.components import config

# Content root for stored blobs
MEDIA_ROOT = config('FOLDER_PATH', default='/tmp/files_manager')  # noqa: S108

STORAGES: Final[dict[str, dict[str, Any]]] = {
    'default': {
        'BACKEND': 'server.apps.files.infrastructure.storage.BlobStorage',
    },
    'staticfiles': {
        'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
    },
}
