"""File hierarchy and thumbnail queue settings."""

from server.settings.components import config

# Widths rendered by the thumbnail worker, stored as `<path>_<size>`
THUMBNAIL_SIZES = (500, 250, 100)

# Redis list the thumbnail worker consumes from
THUMBNAIL_QUEUE_URL = config(
    'THUMBNAIL_QUEUE_URL',
    default='redis://localhost:6379/0',
)
THUMBNAIL_QUEUE_NAME = config('THUMBNAIL_QUEUE_NAME', default='fileQueue')

# Standalone API server (run_api_server command)
API_HOST = config('API_HOST', default='0.0.0.0')  # noqa: S104
API_PORT = config('API_PORT', cast=int, default=5000)
