"""Thumbnail job queue.

Image uploads publish a job to a Redis list. An external worker pops
jobs, renders the size variants next to the original blob and is
expected to acknowledge them itself (at-least-once delivery). Nothing
here waits for the worker; a variant requested before it finishes is
simply not found.
"""

import json
import logging
from typing import Final, final

import redis
from django.conf import settings

logger = logging.getLogger(__name__)

# Seconds before connect/write operations against the queue give up
_QUEUE_SOCKET_TIMEOUT: Final = 5


@final
class ThumbnailQueue:
    """Producer side of the thumbnail job queue."""

    def __init__(self, client: redis.Redis, name: str) -> None:
        """Initialize the queue.

        Args:
            client: Connected Redis client.
            name: Name of the Redis list jobs are pushed to.
        """
        self._client = client
        self._name = name

    @property
    def name(self) -> str:
        """Name of the Redis list backing the queue."""
        return self._name

    def push(self, job: dict[str, str]) -> None:
        """Append a job to the queue.

        Args:
            job: JSON-serializable job payload.
        """
        self._client.rpush(self._name, json.dumps(job))

    def close(self) -> None:
        """Release the underlying connection pool."""
        self._client.close()


def get_thumbnail_queue() -> ThumbnailQueue:
    """Build a queue client from settings.

    Returns:
        ThumbnailQueue connected to ``THUMBNAIL_QUEUE_URL``.
    """
    client = redis.Redis.from_url(
        settings.THUMBNAIL_QUEUE_URL,
        socket_connect_timeout=_QUEUE_SOCKET_TIMEOUT,
        socket_timeout=_QUEUE_SOCKET_TIMEOUT,
    )
    return ThumbnailQueue(client, settings.THUMBNAIL_QUEUE_NAME)


def enqueue_thumbnail(
    owner_id: int,
    file_id: int,
    queue: ThumbnailQueue | None = None,
) -> None:
    """Submit a thumbnail job for an image node.

    Args:
        owner_id: Owner of the image.
        file_id: Image node id.
        queue: Queue to push to; a settings-configured one is opened
            and closed around the push when omitted.
    """
    job = {'userId': str(owner_id), 'fileId': str(file_id)}

    if queue is not None:
        queue.push(job)
    else:
        owned_queue = get_thumbnail_queue()
        try:
            owned_queue.push(job)
        finally:
            owned_queue.close()

    logger.info('Thumbnail job queued for file %d (owner %d)', file_id, owner_id)
