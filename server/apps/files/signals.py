"""Signal handlers for files app."""

import logging
from functools import partial

from django.db import transaction
from django.db.models.signals import post_save
from django.dispatch import receiver

from server.apps.files.infrastructure.thumbnails import enqueue_thumbnail
from server.apps.files.models import FileNode, NodeType

logger = logging.getLogger(__name__)


@receiver(post_save, sender=FileNode)
def request_thumbnails(
    sender: type[FileNode],
    instance: FileNode,
    created: bool,  # noqa: FBT001
    **kwargs: object,
) -> None:
    """Queue thumbnail rendering once a new image node is committed.

    The job is published from ``transaction.on_commit`` so the worker
    never sees an id whose metadata could still be rolled back.

    Args:
        sender: The FileNode model class.
        instance: The FileNode instance being saved.
        created: Whether the save inserted a new row.
        **kwargs: Additional signal arguments.
    """
    if not created or instance.type != NodeType.IMAGE:
        return

    transaction.on_commit(
        partial(_dispatch_thumbnail_job, instance.owner_id, instance.pk),
    )


def _dispatch_thumbnail_job(owner_id: int, file_id: int) -> None:
    """Push the job, logging instead of failing the finished upload."""
    try:
        enqueue_thumbnail(owner_id, file_id)
    except Exception:
        # Log error but don't raise - the node is already committed
        # The worker can be fed again for images without variants
        logger.exception(
            'Failed to queue thumbnail job for file %d',
            file_id,
        )
