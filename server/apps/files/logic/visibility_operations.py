"""Business logic for node visibility.

Toggling is a plain read-modify-write: two concurrent toggles on the
same node race and the last write wins.
"""

import logging

from server.apps.files.exceptions import NodeNotFoundError
from server.apps.files.models import FileNode

logger = logging.getLogger(__name__)


def set_visibility(
    node_id: int,
    owner_id: int,
    is_public: bool,  # noqa: FBT001
) -> FileNode:
    """Make an owned node public or private.

    Args:
        node_id: Node to update.
        owner_id: Resolved user id of the caller.
        is_public: New visibility.

    Returns:
        The node as re-read after the update.

    Raises:
        NodeNotFoundError: If the node is missing or owned by someone else.
    """
    owned_nodes = FileNode.objects.filter(pk=node_id, owner_id=owner_id)
    if not owned_nodes.exists():
        raise NodeNotFoundError

    owned_nodes.update(is_public=is_public)
    logger.info(
        'Node %d visibility set to %s',
        node_id,
        'public' if is_public else 'private',
    )
    return FileNode.objects.get(pk=node_id)


def publish_node(node_id: int, owner_id: int) -> FileNode:
    """Make an owned node readable by anyone."""
    return set_visibility(node_id, owner_id, is_public=True)


def unpublish_node(node_id: int, owner_id: int) -> FileNode:
    """Restrict an owned node to its owner."""
    return set_visibility(node_id, owner_id, is_public=False)
