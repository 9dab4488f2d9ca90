"""Business logic for the file hierarchy.

Nodes are created, looked up and listed per owner. Content of files
and images goes to blob storage before the metadata row is written.
"""

import logging
from typing import TYPE_CHECKING, Final

from django.conf import settings
from django.core.files.storage import default_storage
from django.db import transaction
from django.db.models import QuerySet

from server.apps.files.exceptions import (
    BlobNotFoundError,
    FolderContentError,
    NodeNotFoundError,
    NodeValidationError,
    ParentNotFolderError,
    ParentNotFoundError,
)
from server.apps.files.models import ROOT, FileNode, NodeType, ParentRef

if TYPE_CHECKING:
    from server.apps.files.infrastructure.storage import BlobStorage

logger = logging.getLogger(__name__)

# Nodes returned per listing page
PAGE_SIZE: Final = 20


def _get_storage() -> 'BlobStorage':
    """Get the configured default storage backend.

    Returns:
        BlobStorage instance rooted at MEDIA_ROOT.
    """
    return default_storage  # type: ignore[return-value]


def _resolve_parent(parent: ParentRef, owner_id: int) -> FileNode | None:
    """Load the owner's parent folder for a new node.

    Args:
        parent: Root sentinel or id of the parent node.
        owner_id: Owner of the new node.

    Returns:
        Parent folder, or None for the root.

    Raises:
        ParentNotFoundError: If the owner has no node with the given id.
        ParentNotFolderError: If the node is not a folder.
    """
    if parent is ROOT:
        return None

    try:
        parent_node = FileNode.objects.get(pk=parent, owner_id=owner_id)
    except FileNode.DoesNotExist as error:
        raise ParentNotFoundError from error

    if not parent_node.is_folder:
        raise ParentNotFolderError
    return parent_node


def create_node(  # noqa: WPS211
    owner_id: int,
    name: str,
    node_type: str,
    parent: ParentRef = ROOT,
    is_public: bool = False,  # noqa: FBT001, FBT002
    content: bytes | None = None,
) -> FileNode:
    """Create a folder, file or image node.

    Transaction safety: Write the blob first, then create the DB record.
    If the DB write fails, the blob is deleted again (best effort).
    Image nodes get a thumbnail job once the record is committed,
    see ``signals.request_thumbnails``.

    Args:
        owner_id: Owner of the new node.
        name: Display name.
        node_type: One of ``NodeType`` values.
        parent: Root sentinel or id of an existing folder.
        is_public: Initial visibility.
        content: Raw bytes, required unless creating a folder.

    Returns:
        Created FileNode instance.

    Raises:
        NodeValidationError: If name, type or content is missing.
        ParentNotFoundError: If the parent is missing or foreign.
        ParentNotFolderError: If the parent is not a folder.
    """
    if not name:
        raise NodeValidationError('Missing name')
    if node_type not in NodeType.values:
        raise NodeValidationError('Missing type')
    if content is None and node_type != NodeType.FOLDER:
        raise NodeValidationError('Missing data')

    parent_node = _resolve_parent(parent, owner_id)
    node = FileNode(
        owner_id=owner_id,
        name=name,
        type=node_type,
        parent=parent_node,
        is_public=is_public,
    )

    if node_type == NodeType.FOLDER:
        node.save()
        logger.info('Folder created: %s (ID: %d)', name, node.pk)
        return node

    # Step 1: Write content to storage first
    storage = _get_storage()
    node.local_path = storage.store_blob(content)  # type: ignore[arg-type]

    # Step 2: Create database record (in transaction)
    try:
        with transaction.atomic():
            node.save()
    except Exception:
        # Rollback: Delete blob from storage since DB write failed
        logger.exception(
            'Database write failed, rolling back blob: %s',
            node.local_path,
        )
        storage.rollback_upload(node.local_path)
        raise

    logger.info(
        'Node created: %s (ID: %d, type: %s)',
        name,
        node.pk,
        node_type,
    )
    return node


def get_node(node_id: int, requester_id: int) -> FileNode:
    """Get a node owned by the requester.

    Args:
        node_id: Node to look up.
        requester_id: Resolved user id of the caller.

    Returns:
        FileNode instance.

    Raises:
        NodeNotFoundError: If the node is missing or owned by someone else.
    """
    try:
        return FileNode.objects.get(pk=node_id, owner_id=requester_id)
    except FileNode.DoesNotExist as error:
        raise NodeNotFoundError from error


def list_nodes(
    owner_id: int,
    parent: ParentRef = ROOT,
    page: int = 0,
) -> QuerySet[FileNode]:
    """List one page of an owner's nodes under a parent.

    Only direct children are returned, in creation order.

    Args:
        owner_id: Owner of the nodes.
        parent: Root sentinel or folder id to list.
        page: Zero-based page number.

    Returns:
        QuerySet with at most ``PAGE_SIZE`` nodes.
    """
    nodes = FileNode.objects.filter(owner_id=owner_id)
    if parent is ROOT:
        nodes = nodes.filter(parent__isnull=True)
    else:
        nodes = nodes.filter(parent_id=parent)

    offset = max(page, 0) * PAGE_SIZE
    logger.debug(
        'Listing nodes for owner %d under %s (offset %d)',
        owner_id,
        parent,
        offset,
    )
    return nodes.order_by('pk')[offset:offset + PAGE_SIZE]


def get_node_content(
    node_id: int,
    requester_id: int | None = None,
    size: int | None = None,
) -> tuple[FileNode, bytes]:
    """Read the content of a node the requester is allowed to see.

    Public nodes are readable by anyone, private ones only by their
    owner. Hidden, missing and foreign nodes all look the same.

    Args:
        node_id: Node to read.
        requester_id: Resolved user id, or None for anonymous requests.
        size: Thumbnail width; sizes not in ``THUMBNAIL_SIZES`` are ignored.

    Returns:
        Tuple of the node and its content.

    Raises:
        NodeNotFoundError: If the node or its blob is missing, or hidden.
        FolderContentError: If the node is a folder.
    """
    try:
        node = FileNode.objects.get(pk=node_id)
    except FileNode.DoesNotExist as error:
        raise NodeNotFoundError from error

    if not node.is_visible_to(requester_id):
        raise NodeNotFoundError
    if node.is_folder:
        raise FolderContentError

    if size not in settings.THUMBNAIL_SIZES:
        size = None

    try:
        content = _get_storage().read_blob(node.local_path, size)  # type: ignore[arg-type]
    except BlobNotFoundError as error:
        raise NodeNotFoundError from error
    return node, content
