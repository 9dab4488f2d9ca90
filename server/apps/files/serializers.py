"""JSON representation of nodes and parsing of node references."""

from typing import Any

from server.apps.files.exceptions import ParentNotFoundError
from server.apps.files.models import ROOT, FileNode, ParentRef

# Wire value of the root parent
_ROOT_WIRE_VALUE = 0


def serialize_node(node: FileNode) -> dict[str, Any]:
    """Convert a node to its API representation.

    ``localPath`` is only present for files and images.
    """
    parent = node.parent_ref
    data: dict[str, Any] = {
        'id': node.pk,
        'userId': node.owner_id,
        'name': node.name,
        'type': node.type,
        'isPublic': node.is_public,
        'parentId': _ROOT_WIRE_VALUE if parent is ROOT else parent,
    }
    if node.local_path is not None:
        data['localPath'] = node.local_path
    return data


def parse_parent_ref(raw_value: object) -> ParentRef:
    """Parse a ``parentId`` from a request.

    Missing values and ``0``/``"0"`` mean the root.

    Args:
        raw_value: Value from the body or query string.

    Returns:
        Root sentinel or node id.

    Raises:
        ParentNotFoundError: If the value cannot name a node.
    """
    if raw_value in (None, '', _ROOT_WIRE_VALUE, str(_ROOT_WIRE_VALUE)):
        return ROOT
    if isinstance(raw_value, bool):
        raise ParentNotFoundError

    try:
        node_id = int(raw_value)  # type: ignore[call-overload]
    except (TypeError, ValueError) as error:
        raise ParentNotFoundError from error

    if node_id <= 0:
        raise ParentNotFoundError
    return node_id


def parse_page(raw_value: str | None) -> int:
    """Parse the ``page`` query parameter, falling back to the first page."""
    try:
        return max(int(raw_value or 0), 0)
    except ValueError:
        return 0


def parse_size(raw_value: str | None) -> int | None:
    """Parse the ``size`` query parameter of a content request."""
    if raw_value is None or not raw_value.isdigit():
        return None
    return int(raw_value)
