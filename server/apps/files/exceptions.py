"""Exceptions for files app."""

from server.apps.main.exceptions import ServiceError


class NodeValidationError(ServiceError):
    """Raised when a node is submitted with a missing or invalid field."""

    status_code = 400


class ParentNotFoundError(ServiceError):
    """Raised when the requested parent node does not exist."""

    status_code = 400
    default_message = 'Parent not found'


class ParentNotFolderError(ServiceError):
    """Raised when the requested parent node is not a folder."""

    status_code = 400
    default_message = 'Parent is not a folder'


class NodeNotFoundError(ServiceError):
    """Raised when a node is absent, foreign, or hidden from the requester.

    The three cases share one error so callers cannot probe for the
    existence of other users' nodes.
    """

    status_code = 404
    default_message = 'Not found'


class FolderContentError(ServiceError):
    """Raised when content is requested for a folder."""

    status_code = 400
    default_message = "A folder doesn't have content"


class BlobNotFoundError(Exception):
    """Raised when a blob or one of its variants is missing on disk."""

    def __init__(self, path: str) -> None:
        """Initialize BlobNotFoundError.

        Args:
            path: Resolved path that was not found.
        """
        self.path = path
        super().__init__(f'Blob not found: {path}')
