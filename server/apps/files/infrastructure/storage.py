"""Storage backend for file and image blobs."""

import logging
import uuid
from pathlib import Path
from typing import Any, final

from typing_extensions import override
from django.core.files.base import ContentFile
from django.core.files.storage import FileSystemStorage

from server.apps.files.exceptions import BlobNotFoundError

logger = logging.getLogger(__name__)


@final
class BlobStorage(FileSystemStorage):
    """Filesystem storage for raw node content.

    Extends Django's FileSystemStorage with:
    - Collision-free random blob names
    - Size variant lookup (``<path>_<size>``) for thumbnails
    - Best-effort rollback for failed metadata writes
    - Enhanced error logging

    Blobs are addressed by absolute path, which is what nodes keep
    in ``local_path``.
    """

    @override
    def save(  # noqa: WPS211
        self,
        name: str | None,
        content: Any,
        max_length: int | None = None,
    ) -> str:
        """Save blob with error handling and logging.

        Args:
            name: Name for the blob relative to the content root.
            content: File content (file-like object).
            max_length: Optional maximum length for the filename.

        Returns:
            Actual name used (may differ from name if it was taken).

        Raises:
            OSError: If writing to disk fails.
        """
        try:
            logger.info('Writing blob to storage: %s', name)
            saved_name = super().save(name, content, max_length)
            logger.info('Successfully wrote blob: %s', saved_name)
        except Exception:
            logger.exception('Failed to write blob to storage: %s', name)
            raise
        else:
            return saved_name

    @override
    def delete(self, name: str) -> None:
        """Delete blob with error handling and logging.

        Args:
            name: Blob name or absolute path inside the content root.

        Raises:
            OSError: If removing the file fails.
        """
        try:
            logger.info('Deleting blob from storage: %s', name)
            super().delete(name)
            logger.info('Successfully deleted blob: %s', name)
        except Exception:
            logger.exception('Failed to delete blob from storage: %s', name)
            raise

    def store_blob(self, content: bytes) -> str:
        """Write bytes under a freshly generated unique name.

        Args:
            content: Raw blob content.

        Returns:
            Absolute path of the stored blob.
        """
        saved_name = self.save(uuid.uuid4().hex, ContentFile(content))
        return self.path(saved_name)

    def read_blob(self, local_path: str, size: int | None = None) -> bytes:
        """Read a blob or one of its size variants.

        Args:
            local_path: Absolute path returned by ``store_blob``.
            size: Optional thumbnail width; reads ``<local_path>_<size>``.

        Returns:
            Raw content of the resolved file.

        Raises:
            BlobNotFoundError: If the resolved file does not exist.
        """
        resolved = variant_path(local_path, size)
        try:
            return Path(resolved).read_bytes()
        except FileNotFoundError as error:
            logger.warning('Blob not found on disk: %s', resolved)
            raise BlobNotFoundError(resolved) from error

    def rollback_upload(self, local_path: str) -> None:
        """Delete a stored blob after the metadata write failed.

        This is a best-effort operation - if deletion fails, the error
        is logged but not raised, as the metadata write already failed.

        Args:
            local_path: Absolute path of the blob to delete.
        """
        try:
            logger.warning('Rolling back upload, deleting blob: %s', local_path)
            self.delete(local_path)
            logger.info('Successfully rolled back blob: %s', local_path)
        except Exception:
            # Log but don't raise - rollback is best-effort
            # The blob remains on disk without a node pointing at it
            logger.exception(
                'Failed to rollback upload, orphaned blob: %s',
                local_path,
            )


def variant_path(local_path: str, size: int | None = None) -> str:
    """Build the path of a blob's size variant.

    Example: ('/tmp/files/abc', 250) -> '/tmp/files/abc_250'

    Args:
        local_path: Path of the original blob.
        size: Thumbnail width, or None for the original.

    Returns:
        Path of the requested variant.
    """
    if size is None:
        return local_path
    return f'{local_path}_{size}'
