"""Database models for files app."""

import enum
from typing import ClassVar, Final, final

from typing_extensions import override
from django.conf import settings
from django.db import models

# Constants for field max lengths
_NAME_MAX_LENGTH: Final = 255
_LOCAL_PATH_MAX_LENGTH: Final = 1024


@enum.unique
class Root(enum.Enum):
    """Sentinel for the top of every user's hierarchy."""

    ROOT = 'root'


ROOT: Final = Root.ROOT

# Parent reference: the root sentinel or the id of a folder node
ParentRef = Root | int


class NodeType(models.TextChoices):
    """Kinds of hierarchy nodes."""

    FOLDER = 'folder', 'Folder'
    FILE = 'file', 'File'
    IMAGE = 'image', 'Image'


@final
class FileNode(models.Model):
    """Folder, file or image in a user's hierarchy.

    Folders only carry metadata. Files and images point at a blob
    on disk through ``local_path``. A NULL ``parent`` places the node
    at the root of its owner's tree.

    Nodes are never deleted or moved; ``is_public`` is the only field
    that changes after creation.
    """

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='file_nodes',
        db_index=True,
    )

    name = models.CharField(max_length=_NAME_MAX_LENGTH)

    type = models.CharField(  # noqa: WPS125
        max_length=max(len(choice) for choice in NodeType.values),
        choices=NodeType.choices,
    )

    parent = models.ForeignKey(
        'self',
        on_delete=models.PROTECT,
        related_name='children',
        null=True,
        blank=True,
        limit_choices_to={'type': NodeType.FOLDER},
        help_text='Containing folder, NULL for the root',
    )

    is_public = models.BooleanField(default=False)

    local_path = models.CharField(
        max_length=_LOCAL_PATH_MAX_LENGTH,
        null=True,
        blank=True,
        help_text='Blob location on disk, NULL for folders',
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Model metadata."""

        verbose_name = 'File node'  # type: ignore[mutable-override]
        verbose_name_plural = 'File nodes'  # type: ignore[mutable-override]
        ordering: ClassVar[list[str]] = ['id']

        indexes: ClassVar[list[models.Index]] = [
            # Optimize directory listing queries
            models.Index(
                fields=['owner', 'parent'],
                name='files_owner_parent_idx',
            ),
        ]

        constraints: ClassVar[list[models.BaseConstraint]] = [
            # Folders never have content, files and images always do
            models.CheckConstraint(
                condition=(
                    models.Q(type=NodeType.FOLDER, local_path__isnull=True)
                    | (
                        ~models.Q(type=NodeType.FOLDER)
                        & models.Q(local_path__isnull=False)
                    )
                ),
                name='files_local_path_matches_type',
            ),
        ]

    @override
    def __str__(self) -> str:
        """String representation."""
        return f'{self.owner_id}:{self.name} ({self.type})'

    @property
    def is_folder(self) -> bool:
        """Whether the node is a folder."""
        return self.type == NodeType.FOLDER

    @property
    def parent_ref(self) -> ParentRef:
        """Parent as the root sentinel or a folder id."""
        if self.parent_id is None:
            return ROOT
        return self.parent_id

    def is_visible_to(self, requester_id: int | None) -> bool:
        """Check whether the requester may read this node's content.

        Args:
            requester_id: Resolved user id, or None for anonymous requests.

        Returns:
            True for public nodes or when the requester owns the node.
        """
        if self.is_public:
            return True
        return requester_id is not None and requester_id == self.owner_id
