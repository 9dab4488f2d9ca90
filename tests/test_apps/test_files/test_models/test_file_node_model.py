"""Tests for FileNode model."""

import pytest
from django.db import IntegrityError

from server.apps.files.models import ROOT, FileNode, NodeType


@pytest.mark.django_db
def test_file_node_str(user):
    """Test FileNode __str__ method."""
    node = FileNode.objects.create(owner=user, name='Documents', type=NodeType.FOLDER)

    assert str(node) == f'{user.pk}:Documents (folder)'


@pytest.mark.django_db
def test_file_node_defaults(user):
    """Test nodes are private root nodes by default."""
    node = FileNode.objects.create(owner=user, name='Documents', type=NodeType.FOLDER)

    assert node.is_public is False
    assert node.parent is None
    assert node.parent_ref is ROOT
    assert node.is_folder


@pytest.mark.django_db
def test_file_node_parent_ref(user):
    """Test parent_ref exposes the folder id."""
    folder = FileNode.objects.create(owner=user, name='Documents', type=NodeType.FOLDER)
    child = FileNode.objects.create(
        owner=user,
        name='a.txt',
        type=NodeType.FILE,
        parent=folder,
        local_path='/tmp/files/abc',  # noqa: S108
    )

    assert child.parent_ref == folder.pk
    assert not child.is_folder
    assert list(folder.children.all()) == [child]


@pytest.mark.django_db
def test_folder_with_local_path_rejected(user):
    """Test the database refuses folders with content."""
    with pytest.raises(IntegrityError):
        FileNode.objects.create(
            owner=user,
            name='Documents',
            type=NodeType.FOLDER,
            local_path='/tmp/files/abc',  # noqa: S108
        )


@pytest.mark.django_db
@pytest.mark.parametrize('node_type', [NodeType.FILE, NodeType.IMAGE])
def test_file_without_local_path_rejected(user, node_type):
    """Test the database refuses files and images without content."""
    with pytest.raises(IntegrityError):
        FileNode.objects.create(owner=user, name='a', type=node_type)


@pytest.mark.django_db
def test_is_visible_to(user, other_user):
    """Test visibility rules for content reads."""
    node = FileNode.objects.create(owner=user, name='Documents', type=NodeType.FOLDER)

    assert node.is_visible_to(user.pk)
    assert not node.is_visible_to(other_user.pk)
    assert not node.is_visible_to(None)

    node.is_public = True

    assert node.is_visible_to(other_user.pk)
    assert node.is_visible_to(None)


def test_root_sentinel_is_not_an_id():
    """Test the root sentinel never equals a node id."""
    assert ROOT != 0
    assert not isinstance(ROOT, int)
