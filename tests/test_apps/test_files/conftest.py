"""Shared fixtures for files app tests."""

import base64

import pytest
from django.contrib.auth import get_user_model

from server.apps.authentication.logic.session_manager import authenticate

User = get_user_model()


@pytest.fixture(autouse=True)
def thumbnail_jobs(monkeypatch):
    """Record thumbnail jobs instead of pushing them to Redis.

    Returns:
        List of (owner_id, file_id) tuples in dispatch order.
    """
    jobs = []

    def fake_enqueue(owner_id, file_id, queue=None):  # noqa: WPS430
        jobs.append((owner_id, file_id))

    monkeypatch.setattr(
        'server.apps.files.signals.enqueue_thumbnail',
        fake_enqueue,
    )
    return jobs


@pytest.fixture
def user(db):
    """Create test user.

    Returns:
        User instance for testing.
    """
    return User.objects.create_user(
        username='testuser',
        password='testpass123',
        email='test@example.com',
    )


@pytest.fixture
def other_user(db):
    """Create second test user for isolation tests.

    Returns:
        Second user instance.
    """
    return User.objects.create_user(
        username='otheruser',
        password='testpass123',
        email='other@example.com',
    )


@pytest.fixture
def credentials():
    """Encoded credentials of the test user.

    Returns:
        Base64 of 'email:password'.
    """
    return base64.b64encode(b'test@example.com:testpass123').decode()


@pytest.fixture
def user_token(user, credentials):
    """Log the test user in.

    Returns:
        Valid session token.
    """
    return authenticate(credentials)


@pytest.fixture
def other_token(other_user):
    """Log the second user in.

    Returns:
        Valid session token.
    """
    return authenticate(
        base64.b64encode(b'other@example.com:testpass123').decode(),
    )
