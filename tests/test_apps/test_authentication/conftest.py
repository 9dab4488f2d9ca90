"""Shared fixtures for authentication app tests."""

import base64

import pytest
from django.contrib.auth import get_user_model

from server.apps.authentication.logic.session_manager import authenticate

User = get_user_model()


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
