"""Tests for API session management."""

import base64

import pytest
from django.core.cache import caches
from django.core.cache.backends.redis import RedisSerializer
from django.core.cache.backends.locmem import LocMemCache

from server.apps.authentication.exceptions import UnauthorizedError
from server.apps.authentication.logic.session_manager import (
    authenticate,
    decode_credentials,
    get_session_ttl,
    make_token_key,
    resolve_optional,
    revoke,
    validate,
)


def _encode(raw: bytes) -> str:
    return base64.b64encode(raw).decode()


class TestSessionManagerConfig:
    """Tests for session configuration."""

    def test_get_session_ttl_default(self, settings):
        """Test default session lifetime."""
        if hasattr(settings, 'SESSION_TOKEN_TTL'):
            delattr(settings, 'SESSION_TOKEN_TTL')

        ttl = get_session_ttl()

        assert ttl == 86400  # 24 hours

    def test_get_session_ttl_from_settings(self, settings):
        """Test session lifetime from settings."""
        settings.SESSION_TOKEN_TTL = 3600

        ttl = get_session_ttl()

        assert ttl == 3600

    def test_make_token_key(self):
        """Test cache key layout."""
        assert make_token_key('abc') == 'auth_abc'


class TestDecodeCredentials:
    """Tests for Basic auth credential decoding."""

    def test_decode_credentials(self):
        """Test email and password are split."""
        email, password = decode_credentials(_encode(b'bob@dylan.com:toto1234!'))

        assert email == 'bob@dylan.com'
        assert password == 'toto1234!'

    def test_decode_credentials_password_with_colon(self):
        """Test only the first colon separates email from password."""
        _, password = decode_credentials(_encode(b'bob@dylan.com:to:to'))

        assert password == 'to:to'

    @pytest.mark.parametrize('raw', [
        b'bob@dylan.com',
        b'bob@dylan.com:',
        b':toto1234!',
    ])
    def test_decode_credentials_missing_part(self, raw):
        """Test both email and password are required."""
        with pytest.raises(UnauthorizedError):
            decode_credentials(_encode(raw))

    def test_decode_credentials_not_base64(self):
        """Test garbage credentials are rejected."""
        with pytest.raises(UnauthorizedError):
            decode_credentials('not base64 at all!')


class TestAuthenticate:
    """Tests for credential exchange."""

    @pytest.mark.django_db
    def test_authenticate_success(self, user, credentials):
        """Test a token is minted and stored for the user."""
        token = authenticate(credentials)

        assert len(token) == 32  # 16 bytes = 32 hex chars
        assert caches['default'].get(f'auth_{token}') == user.pk

    @pytest.mark.django_db
    def test_authenticate_uses_ttl(self, user, credentials, settings, monkeypatch):
        """Test the session is stored with the configured TTL."""
        settings.SESSION_TOKEN_TTL = 120
        cache = caches['default']
        stored = {}
        original_set = cache.set

        def recording_set(key, value, timeout=None, **kwargs):  # noqa: WPS430
            stored[key] = timeout
            return original_set(key, value, timeout=timeout, **kwargs)

        monkeypatch.setattr(cache, 'set', recording_set)

        token = authenticate(credentials, cache=cache)

        assert stored == {f'auth_{token}': 120}

    @pytest.mark.django_db
    def test_authenticate_stores_plain_user_id(self, user, credentials, monkeypatch):
        """Test the session value reaches Redis as plain digits."""
        cache = caches['default']
        stored = []
        original_set = cache.set

        def recording_set(key, value, timeout=None, **kwargs):  # noqa: WPS430
            stored.append(value)
            return original_set(key, value, timeout=timeout, **kwargs)

        monkeypatch.setattr(cache, 'set', recording_set)

        authenticate(credentials, cache=cache)

        assert stored == [user.pk]
        assert type(stored[0]) is int  # noqa: WPS516
        # Ints bypass pickling and are written by redis-py as digits
        assert RedisSerializer().dumps(stored[0]) == user.pk
        assert RedisSerializer().loads(str(user.pk).encode()) == user.pk

    @pytest.mark.django_db
    def test_authenticate_tokens_are_unique(self, user, credentials):
        """Test each login gets its own session."""
        first = authenticate(credentials)
        second = authenticate(credentials)

        assert first != second
        assert validate(first) == validate(second) == user.pk

    @pytest.mark.django_db
    def test_authenticate_wrong_password(self, user):
        """Test a wrong password is rejected."""
        with pytest.raises(UnauthorizedError):
            authenticate(_encode(b'test@example.com:wrongpass'))

    @pytest.mark.django_db
    def test_authenticate_unknown_email(self, user):
        """Test an unknown email is rejected."""
        with pytest.raises(UnauthorizedError):
            authenticate(_encode(b'nobody@example.com:testpass123'))

    @pytest.mark.django_db
    def test_authenticate_inactive_user(self, user, credentials):
        """Test inactive users cannot log in."""
        user.is_active = False
        user.save()

        with pytest.raises(UnauthorizedError):
            authenticate(credentials)

    @pytest.mark.django_db
    def test_authenticate_with_injected_cache(self, user, credentials):
        """Test sessions go to the cache passed in."""
        cache = LocMemCache('injected-sessions', {})

        token = authenticate(credentials, cache=cache)

        assert cache.get(f'auth_{token}') == user.pk
        assert caches['default'].get(f'auth_{token}') is None


class TestValidate:
    """Tests for token validation."""

    @pytest.mark.django_db
    def test_validate_success(self, user, user_token):
        """Test a valid token resolves to its user."""
        assert validate(user_token) == user.pk

    def test_validate_digit_string_entry(self):
        """Test sessions written by other processes as digit strings."""
        caches['default'].set('auth_external', '42')

        assert validate('external') == 42

    @pytest.mark.parametrize('token', [None, ''])
    def test_validate_missing_token(self, token):
        """Test a missing token is rejected."""
        with pytest.raises(UnauthorizedError):
            validate(token)

    def test_validate_unknown_token(self):
        """Test a token never issued is rejected."""
        with pytest.raises(UnauthorizedError):
            validate('nonexistent-token')

    @pytest.mark.django_db
    def test_validate_expired_token(self, user_token):
        """Test a token whose cache entry expired is rejected."""
        # Expiry is the cache's job; a vanished entry is what it leaves
        caches['default'].delete(f'auth_{user_token}')

        with pytest.raises(UnauthorizedError):
            validate(user_token)

    @pytest.mark.django_db
    def test_resolve_optional(self, user, user_token):
        """Test optional resolution never raises."""
        assert resolve_optional(user_token) == user.pk
        assert resolve_optional(None) is None
        assert resolve_optional('nonexistent-token') is None


class TestRevoke:
    """Tests for session revocation."""

    @pytest.mark.django_db
    def test_revoke_success(self, user_token):
        """Test revoking ends the session."""
        result = revoke(user_token)

        assert result is True
        with pytest.raises(UnauthorizedError):
            validate(user_token)

    @pytest.mark.django_db
    def test_revoke_twice(self, user_token):
        """Test revoking is idempotent."""
        revoke(user_token)

        result = revoke(user_token)

        assert result is False
        with pytest.raises(UnauthorizedError):
            validate(user_token)

    def test_revoke_unknown_token(self):
        """Test revoking a token never issued."""
        assert revoke('nonexistent-token') is False

    @pytest.mark.django_db
    def test_revoke_keeps_other_sessions(self, user, credentials):
        """Test only the given session ends."""
        first = authenticate(credentials)
        second = authenticate(credentials)

        revoke(first)

        assert validate(second) == user.pk
