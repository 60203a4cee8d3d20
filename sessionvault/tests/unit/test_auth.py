"""
Unit tests for authentication primitives.
Tests password hashing and session token issuance/verification.
"""

import time

import pytest
from jose import jwt
from unittest.mock import patch

from ...core.auth.errors import HashingError, TokenExpiredError, TokenInvalidError
from ...core.auth.hashing import PasswordHasher
from ...core.auth.token import TokenManager
from ...core.config import AuthSettings


class TestPasswordHashing:
    """Test password hashing functionality."""

    def test_hash_password_uses_configured_cost(self):
        """Test hashes are bcrypt with the default cost factor of 10."""
        hasher = PasswordHasher()
        hashed = hasher.hash("123456")

        assert hashed != "123456"
        assert hashed.startswith("$2b$10$")

    def test_hash_password_is_salted(self):
        """Test the same password hashes differently each time."""
        hasher = PasswordHasher(rounds=4)

        assert hasher.hash("123456") != hasher.hash("123456")

    def test_hash_password_empty(self):
        """Test hashing empty password raises error."""
        with pytest.raises(ValueError, match="Password cannot be empty"):
            PasswordHasher(rounds=4).hash("")

    def test_hash_password_backend_failure(self):
        """Test backend failures surface as HashingError."""
        hasher = PasswordHasher(rounds=4)
        with patch.object(hasher._context, "hash", side_effect=RuntimeError("boom")):
            with pytest.raises(HashingError):
                hasher.hash("123456")

    def test_verify_password_success(self):
        """Test successful password verification."""
        hasher = PasswordHasher(rounds=4)
        hashed = hasher.hash("test_password_123")

        assert hasher.verify("test_password_123", hashed) is True

    def test_verify_password_failure(self):
        """Test password verification with wrong password."""
        hasher = PasswordHasher(rounds=4)
        hashed = hasher.hash("test_password_123")

        assert hasher.verify("wrong_password", hashed) is False

    def test_verify_password_empty_inputs(self):
        """Test password verification with empty inputs."""
        hasher = PasswordHasher(rounds=4)

        assert hasher.verify("", "hash") is False
        assert hasher.verify("password", "") is False

    def test_verify_password_unrecognized_hash(self):
        """Test a corrupt stored hash is a mismatch, not an error."""
        assert PasswordHasher(rounds=4).verify("123456", "123456") is False


class TestSessionTokens:
    """Test session token functionality."""

    def test_issue_token_claims(self, settings):
        """Test issued tokens carry id, username and exp = now + window."""
        now = int(time.time())
        manager = TokenManager(settings, clock=lambda: now)

        token = manager.issue({"id": 1, "username": "testuser"})
        claims = manager.verify(token)

        assert len(token.split(".")) == 3
        assert claims == {"id": 1, "username": "testuser", "exp": now + settings.token_ttl_seconds}

    def test_issue_token_only_embeds_identity(self, token_manager):
        """Test extra fields such as password hashes are not embedded."""
        token = token_manager.issue({"id": 1, "username": "testuser", "password_hash": "secret"})

        assert "password_hash" not in token_manager.verify(token)

    def test_issue_token_missing_fields(self, token_manager):
        """Test issuing fails without id and username."""
        with pytest.raises(ValueError, match="must include 'id' and 'username'"):
            token_manager.issue({"username": "testuser"})

    def test_verify_expired_token(self, settings):
        """Test expired tokens are rejected when expiration is enforced."""
        past = time.time() - 2 * settings.token_ttl_seconds
        manager = TokenManager(settings, clock=lambda: past)
        token = manager.issue({"id": 1, "username": "testuser"})

        with pytest.raises(TokenExpiredError):
            manager.verify(token)

    def test_verify_expired_token_ignoring_expiration(self, settings):
        """Test expired tokens still decode when expiration is ignored."""
        past = int(time.time()) - 2 * settings.token_ttl_seconds
        manager = TokenManager(settings, clock=lambda: past)
        token = manager.issue({"id": 1, "username": "testuser"})

        claims = manager.verify(token, ignore_expiration=True)

        assert claims["exp"] == past + settings.token_ttl_seconds
        assert claims["username"] == "testuser"

    def test_verify_wrong_secret(self, settings, token_manager):
        """Test tokens signed with another key are invalid."""
        other = TokenManager(AuthSettings(jwt_secret="another-secret"))
        token = other.issue({"id": 1, "username": "testuser"})

        with pytest.raises(TokenInvalidError):
            token_manager.verify(token)
        with pytest.raises(TokenInvalidError):
            token_manager.verify(token, ignore_expiration=True)

    def test_verify_tampered_token(self, token_manager):
        """Test a modified payload breaks the signature."""
        header, _, signature = token_manager.issue({"id": 1, "username": "testuser"}).split(".")
        forged_payload = jwt.encode({"id": 2, "username": "admin"}, "x").split(".")[1]

        with pytest.raises(TokenInvalidError):
            token_manager.verify(f"{header}.{forged_payload}.{signature}")

    @pytest.mark.parametrize("token", ["", "not-a-jwt", "a.b.c"])
    def test_verify_malformed_token(self, token_manager, token):
        """Test malformed tokens are invalid."""
        with pytest.raises(TokenInvalidError):
            token_manager.verify(token)

    def test_verify_token_without_exp(self, settings, token_manager):
        """Test a signed token without exp still verifies; callers decide."""
        token = jwt.encode({"id": 1, "username": "testuser"}, settings.jwt_secret, algorithm="HS256")

        assert "exp" not in token_manager.verify(token, ignore_expiration=True)


if __name__ == "__main__":
    pytest.main([__file__])
