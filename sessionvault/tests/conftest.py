import time

import pytest

from ..core.config import AuthSettings
from ..core.auth.hashing import PasswordHasher
from ..core.auth.revocation import TokenRevocationStore
from ..core.auth.service import AuthService
from ..core.auth.token import TokenManager
from .fakes import FakeRedis, InMemoryUserRepository


@pytest.fixture
def settings():
    # Minimum bcrypt cost keeps the suite fast
    return AuthSettings(jwt_secret="test-secret", bcrypt_rounds=4)


@pytest.fixture
def now():
    return int(time.time())


@pytest.fixture
def clock(now):
    return lambda: now


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def token_manager(settings, clock):
    return TokenManager(settings, clock=clock)


@pytest.fixture
def revocation_store(fake_redis, settings):
    return TokenRevocationStore(fake_redis, settings.revocation_key_prefix)


@pytest.fixture
def auth_service(settings, user_repo, token_manager, revocation_store, clock):
    """AuthService wired to real hashing and tokens, with in-memory storage."""
    return AuthService(
        settings=settings,
        users=user_repo,
        hasher=PasswordHasher(rounds=settings.bcrypt_rounds),
        tokens=token_manager,
        revocations=revocation_store,
        clock=clock
    )
