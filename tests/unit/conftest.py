from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from src.adapter.services.jose_token_service import JoseTokenService
from tests.fixtures.factories import TEST_SECRET


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock()
    uow.users.get_by_id = AsyncMock()
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update = AsyncMock(side_effect=lambda user: user)
    uow.users.delete = AsyncMock()
    uow.users.list_all = AsyncMock(return_value=[])
    uow.users.list_created_since = AsyncMock(return_value=[])

    uow.transactions = MagicMock()
    uow.transactions.get_by_id = AsyncMock()
    uow.transactions.create = AsyncMock(side_effect=lambda t: t)
    uow.transactions.update = AsyncMock(side_effect=lambda t: t)
    uow.transactions.delete = AsyncMock()
    uow.transactions.delete_by_user_id = AsyncMock(return_value=0)
    uow.transactions.list_by_user = AsyncMock(return_value=[])

    return uow


@pytest.fixture
def token_service():
    return JoseTokenService(TEST_SECRET)


@pytest.fixture
def expired_token_service():
    """Same secret, but every issued token is already expired"""
    return JoseTokenService(TEST_SECRET, ttl=timedelta(minutes=-1))


@pytest.fixture
def unconfigured_token_service():
    return JoseTokenService("")


@pytest.fixture
def password_hasher():
    # Minimum bcrypt cost keeps tests fast
    return BcryptPasswordHasher(rounds_provider=lambda: 4)
