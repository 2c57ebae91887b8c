import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    """Mock unit of work that rolls back when its block raises"""
    uow = MagicMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    async def exit_block(exc_type, exc, tb):
        if exc_type is not None:
            await uow.rollback()
        return False

    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(side_effect=exit_block)
    return uow


@pytest.fixture
def mock_password_hasher():
    """Mock password hasher that accepts exactly the secret 'correct-secret'"""
    hasher = MagicMock()
    hasher.hash = AsyncMock(side_effect=lambda secret: f"hashed:{secret}")
    hasher.verify = AsyncMock(
        side_effect=lambda secret, password_hash: password_hash == f"hashed:{secret}"
    )
    hasher.burn = AsyncMock()
    return hasher
