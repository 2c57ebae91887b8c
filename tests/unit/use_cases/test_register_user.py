"""Unit tests for RegisterUser use case

Tests cover:
- Successful registration with hashed secret
- Empty username / secret rejection
- Duplicate username (pre-check and lost race)
- Storage failure
"""

import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock
from sqlalchemy.exc import IntegrityError, OperationalError

from src.app.use_cases.accounts.register_user import RegisterUser
from src.app.use_cases.accounts.dtos import RegisterCommandDTO
from src.domain.user import User


@pytest.fixture
def mock_user_repo():
    """Mock user repository"""
    return MagicMock()


@pytest.fixture
def register_use_case(mock_uow, mock_user_repo, mock_password_hasher):
    return RegisterUser(
        uow=mock_uow,
        user_repo=mock_user_repo,
        password_hasher=mock_password_hasher,
    )


def created_user(user: User) -> User:
    user.id = 1
    user.created_at = datetime.now(timezone.utc)
    return user


@pytest.mark.asyncio
class TestRegisterUserSuccess:
    async def test_register_stores_hash_not_plaintext(
        self, register_use_case, mock_user_repo, mock_uow, mock_password_hasher
    ):
        """
        Given: Username is free
        When: register is called
        Then: User is created with the hashed secret and committed
        """
        # Arrange
        mock_user_repo.get_by_username = AsyncMock(return_value=None)
        mock_user_repo.create = AsyncMock(side_effect=created_user)

        # Act
        result = await register_use_case.execute(
            RegisterCommandDTO(username="alice", password="pw123")
        )

        # Assert
        assert result.is_ok()
        assert result.value.user_id == 1
        assert result.value.username == "alice"

        stored = mock_user_repo.create.call_args.args[0]
        assert stored.username == "alice"
        assert stored.password_hash == "hashed:pw123"
        mock_password_hasher.hash.assert_awaited_once_with("pw123")
        mock_uow.commit.assert_awaited_once()

    async def test_response_carries_no_secret(self, register_use_case, mock_user_repo):
        mock_user_repo.get_by_username = AsyncMock(return_value=None)
        mock_user_repo.create = AsyncMock(side_effect=created_user)

        result = await register_use_case.execute(
            RegisterCommandDTO(username="alice", password="pw123")
        )

        dumped = result.value.model_dump()
        assert "pw123" not in str(dumped)
        assert "hashed:pw123" not in str(dumped)


@pytest.mark.asyncio
class TestRegisterUserValidation:
    @pytest.mark.parametrize("username", ["", "   "])
    async def test_empty_username_is_invalid_input(
        self, register_use_case, mock_user_repo, mock_uow, username
    ):
        mock_user_repo.get_by_username = AsyncMock()
        mock_user_repo.create = AsyncMock()

        result = await register_use_case.execute(
            RegisterCommandDTO(username=username, password="pw123")
        )

        assert result.is_err()
        assert result.error.code == "INVALID_INPUT"
        mock_user_repo.create.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_empty_password_is_invalid_input(self, register_use_case, mock_user_repo):
        mock_user_repo.create = AsyncMock()

        result = await register_use_case.execute(
            RegisterCommandDTO(username="alice", password="")
        )

        assert result.is_err()
        assert result.error.code == "INVALID_INPUT"
        mock_user_repo.create.assert_not_called()

    async def test_unhashable_password_is_invalid_input(
        self, register_use_case, mock_user_repo, mock_password_hasher
    ):
        mock_user_repo.get_by_username = AsyncMock(return_value=None)
        mock_user_repo.create = AsyncMock()
        mock_password_hasher.hash = AsyncMock(side_effect=ValueError("too long"))

        result = await register_use_case.execute(
            RegisterCommandDTO(username="alice", password="x" * 100)
        )

        assert result.is_err()
        assert result.error.code == "INVALID_INPUT"
        mock_user_repo.create.assert_not_called()


@pytest.mark.asyncio
class TestRegisterUserDuplicate:
    async def test_existing_username_is_duplicate(
        self, register_use_case, mock_user_repo, mock_uow, mock_password_hasher
    ):
        mock_user_repo.get_by_username = AsyncMock(
            return_value=User(id=1, username="alice", password_hash="hashed:old")
        )
        mock_user_repo.create = AsyncMock()

        result = await register_use_case.execute(
            RegisterCommandDTO(username="alice", password="new-secret")
        )

        assert result.is_err()
        assert result.error.code == "DUPLICATE_IDENTITY"
        mock_user_repo.create.assert_not_called()
        mock_password_hasher.hash.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_unique_violation_is_duplicate_and_rolls_back(
        self, register_use_case, mock_user_repo, mock_uow
    ):
        """Lost race: pre-check passed, but the insert hits the unique constraint"""
        mock_user_repo.get_by_username = AsyncMock(return_value=None)
        mock_user_repo.create = AsyncMock(
            side_effect=IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))
        )

        result = await register_use_case.execute(
            RegisterCommandDTO(username="alice", password="pw123")
        )

        assert result.is_err()
        assert result.error.code == "DUPLICATE_IDENTITY"
        mock_uow.rollback.assert_awaited_once()
        mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_storage_failure_is_persistence_error(register_use_case, mock_user_repo, mock_uow):
    mock_user_repo.get_by_username = AsyncMock(
        side_effect=OperationalError("SELECT", {}, Exception("database is locked"))
    )

    result = await register_use_case.execute(
        RegisterCommandDTO(username="alice", password="pw123")
    )

    assert result.is_err()
    assert result.error.code == "PERSISTENCE_ERROR"
    assert "pw123" not in (result.error.reason or "")
    mock_uow.rollback.assert_awaited_once()


@pytest.mark.asyncio
async def test_unexpected_error_rolls_back_pending_user(register_use_case, mock_user_repo, mock_uow):
    mock_user_repo.get_by_username = AsyncMock(return_value=None)
    mock_user_repo.create = AsyncMock(side_effect=RuntimeError("worker cancelled"))

    with pytest.raises(RuntimeError):
        await register_use_case.execute(RegisterCommandDTO(username="alice", password="pw123"))

    mock_uow.__aenter__.assert_awaited_once()
    mock_uow.rollback.assert_awaited_once()
    mock_uow.commit.assert_not_called()
