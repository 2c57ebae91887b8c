"""Integration tests for a saturated connection pool

With every pooled connection checked out, store calls give up after
DB_POOL_TIMEOUT and report a persistence failure instead of waiting forever.
"""

import asyncio
import pytest
import pytest_asyncio

from src.adapter.repositories.transaction_repository import SqlAlchemyTransactionRepository
from src.adapter.repositories.user_repository import SqlAlchemyUserRepository
from src.adapter.services.database import (
    create_engine_from_config,
    create_session_factory,
    init_db,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.accounts import AuthenticateUser, CredentialsDTO, RegisterCommandDTO, RegisterUser
from src.app.use_cases.ledger import AddTransaction, AddTransactionCommandDTO, ListTransactions
from src.domain.user_handle import UserHandle


@pytest.fixture
def single_connection_config(test_config):
    class SingleConnectionConfig(test_config):
        DB_POOL_SIZE = 1
        DB_MAX_OVERFLOW = 0
        DB_POOL_TIMEOUT = 0.2

    return SingleConnectionConfig


@pytest_asyncio.fixture
async def small_engine(single_connection_config):
    engine = create_engine_from_config(single_connection_config)
    await init_db(engine)

    yield engine

    await engine.dispose()


@pytest.mark.asyncio
class TestPoolExhaustion:
    async def test_list_reports_persistence_error(self, small_engine):
        session_factory = create_session_factory(small_engine)

        async with small_engine.connect():
            async with session_factory() as session:
                result = await asyncio.wait_for(
                    ListTransactions(SqlAlchemyTransactionRepository(session)).execute(
                        UserHandle(user_id=1)
                    ),
                    timeout=5,
                )

        assert result.is_err()
        assert result.error.code == "PERSISTENCE_ERROR"

    async def test_authenticate_reports_persistence_error(self, small_engine, password_hasher):
        session_factory = create_session_factory(small_engine)

        async with small_engine.connect():
            async with session_factory() as session:
                result = await asyncio.wait_for(
                    AuthenticateUser(SqlAlchemyUserRepository(session), password_hasher).execute(
                        CredentialsDTO(username="alice", password="pw123")
                    ),
                    timeout=5,
                )

        assert result.error.code == "PERSISTENCE_ERROR"

    async def test_add_reports_persistence_error_and_store_recovers(
        self, small_engine, password_hasher
    ):
        session_factory = create_session_factory(small_engine)
        async with session_factory() as session:
            registered = await RegisterUser(
                SqlAlchemyUnitOfWork(session), SqlAlchemyUserRepository(session), password_hasher
            ).execute(RegisterCommandDTO(username="alice", password="pw123"))
        owner = UserHandle(user_id=registered.value.user_id)

        async with small_engine.connect():
            async with session_factory() as session:
                repo = SqlAlchemyTransactionRepository(session)
                blocked = await asyncio.wait_for(
                    AddTransaction(SqlAlchemyUnitOfWork(session), repo).execute(
                        owner, AddTransactionCommandDTO(description="rent", amount=-1200)
                    ),
                    timeout=5,
                )

        assert blocked.error.code == "PERSISTENCE_ERROR"

        async with session_factory() as session:
            listed = await ListTransactions(SqlAlchemyTransactionRepository(session)).execute(owner)

        assert listed.is_ok()
        assert listed.value.transactions == []
