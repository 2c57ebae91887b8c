from fastapi import Request
from sqlmodel.ext.asyncio.session import AsyncSession
from src.adapter.repositories.user_repository import SqlAlchemyUserRepository
from src.adapter.repositories.transaction_repository import SqlAlchemyTransactionRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.password_hasher import PasswordHasher
from src.app.use_cases.accounts import AuthenticateUser, ResolveUser
from src.app.use_cases.ledger import AddTransaction, ListTransactions, OwnershipGate


async def get_session(request: Request) -> AsyncSession:
    async with request.app.state.session_factory() as session:
        yield session


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def build_ownership_gate(session: AsyncSession, password_hasher: PasswordHasher) -> OwnershipGate:
    """Wire the gate and its use cases to one session"""
    user_repo = SqlAlchemyUserRepository(session)
    transaction_repo = SqlAlchemyTransactionRepository(session)
    return OwnershipGate(
        authenticate_user=AuthenticateUser(user_repo, password_hasher),
        resolve_user=ResolveUser(user_repo),
        add_transaction=AddTransaction(SqlAlchemyUnitOfWork(session), transaction_repo),
        list_transactions=ListTransactions(transaction_repo),
    )
