"""SQLAlchemy implementation of TransactionRepository

Provides append-only persistence for Transaction entities, scoped by owner.
"""

from typing import List
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.transaction_repository import TransactionRepository
from src.domain.base import utc_now
from src.domain.transaction import Transaction


class SqlAlchemyTransactionRepository(TransactionRepository):
    """
    SQLAlchemy implementation of TransactionRepository

    Features:
    - Store-assigned id (auto-increment) and created_at
    - Owner-scoped reads ordered by id
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, transaction: Transaction) -> Transaction:
        transaction.id = None
        transaction.created_at = utc_now()
        self.session.add(transaction)
        await self.session.flush()
        await self.session.refresh(transaction)
        return transaction

    async def list_by_user_id(self, user_id: int) -> List[Transaction]:
        stmt = (
            select(Transaction)
            .where(Transaction.user_id == user_id)
            .order_by(Transaction.id.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
