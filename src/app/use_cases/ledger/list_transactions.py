"""
List Transactions Use Case

Retrieves every transaction belonging to one owner.
"""
import logging
from decimal import Decimal
from sqlalchemy.exc import SQLAlchemyError
from libs.result import Result, Return, Error
from src.app.errors import ErrorCode
from src.app.repositories.transaction_repository import TransactionRepository
from src.domain.user_handle import UserHandle
from .add_transaction import to_response_dto
from .dtos import ListTransactionsResponseDTO

logger = logging.getLogger(__name__)


class ListTransactions:
    """
    Use case: View own transactions

    Transactions are ordered by id ascending (insertion order).
    An owner with no transactions gets an empty list, not an error.
    """

    def __init__(self, transaction_repo: TransactionRepository):
        self.transaction_repo = transaction_repo

    async def execute(self, owner: UserHandle) -> Result[ListTransactionsResponseDTO]:
        """
        List transactions for an owner.

        Args:
            owner: Handle of the authenticated owner

        Returns:
            Result[ListTransactionsResponseDTO]: Transactions with count and balance
        """
        try:
            transactions = await self.transaction_repo.list_by_user_id(owner.user_id)
        except SQLAlchemyError as e:
            logger.error("Failed to list transactions for user_id=%s: %s", owner.user_id, e)
            return Return.err(
                Error(
                    code=ErrorCode.PERSISTENCE_ERROR.value,
                    message="Failed to list transactions",
                    reason=str(e),
                )
            )

        transaction_dtos = [to_response_dto(txn) for txn in transactions]

        return Return.ok(
            ListTransactionsResponseDTO(
                transactions=transaction_dtos,
                total=len(transaction_dtos),
                balance=sum((txn.amount for txn in transaction_dtos), Decimal("0.00")),
            )
        )
