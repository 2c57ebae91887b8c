"""Transaction Repository Interface

Defines the contract for ledger transaction persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.transaction import Transaction


class TransactionRepository(ABC):
    """
    Repository interface for Transaction persistence

    Transactions are append-only and always scoped to one owner.
    """

    @abstractmethod
    async def create(self, transaction: Transaction) -> Transaction:
        """
        Create a new transaction

        The repository assigns id and created_at; any values already set on
        the entity are overwritten.

        Args:
            transaction: Transaction entity to persist

        Returns:
            Created Transaction with generated ID and timestamp
        """
        pass

    @abstractmethod
    async def list_by_user_id(self, user_id: int) -> List[Transaction]:
        """
        Retrieve all transactions owned by a user

        Args:
            user_id: Owning user ID

        Returns:
            Transactions in insertion order (id ascending), empty if none
        """
        pass
