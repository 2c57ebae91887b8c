"""Ownership Gate

Binds every ledger operation to the identity that owns it. Each call
re-proves (or, for trusted callers, re-resolves) identity; there is no
session state, and the gate keeps nothing between calls.
"""

from libs.result import Result, Return
from src.app.use_cases.accounts.authenticate_user import AuthenticateUser
from src.app.use_cases.accounts.resolve_user import ResolveUser
from src.app.use_cases.accounts.dtos import CredentialsDTO
from .add_transaction import AddTransaction
from .list_transactions import ListTransactions
from .dtos import (
    AddTransactionCommandDTO,
    TransactionResponseDTO,
    ListTransactionsResponseDTO,
)


class OwnershipGate:
    def __init__(
        self,
        authenticate_user: AuthenticateUser,
        resolve_user: ResolveUser,
        add_transaction: AddTransaction,
        list_transactions: ListTransactions,
    ):
        self.authenticate_user = authenticate_user
        self.resolve_user = resolve_user
        self.add_transaction = add_transaction
        self.list_transactions = list_transactions

    async def add_for(
        self, credentials: CredentialsDTO, command: AddTransactionCommandDTO
    ) -> Result[TransactionResponseDTO]:
        """Authenticate, then add a transaction owned by the caller"""
        identity = await self.authenticate_user.execute(credentials)
        if identity.is_err():
            return Return.err(identity.error)
        return await self.add_transaction.execute(identity.value, command)

    async def list_for(self, credentials: CredentialsDTO) -> Result[ListTransactionsResponseDTO]:
        """Authenticate, then list the caller's transactions"""
        identity = await self.authenticate_user.execute(credentials)
        if identity.is_err():
            return Return.err(identity.error)
        return await self.list_transactions.execute(identity.value)

    async def list_for_username(self, username: str) -> Result[ListTransactionsResponseDTO]:
        """
        Resolve a username without a secret, then list its transactions

        Only for trusted operator tooling; request handlers use list_for().
        """
        identity = await self.resolve_user.execute(username)
        if identity.is_err():
            return Return.err(identity.error)
        return await self.list_transactions.execute(identity.value)
