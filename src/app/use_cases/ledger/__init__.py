"""Ledger use cases"""
from .add_transaction import AddTransaction
from .list_transactions import ListTransactions
from .ownership_gate import OwnershipGate
from .dtos import (
    AddTransactionCommandDTO,
    TransactionResponseDTO,
    ListTransactionsResponseDTO,
)

__all__ = [
    "AddTransaction",
    "ListTransactions",
    "OwnershipGate",
    "AddTransactionCommandDTO",
    "TransactionResponseDTO",
    "ListTransactionsResponseDTO",
]
