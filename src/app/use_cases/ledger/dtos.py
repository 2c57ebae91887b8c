"""Data Transfer Objects for Ledger Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field


class AddTransactionCommandDTO(BaseModel):
    """
    Command DTO for adding a transaction

    Only description and amount come from the caller; id and timestamp are
    always assigned by the store. Non-finite amounts are allowed through so
    the AddTransaction use case can reject them as INVALID_INPUT.
    """

    description: Optional[str] = Field(
        default="",
        description="Free-form description (may be empty)"
    )

    amount: Decimal = Field(
        ...,
        allow_inf_nan=True,
        description="Signed amount: negative for debits, positive for credits"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "description": "coffee",
                "amount": "-4.50"
            }
        }


class TransactionResponseDTO(BaseModel):
    """Single ledger entry as returned to the owner"""

    id: int
    description: str
    amount: Decimal
    created_at: datetime

    class Config:
        json_schema_extra = {
            "example": {
                "id": 1,
                "description": "rent",
                "amount": "-1200.00",
                "created_at": "2024-01-01T00:00:00Z"
            }
        }


class ListTransactionsResponseDTO(BaseModel):
    """All of one owner's transactions in insertion order"""

    transactions: List[TransactionResponseDTO]
    total: int = Field(description="Number of transactions")
    balance: Decimal = Field(description="Sum of all transaction amounts")
