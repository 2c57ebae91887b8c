"""Transaction Domain Entity

A single financial entry in a user's ledger. Entries are append-only:
the store assigns id and created_at, and nothing updates or deletes them.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Numeric, String
from src.domain.base import BaseModel, IdType, UTCDateTime, utc_now


class Transaction(BaseModel, table=True):
    """
    Transaction - Personal ledger entry

    Domain Rules:
    - Owned by exactly one User via user_id (no cascade, users are never deleted)
    - amount is signed: negative for debits, positive for credits
    - amount must be finite
    - id and created_at are assigned by the store at insertion
    """

    __tablename__ = "transactions"
    __table_args__ = (
        Index('ix_transactions_user_id_id', 'user_id', 'id'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique transaction identifier (auto-increment)"
    )

    user_id: int = Field(
        sa_column=Column(IdType, ForeignKey("users.id"), nullable=False),
        description="Foreign key to the owning User"
    )

    description: str = Field(
        default="",
        sa_column=Column(String, nullable=False, default=""),
        description="Free-form description (may be empty)"
    )

    amount: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Signed amount (precision: 18,2)"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(UTCDateTime(), nullable=False),
        description="Insertion timestamp (assigned by the store)"
    )
