"""Request schemas for Transaction API

Pydantic models for validating incoming HTTP requests.
"""

from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field


class AddTransactionRequestSchema(BaseModel):
    """
    Request schema for adding a transaction

    Used for POST /api/transactions endpoint. Unknown fields such as id or
    date are ignored; the store assigns both.
    """

    description: Optional[str] = Field(
        default="",
        description="Free-form description (optional)"
    )

    amount: Decimal = Field(
        ...,
        description="Signed amount: negative for debits, positive for credits"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "description": "coffee",
                "amount": "-4.50"
            }
        }
