"""AddTransaction Use Case

Appends a transaction to an owner's ledger.
"""

import logging
from decimal import Decimal, ROUND_HALF_EVEN
from sqlalchemy.exc import SQLAlchemyError
from libs.result import Result, Return, Error
from src.app.errors import ErrorCode
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.transaction_repository import TransactionRepository
from src.domain.transaction import Transaction
from src.domain.user_handle import UserHandle
from .dtos import AddTransactionCommandDTO, TransactionResponseDTO

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")
# SQLite stores Numeric as a double, which keeps cents exact only up to
# 13 integer digits
MAX_ABS_AMOUNT = Decimal("1e13")


class AddTransaction:
    """
    Use Case: Add a transaction to the owner's ledger

    Business Rules:
    1. Amount must be finite and stay below 1e13; it is rounded to cents
    2. Description defaults to empty
    3. id and created_at are assigned by the store
    4. Insert is all-or-nothing (commit, or rollback on failure)

    Retrying after PERSISTENCE_ERROR may create a duplicate entry; there is
    no idempotency key.
    """

    def __init__(self, uow: UnitOfWork, transaction_repo: TransactionRepository):
        self.uow = uow
        self.transaction_repo = transaction_repo

    async def execute(
        self, owner: UserHandle, command: AddTransactionCommandDTO
    ) -> Result[TransactionResponseDTO]:
        """
        Execute transaction creation

        Args:
            owner: Handle of the authenticated owner
            command: AddTransactionCommandDTO with description and amount

        Returns:
            Result[TransactionResponseDTO]: Stored transaction or error

        Errors:
            INVALID_INPUT: Amount is NaN, infinite or out of range
            PERSISTENCE_ERROR: Storage failure
        """
        amount = command.amount
        if not amount.is_finite():
            return Return.err(
                Error(
                    code=ErrorCode.INVALID_INPUT.value,
                    message="Amount must be a finite number",
                    reason=f"amount={amount}",
                )
            )
        if abs(amount) < MAX_ABS_AMOUNT:
            amount = amount.quantize(CENTS, rounding=ROUND_HALF_EVEN)
        if abs(amount) >= MAX_ABS_AMOUNT:
            return Return.err(
                Error(
                    code=ErrorCode.INVALID_INPUT.value,
                    message="Amount is out of range",
                    reason=f"amount={amount}",
                )
            )

        transaction = Transaction(
            user_id=owner.user_id,
            description=command.description or "",
            amount=amount,
        )

        async with self.uow:
            try:
                created_transaction = await self.transaction_repo.create(transaction)
                await self.uow.commit()
            except SQLAlchemyError as e:
                await self.uow.rollback()
                logger.error("Failed to add transaction for user_id=%s: %s", owner.user_id, e)
                return Return.err(
                    Error(
                        code=ErrorCode.PERSISTENCE_ERROR.value,
                        message="Failed to add transaction",
                        reason=str(e),
                    )
                )

        return Return.ok(to_response_dto(created_transaction))


def to_response_dto(transaction: Transaction) -> TransactionResponseDTO:
    return TransactionResponseDTO(
        id=transaction.id,
        description=transaction.description,
        amount=transaction.amount,
        created_at=transaction.created_at,
    )
