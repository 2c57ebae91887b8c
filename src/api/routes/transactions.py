"""Transaction API Routes

FastAPI routes for the authenticated user's ledger. Every request goes
through the ownership gate with the request's own credentials.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.transaction_request import AddTransactionRequestSchema
from src.api.security import get_credentials, raise_for_error
from src.app.services.password_hasher import PasswordHasher
from src.app.use_cases.accounts import CredentialsDTO
from src.app.use_cases.ledger import (
    AddTransactionCommandDTO,
    TransactionResponseDTO,
    ListTransactionsResponseDTO,
)
from src.depends import get_session, get_password_hasher, build_ownership_gate

router = APIRouter(prefix="/transactions", tags=["Transactions"])

UNAUTHORIZED_RESPONSE = {
    401: {
        "description": "Invalid username or password",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "UNAUTHORIZED",
                        "message": "Invalid username or password"
                    }
                }
            }
        }
    }
}


@router.get(
    "",
    response_model=ListTransactionsResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=UNAUTHORIZED_RESPONSE,
)
async def list_transactions(
    credentials: CredentialsDTO = Depends(get_credentials),
    session: AsyncSession = Depends(get_session),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    List the caller's transactions in insertion order.

    **Returns:**
    - 200: Transactions with count and balance
    - 401: Invalid username or password
    """
    gate = build_ownership_gate(session, password_hasher)
    result = await gate.list_for(credentials)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "",
    response_model=TransactionResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses=UNAUTHORIZED_RESPONSE,
)
async def add_transaction(
    request: AddTransactionRequestSchema,
    credentials: CredentialsDTO = Depends(get_credentials),
    session: AsyncSession = Depends(get_session),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Add a transaction to the caller's ledger.

    **Request body:**
    - `description` (optional): Free-form text
    - `amount` (required): Signed amount, negative for debits

    **Example request:**
    ```json
    {
      "description": "rent",
      "amount": "-1200.00"
    }
    ```

    **Returns:**
    - 201: Stored transaction with assigned id and timestamp
    - 400: Invalid amount
    - 401: Invalid username or password
    """
    gate = build_ownership_gate(session, password_hasher)
    command = AddTransactionCommandDTO(
        description=request.description,
        amount=request.amount,
    )
    result = await gate.add_for(credentials, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
