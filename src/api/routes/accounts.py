"""Account API Routes

FastAPI routes for registration and credential checks.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.account_request import RegisterRequestSchema
from src.api.security import get_credentials, raise_for_error
from src.app.services.password_hasher import PasswordHasher
from src.app.use_cases.accounts.dtos import CredentialsDTO, RegisterCommandDTO
from src.app.use_cases.accounts.register_user import RegisterUser
from src.app.use_cases.accounts.authenticate_user import AuthenticateUser
from src.adapter.repositories.user_repository import SqlAlchemyUserRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session, get_password_hasher

router = APIRouter(tags=["Accounts"])


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Empty username or password"},
        409: {
            "description": "Username already exists",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "DUPLICATE_IDENTITY",
                            "message": "Username already exists"
                        }
                    }
                }
            }
        },
    }
)
async def register(
    request: RegisterRequestSchema,
    session: AsyncSession = Depends(get_session),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Register a new user.

    **Request body:**
    - `username` (required): Unique, non-empty username
    - `password` (required): Non-empty password

    **Returns:**
    - 201: User registered
    - 400: Empty username or password
    - 409: Username already exists
    """
    uow = SqlAlchemyUnitOfWork(session)
    user_repo = SqlAlchemyUserRepository(session)

    command = RegisterCommandDTO(username=request.username, password=request.password)

    use_case = RegisterUser(uow, user_repo, password_hasher)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return {"message": "User registered successfully", "username": result.value.username}


@router.post("/login", status_code=status.HTTP_200_OK)
async def login(
    credentials: CredentialsDTO = Depends(get_credentials),
    session: AsyncSession = Depends(get_session),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Check HTTP Basic credentials.

    No token is issued; clients send the same credentials with every
    transaction request.

    **Returns:**
    - 200: Credentials are valid
    - 401: Invalid username or password
    """
    use_case = AuthenticateUser(SqlAlchemyUserRepository(session), password_hasher)
    result = await use_case.execute(credentials)

    if result.is_err():
        raise_for_error(result.error)

    return {"message": "Login successful"}
