"""RegisterUser Use Case

Creates a user with a bcrypt-hashed secret. The unique constraint on
username is the authority on duplicates, so concurrent registrations of
the same name produce exactly one user.
"""

import logging
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from libs.result import Result, Return, Error
from src.app.errors import ErrorCode
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.password_hasher import PasswordHasher
from src.app.repositories.user_repository import UserRepository
from src.domain.user import User
from .dtos import RegisterCommandDTO, UserResponseDTO

logger = logging.getLogger(__name__)


class RegisterUser:
    """
    Use Case: Register a new user

    Business Rules:
    1. Username and secret must be non-empty
    2. Secret is stored only as a salted bcrypt hash
    3. Username is unique; a duplicate leaves the existing record untouched
    4. User insert is atomic (single commit, rollback on any failure)
    """

    def __init__(
        self,
        uow: UnitOfWork,
        user_repo: UserRepository,
        password_hasher: PasswordHasher,
    ):
        self.uow = uow
        self.user_repo = user_repo
        self.password_hasher = password_hasher

    async def execute(self, command: RegisterCommandDTO) -> Result[UserResponseDTO]:
        """
        Execute user registration

        Args:
            command: RegisterCommandDTO with username and password

        Returns:
            Result[UserResponseDTO]: Created user or error

        Errors:
            INVALID_INPUT: Empty username or secret, or secret too long to hash
            DUPLICATE_IDENTITY: Username already taken
            PERSISTENCE_ERROR: Storage failure
        """
        username = command.username
        secret = command.password.get_secret_value()

        if not username or not username.strip():
            return Return.err(
                Error(
                    code=ErrorCode.INVALID_INPUT.value,
                    message="Username must not be empty",
                )
            )
        if not secret:
            return Return.err(
                Error(
                    code=ErrorCode.INVALID_INPUT.value,
                    message="Password must not be empty",
                )
            )

        async with self.uow:
            try:
                existing_user = await self.user_repo.get_by_username(username)
                if existing_user:
                    return self._duplicate(username)

                try:
                    password_hash = await self.password_hasher.hash(secret)
                except ValueError as e:
                    return Return.err(
                        Error(
                            code=ErrorCode.INVALID_INPUT.value,
                            message="Password cannot be used",
                            reason=str(e),
                        )
                    )

                user = await self.user_repo.create(
                    User(username=username, password_hash=password_hash)
                )
                await self.uow.commit()

            except IntegrityError:
                # Lost a race with a concurrent registration of the same name
                await self.uow.rollback()
                return self._duplicate(username)

            except SQLAlchemyError as e:
                await self.uow.rollback()
                logger.error("Failed to register user %s: %s", username, e)
                return Return.err(
                    Error(
                        code=ErrorCode.PERSISTENCE_ERROR.value,
                        message="Failed to register user",
                        reason=str(e),
                    )
                )

        logger.info("Registered user %s (id=%s)", user.username, user.id)
        return Return.ok(
            UserResponseDTO(
                user_id=user.id,
                username=user.username,
                created_at=user.created_at,
            )
        )

    def _duplicate(self, username: str) -> Result[UserResponseDTO]:
        logger.info("Registration rejected, username %s already exists", username)
        return Return.err(
            Error(
                code=ErrorCode.DUPLICATE_IDENTITY.value,
                message="Username already exists",
            )
        )
