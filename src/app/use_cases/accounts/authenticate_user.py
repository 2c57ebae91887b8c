"""AuthenticateUser Use Case

Verifies a username/secret pair and returns the user's handle.
"""

import logging
from sqlalchemy.exc import SQLAlchemyError
from libs.result import Result, Return, Error
from src.app.errors import ErrorCode
from src.app.services.password_hasher import PasswordHasher
from src.app.repositories.user_repository import UserRepository
from src.domain.user_handle import UserHandle
from .dtos import CredentialsDTO

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"


class AuthenticateUser:
    """
    Use Case: Authenticate a user

    Unknown usernames and wrong secrets keep distinct error codes, but share
    one message and cost the same bcrypt work, so neither the text nor the
    timing tells them apart.
    """

    def __init__(self, user_repo: UserRepository, password_hasher: PasswordHasher):
        self.user_repo = user_repo
        self.password_hasher = password_hasher

    async def execute(self, credentials: CredentialsDTO) -> Result[UserHandle]:
        """
        Execute authentication

        Args:
            credentials: CredentialsDTO with username and password

        Returns:
            Result[UserHandle]: Handle of the authenticated user or error

        Errors:
            UNKNOWN_IDENTITY: No user with this username
            BAD_SECRET: Secret does not match the stored hash
            PERSISTENCE_ERROR: Storage failure
        """
        secret = credentials.password.get_secret_value()

        try:
            user = await self.user_repo.get_by_username(credentials.username)
        except SQLAlchemyError as e:
            logger.error("User lookup failed during authentication: %s", e)
            return Return.err(
                Error(
                    code=ErrorCode.PERSISTENCE_ERROR.value,
                    message="Failed to authenticate user",
                    reason=str(e),
                )
            )

        if user is None:
            await self.password_hasher.burn(secret)
            logger.info("Authentication failed for unknown user %s", credentials.username)
            return Return.err(
                Error(
                    code=ErrorCode.UNKNOWN_IDENTITY.value,
                    message=INVALID_CREDENTIALS_MESSAGE,
                )
            )

        if not await self.password_hasher.verify(secret, user.password_hash):
            logger.info("Authentication failed for user %s", credentials.username)
            return Return.err(
                Error(
                    code=ErrorCode.BAD_SECRET.value,
                    message=INVALID_CREDENTIALS_MESSAGE,
                )
            )

        return Return.ok(UserHandle(user_id=user.id))
