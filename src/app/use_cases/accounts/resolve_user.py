"""ResolveUser Use Case

Looks up a user's handle by username without checking a secret.
Only for callers that have already established identity another way.
"""

from sqlalchemy.exc import SQLAlchemyError
from libs.result import Result, Return, Error
from src.app.errors import ErrorCode
from src.app.repositories.user_repository import UserRepository
from src.domain.user_handle import UserHandle
from .authenticate_user import INVALID_CREDENTIALS_MESSAGE


class ResolveUser:
    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def execute(self, username: str) -> Result[UserHandle]:
        """
        Resolve a username to its handle

        Errors:
            UNKNOWN_IDENTITY: No user with this username (same error as AuthenticateUser)
            PERSISTENCE_ERROR: Storage failure
        """
        try:
            user = await self.user_repo.get_by_username(username)
        except SQLAlchemyError as e:
            return Return.err(
                Error(
                    code=ErrorCode.PERSISTENCE_ERROR.value,
                    message="Failed to resolve user",
                    reason=str(e),
                )
            )

        if user is None:
            return Return.err(
                Error(
                    code=ErrorCode.UNKNOWN_IDENTITY.value,
                    message=INVALID_CREDENTIALS_MESSAGE,
                )
            )

        return Return.ok(UserHandle(user_id=user.id))
