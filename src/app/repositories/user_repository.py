"""User Repository Interface

Defines the contract for user persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.user import User


class UserRepository(ABC):
    """
    Repository interface for User persistence

    Usernames are unique; the backing store must enforce this itself.
    """

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Create a new user

        Args:
            user: User entity to persist

        Returns:
            Created User with generated ID

        Raises:
            IntegrityError: If the username already exists
        """
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """
        Retrieve user by username

        Args:
            username: Exact username

        Returns:
            User if found, None otherwise
        """
        pass
