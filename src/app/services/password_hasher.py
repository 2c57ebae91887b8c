"""Password Hasher Interface

Defines the contract for deriving and checking salted secret hashes.
"""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """
    Abstract one-way hasher for user secrets

    Implementations must use a slow, adaptive algorithm with an embedded
    salt, and compare in constant time.
    """

    @abstractmethod
    async def hash(self, secret: str) -> str:
        """
        Derive a salted hash for a plaintext secret

        Args:
            secret: Plaintext secret

        Returns:
            Encoded hash, safe to persist
        """
        pass

    @abstractmethod
    async def verify(self, secret: str, password_hash: str) -> bool:
        """
        Check a plaintext secret against a stored hash

        Args:
            secret: Plaintext secret presented by the caller
            password_hash: Hash previously produced by hash()

        Returns:
            True if the secret matches, False otherwise
        """
        pass

    @abstractmethod
    async def burn(self, secret: str) -> None:
        """
        Spend the same work as verify() without a stored hash

        Called when the username is unknown so that a failed lookup costs
        as much time as a wrong secret.
        """
        pass
