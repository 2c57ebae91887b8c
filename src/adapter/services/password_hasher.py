"""bcrypt implementation of PasswordHasher

Hashing runs in a worker thread so the event loop is not blocked for the
duration of the key stretching.
"""

import asyncio
import bcrypt
from src.app.services.password_hasher import PasswordHasher

DEFAULT_ROUNDS = 12
MIN_ROUNDS = 4
MAX_ROUNDS = 31

# bcrypt only reads the first 72 bytes of its input
MAX_SECRET_BYTES = 72


class BcryptPasswordHasher(PasswordHasher):
    """
    bcrypt password hasher

    Secrets longer than 72 bytes are rejected on hash() and never verify,
    rather than being silently truncated.

    Args:
        rounds: bcrypt cost factor (log2 of the iteration count), 4-31
    """

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        if not MIN_ROUNDS <= rounds <= MAX_ROUNDS:
            raise ValueError(f"bcrypt rounds must be between {MIN_ROUNDS} and {MAX_ROUNDS}, got {rounds}")
        self.rounds = rounds
        self._dummy_hash = bcrypt.hashpw(b"dummy", bcrypt.gensalt(rounds=rounds))

    async def hash(self, secret: str) -> str:
        encoded = secret.encode("utf-8")
        if len(encoded) > MAX_SECRET_BYTES:
            raise ValueError(f"Password must be at most {MAX_SECRET_BYTES} bytes")
        return await asyncio.to_thread(self._hash, encoded)

    async def verify(self, secret: str, password_hash: str) -> bool:
        encoded = secret.encode("utf-8")
        if len(encoded) > MAX_SECRET_BYTES:
            await self.burn(secret)
            return False
        return await asyncio.to_thread(bcrypt.checkpw, encoded, password_hash.encode("utf-8"))

    async def burn(self, secret: str) -> None:
        encoded = secret.encode("utf-8")[:MAX_SECRET_BYTES]
        await asyncio.to_thread(bcrypt.checkpw, encoded, self._dummy_hash)

    def _hash(self, encoded: bytes) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(encoded, salt).decode("utf-8")
