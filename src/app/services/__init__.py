from .unit_of_work import UnitOfWork
from .password_hasher import PasswordHasher

__all__ = [
    "UnitOfWork",
    "PasswordHasher",
]
