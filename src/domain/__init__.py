from .base import BaseModel
from .user import User
from .user_handle import UserHandle
from .transaction import Transaction

__all__ = [
    "BaseModel",
    "User",
    "UserHandle",
    "Transaction",
]
