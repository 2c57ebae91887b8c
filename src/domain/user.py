"""User Domain Entity

Identity record owned by the credential store. Only the bcrypt hash of the
secret is stored; usernames are unique and never change once created.
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import String
from src.domain.base import BaseModel, IdType, UTCDateTime, utc_now


class User(BaseModel, table=True):
    """
    User - Registered identity

    Domain Rules:
    - username is unique and non-empty
    - password_hash is a salted bcrypt hash, never the plaintext secret
    - id is the stable handle used to scope ledger operations
    - Users are never updated or deleted
    """

    __tablename__ = "users"

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique user identifier (auto-increment)"
    )

    username: str = Field(
        sa_column=Column(String(255), unique=True, index=True, nullable=False),
        description="Unique login name (immutable)"
    )

    password_hash: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="bcrypt hash of the user's secret"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(UTCDateTime(), nullable=False),
        description="Registration timestamp"
    )
