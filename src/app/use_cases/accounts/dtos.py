"""Data Transfer Objects for Account Use Cases

Pydantic models for command inputs and response outputs.
Secrets are carried as SecretStr so they never show up in reprs or logs.
"""

from datetime import datetime
from pydantic import BaseModel, Field, SecretStr


class RegisterCommandDTO(BaseModel):
    """
    Command DTO for registering a user

    Emptiness is checked by the RegisterUser use case, not here, so that
    it is reported as INVALID_INPUT.
    """

    username: str = Field(
        ...,
        description="Requested username (must be non-empty)"
    )

    password: SecretStr = Field(
        ...,
        description="Plaintext secret (must be non-empty)"
    )


class CredentialsDTO(BaseModel):
    """Username and secret presented by a caller on each request"""

    username: str
    password: SecretStr


class UserResponseDTO(BaseModel):
    """Registered user, without any secret material"""

    user_id: int
    username: str
    created_at: datetime

    class Config:
        json_schema_extra = {
            "example": {
                "user_id": 1,
                "username": "alice",
                "created_at": "2024-01-01T00:00:00Z"
            }
        }
