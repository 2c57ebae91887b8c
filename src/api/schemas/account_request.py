"""Request schemas for Account API

Pydantic models for validating incoming HTTP requests.
"""

from pydantic import BaseModel, Field


class RegisterRequestSchema(BaseModel):
    """
    Request schema for registering a user

    Used for POST /api/register endpoint.
    """

    username: str = Field(
        ...,
        description="Requested username"
    )

    password: str = Field(
        ...,
        description="Plaintext password"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "username": "alice",
                "password": "pw123"
            }
        }
