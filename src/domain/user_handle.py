"""UserHandle Value Object

Opaque reference to a resolved identity. It carries the internal user id
only, so a handle never exposes the username it was resolved from.
"""

from pydantic import BaseModel, ConfigDict


class UserHandle(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_id: int
