"""Error codes returned by use cases"""

from enum import Enum


class ErrorCode(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    DUPLICATE_IDENTITY = "DUPLICATE_IDENTITY"
    UNKNOWN_IDENTITY = "UNKNOWN_IDENTITY"
    BAD_SECRET = "BAD_SECRET"
    PERSISTENCE_ERROR = "PERSISTENCE_ERROR"


# Codes the dispatch layer must report as one indistinguishable failure
AUTHENTICATION_FAILURES = frozenset(
    {ErrorCode.UNKNOWN_IDENTITY.value, ErrorCode.BAD_SECRET.value}
)
